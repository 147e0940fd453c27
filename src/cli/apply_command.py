"""Apply command wiring for rulefilter CLI.

Reads JSON Lines records, filters them in place with one page of
results, and writes the retained records back out as JSON Lines.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, TextIO

from cli.rule_source import add_rule_source_arguments, load_rule_source
from core.errors import FilterError, FilterInputError
from core.logging_config import get_logger
from filtering.processor import Processor

logger = get_logger(__name__)

STDIN_PATH = "-"


def add_apply_command(subparsers: Any) -> None:
    """Register apply subcommand."""
    parser = subparsers.add_parser(
        "apply",
        help="Filter a JSON Lines record file with a rule set",
    )
    parser.add_argument("input", help="JSON Lines record file, or '-' for stdin")
    add_rule_source_arguments(parser)
    parser.add_argument("--offset", type=int, default=0, help="Number of leading matches to skip")
    parser.add_argument(
        "--limit",
        type=int,
        help="Maximum records to keep (defaults to RULEFILTER_MAX_RESULTS)",
    )


def run_apply_command(processor: Processor, args: argparse.Namespace) -> int:
    """Execute the filter and print retained records and a summary line."""
    limit = args.limit if args.limit is not None else processor.max_results
    try:
        rule_set = load_rule_source(args)
        records = read_json_lines(args.input)
        result = processor.apply_subset(rule_set, records, args.offset, limit)
    except FilterError as error:
        print(f"filter_error={error}", file=sys.stderr)
        return 1
    write_json_lines(records, sys.stdout)
    print(
        f"retained={result.retained_count} total_matches={result.total_matches}",
        file=sys.stderr,
    )
    return 0


def read_json_lines(input_path: str) -> list[Any]:
    """Read one JSON value per non-blank line.

    Args:
        input_path: File path, or ``-`` to read stdin.

    Returns:
        Decoded records in file order.

    Raises:
        FilterInputError: If the file is missing or a line is not valid JSON.
    """
    if input_path == STDIN_PATH:
        records = _decode_lines(sys.stdin, "<stdin>")
    else:
        source_file = Path(input_path).expanduser().resolve()
        if not source_file.exists():
            raise FilterInputError(
                f"Record file does not exist at {source_file}. Provide a valid input path."
            )
        try:
            with source_file.open(encoding="utf-8") as handle:
                records = _decode_lines(handle, str(source_file))
        except OSError as error:
            raise FilterInputError(
                f"Failed to read record file at {source_file}: {error}. "
                "Check file permissions and retry."
            ) from error
    logger.info("records_loaded", source=input_path, count=len(records))
    return records


def write_json_lines(records: list[Any], stream: TextIO) -> None:
    """Write records as compact JSON Lines."""
    for record in records:
        stream.write(json.dumps(record, sort_keys=True))
        stream.write("\n")


def _decode_lines(handle: TextIO, source_name: str) -> list[Any]:
    records: list[Any] = []
    for line_number, line in enumerate(handle, start=1):
        if not line.strip():
            continue
        try:
            records.append(json.loads(line))
        except ValueError as error:
            raise FilterInputError(
                f"Invalid JSON on line {line_number} of {source_name}: {error}"
            ) from error
    return records
