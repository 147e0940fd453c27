"""Rulefilter CLI entry points.

This module exposes commands for filtering JSON Lines record files
and validating rule sets. It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from typing import Sequence

from cli.apply_command import add_apply_command, run_apply_command
from cli.validate_command import add_validate_command, run_validate_command
from core.config import FilterConfig
from filtering.processor import Processor


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="rulefilter", description="Rule-set record filter CLI")
    parser.add_argument(
        "--max-rules",
        type=int,
        help="Override RULEFILTER_MAX_RULES for this command",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_apply_command(subparsers)
    add_validate_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the rulefilter CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    processor = _build_processor(args.max_rules)
    if args.command == "apply":
        return run_apply_command(processor, args)
    if args.command == "validate":
        return run_validate_command(processor, args)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_processor(max_rules: int | None) -> Processor:
    """Build a processor with an optional max-rules override.

    Args:
        max_rules: Optional override for the configured rule ceiling.

    Returns:
        Configured processor.
    """
    config = FilterConfig.from_env()
    if max_rules is not None:
        config = replace(config, max_rules=max_rules)
    return Processor.from_config(config)
