"""Validate command wiring for rulefilter CLI."""

from __future__ import annotations

import argparse
from typing import Any

from cli.rule_source import add_rule_source_arguments, load_rule_source
from core.errors import FilterRuleError
from filtering.processor import Processor
from filtering.rules import count_rules


def add_validate_command(subparsers: Any) -> None:
    """Register validate subcommand."""
    parser = subparsers.add_parser(
        "validate",
        help="Parse a rule set and check it against the rule ceiling",
    )
    add_rule_source_arguments(parser)


def run_validate_command(processor: Processor, args: argparse.Namespace) -> int:
    """Parse and compile a rule set, then report its rule count."""
    try:
        rule_set = load_rule_source(args)
    except FilterRuleError as error:
        print(f"rule_error={error}")
        return 1
    rule_count = count_rules(rule_set)
    if rule_count > processor.max_rules:
        print(f"rule_error=too many rules: got {rule_count} max is {processor.max_rules}")
        return 1
    print(f"rules={rule_count}")
    return 0
