"""Shared rule-set source arguments for CLI commands."""

from __future__ import annotations

import argparse

from filtering.rules import RuleSet, load_rule_file, parse_json


def add_rule_source_arguments(parser: argparse.ArgumentParser) -> None:
    """Register mutually exclusive inline and file rule-set options."""
    source_group = parser.add_mutually_exclusive_group(required=True)
    source_group.add_argument("--rules", help="Inline JSON rule set, e.g. '[[{...}]]'")
    source_group.add_argument("--rules-file", help="Path to a .json, .yaml, or .yml rule set")


def load_rule_source(args: argparse.Namespace) -> RuleSet:
    """Parse the rule set selected by CLI arguments.

    Raises:
        FilterRuleError: If the rule set is invalid.
    """
    if args.rules_file:
        return load_rule_file(args.rules_file)
    return parse_json(args.rules)
