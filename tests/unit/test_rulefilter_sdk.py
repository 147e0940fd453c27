"""Unit tests for the public SDK surface."""

from __future__ import annotations

import rulefilter


def test_sdk_filters_records_end_to_end() -> None:
    """SDK exports should parse a rule set and filter records in place."""
    records = [{"n": 1}, {"n": 4}, {"n": 5}, {"n": 9}]
    processor = rulefilter.Processor()
    rule_set = rulefilter.parse_json('[[{"field": "n", "type": "lt", "value": 5}]]')

    retained, total_matches = processor.apply_subset(rule_set, records, 0, 10)

    assert (records, retained, total_matches) == ([{"n": 1}, {"n": 4}], 2, 2)


def test_sdk_lists_supported_rule_types() -> None:
    """Supported operator names should include the ordering operators."""
    assert {"lt", "lte", "gt", "gte"} <= set(rulefilter.supported_rule_types())
