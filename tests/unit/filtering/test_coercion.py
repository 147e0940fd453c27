"""Unit tests for value coercion helpers."""

from __future__ import annotations

from fractions import Fraction

import pytest

from core.errors import FilterRuleError
from filtering.coercion import (
    collection_length,
    convert_float_value,
    convert_string_value,
    convert_value,
    deep_equal,
)


def test_convert_value_turns_integers_into_floats() -> None:
    """Integer values should be normalized to float."""
    converted = convert_value(7)

    assert isinstance(converted, float) and converted == 7.0


def test_convert_value_accepts_other_real_numbers() -> None:
    """Fractions should also be normalized to float."""
    assert convert_value(Fraction(5, 2)) == 2.5


def test_convert_value_leaves_booleans_untouched() -> None:
    """Booleans should never be treated as numbers."""
    assert convert_value(True) is True


def test_collection_length_counts_mapping_entries() -> None:
    """Mappings should report their entry count."""
    assert collection_length({"a": 1, "b": 2}) == 2


def test_collection_length_is_none_for_scalars() -> None:
    """Scalar values have no collection length."""
    assert collection_length(5.0) is None


def test_convert_float_value_rejects_numeric_strings() -> None:
    """Numeric references must be actual numbers, not strings."""
    with pytest.raises(FilterRuleError, match="rule of type lt should have numeric value"):
        convert_float_value("5", "lt")


def test_convert_float_value_rejects_booleans() -> None:
    """Boolean references should not pass as numbers."""
    with pytest.raises(FilterRuleError):
        convert_float_value(True, "gte")


def test_convert_string_value_names_operator_value_and_type() -> None:
    """String reference errors should describe the offending value."""
    with pytest.raises(FilterRuleError) as error_info:
        convert_string_value(5, "hasSuffix")

    message = str(error_info.value)

    assert "hasSuffix" in message and "5" in message and "int" in message


def test_deep_equal_matches_int_and_float() -> None:
    """Integers and floats of the same value should compare equal."""
    assert deep_equal(5, 5.0)


def test_deep_equal_keeps_booleans_apart_from_numbers() -> None:
    """True should not equal 1."""
    assert not deep_equal(True, 1)


def test_deep_equal_compares_nested_collections() -> None:
    """Nested lists and mappings should compare element by element."""
    assert deep_equal({"a": [1, 2], "b": "x"}, {"a": (1.0, 2.0), "b": "x"})


def test_deep_equal_rejects_different_kinds() -> None:
    """A string should not equal a number with the same text."""
    assert not deep_equal("5", 5)


def test_convert_value_keeps_integers_too_large_for_float() -> None:
    """Huge integers should stay exact instead of overflowing."""
    assert convert_value(10**400) == 10**400


def test_convert_float_value_rejects_nan_reference() -> None:
    """NaN references should be rule errors."""
    with pytest.raises(FilterRuleError, match="finite"):
        convert_float_value(float("nan"), "lt")


def test_convert_float_value_rejects_infinite_reference() -> None:
    """Infinite references should be rule errors."""
    with pytest.raises(FilterRuleError, match="finite"):
        convert_float_value(float("-inf"), "gt")


def test_convert_float_value_rejects_integer_too_large_for_float() -> None:
    """References beyond float range should be rule errors."""
    with pytest.raises(FilterRuleError, match="too large"):
        convert_float_value(10**400, "gte")
