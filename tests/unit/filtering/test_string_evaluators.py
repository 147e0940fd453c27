"""Unit tests for string evaluators."""

from __future__ import annotations

import pytest

from core.errors import FilterRuleError
from filtering.string_evaluators import (
    new_contains,
    new_equal_fold,
    new_has_prefix,
    new_has_suffix,
    new_regexp,
)


def test_has_suffix_rejects_non_string_reference() -> None:
    """Construction should fail for a numeric suffix."""
    with pytest.raises(FilterRuleError, match="hasSuffix"):
        new_has_suffix(5)


def test_has_suffix_is_false_for_nil() -> None:
    """Absent values should not match."""
    assert not new_has_suffix("start").evaluate(None)


def test_has_suffix_is_false_for_non_string_value() -> None:
    """Numbers should not match a string operator."""
    assert not new_has_suffix("start").evaluate(5)


def test_has_suffix_matches_matching_suffix() -> None:
    """Strings ending with the reference should match."""
    assert new_has_suffix("issimo").evaluate("buonissimo")


def test_has_suffix_rejects_other_suffix() -> None:
    """Strings with a different ending should not match."""
    assert not new_has_suffix("err").evaluate("bravissimo")


def test_has_suffix_matches_any_string_with_appended_suffix() -> None:
    """Any prefix followed by the suffix should match."""
    evaluator = new_has_suffix(".log")

    assert all(evaluator.evaluate(head + ".log") for head in ("", "app", "a.b", "ünï"))


def test_has_prefix_matches_leading_text() -> None:
    """Strings starting with the reference should match."""
    assert new_has_prefix("bra").evaluate("bravissimo")


def test_contains_matches_inner_text() -> None:
    """Strings holding the reference anywhere should match."""
    assert new_contains("viss").evaluate("bravissimo")


def test_contains_is_false_for_lists() -> None:
    """Contains only applies to strings, not list membership."""
    assert not new_contains("a").evaluate(["a", "b"])


def test_equal_fold_ignores_case() -> None:
    """Case-insensitive equality should fold both sides."""
    assert new_equal_fold("Straße").evaluate("STRASSE")


def test_regexp_searches_anywhere_in_value() -> None:
    """Patterns should match without being anchored."""
    assert new_regexp(r"\d{3}").evaluate("order-123-x")


def test_regexp_rejects_invalid_pattern() -> None:
    """Construction should fail for a pattern that does not compile."""
    with pytest.raises(FilterRuleError, match="invalid pattern"):
        new_regexp("(unclosed")
