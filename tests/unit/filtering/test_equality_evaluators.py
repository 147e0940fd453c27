"""Unit tests for equality and null-check evaluators."""

from __future__ import annotations

from filtering.equality_evaluators import new_equal, new_is_null, new_not_equal, new_not_null


def test_equal_matches_after_numeric_coercion() -> None:
    """Integer reference should equal a float value."""
    assert new_equal(5).evaluate(5.0)


def test_equal_is_false_for_nil() -> None:
    """Absent values should never equal a reference."""
    assert not new_equal("x").evaluate(None)


def test_equal_compares_lists_structurally() -> None:
    """Lists should equal element by element."""
    assert new_equal(["a", 1]).evaluate(("a", 1.0))


def test_equal_does_not_match_boolean_to_number() -> None:
    """A boolean value should not equal a numeric reference."""
    assert not new_equal(1).evaluate(True)


def test_not_equal_matches_different_value() -> None:
    """Different values should satisfy not-equal."""
    assert new_not_equal(5).evaluate(4)


def test_not_equal_is_false_for_nil() -> None:
    """Absent values should not satisfy not-equal either."""
    assert not new_not_equal(5).evaluate(None)


def test_is_null_matches_only_nil() -> None:
    """Is-null should match None and nothing else."""
    evaluator = new_is_null(None)

    assert (evaluator.evaluate(None), evaluator.evaluate(0), evaluator.evaluate("")) == (
        True,
        False,
        False,
    )


def test_not_null_matches_falsy_values() -> None:
    """Not-null should match present values even when falsy."""
    assert new_not_null(None).evaluate(0)


def test_equal_does_not_raise_for_integers_too_large_for_float() -> None:
    """Huge integers should equal only themselves."""
    huge = 10**400

    assert (new_equal(1).evaluate(huge), new_equal(huge).evaluate(huge)) == (False, True)
