"""Equality and null-check evaluators."""

from __future__ import annotations

from typing import Any

from filtering.coercion import convert_value, deep_equal, is_nil
from filtering.evaluator_types import Evaluator


class EqualEvaluator:
    """Structural equality against a coerced reference value."""

    def __init__(self, reference: Any) -> None:
        self._reference = convert_value(reference)

    def evaluate(self, value: Any) -> bool:
        """Return whether the coerced value deeply equals the reference."""
        if is_nil(value):
            return False
        return deep_equal(value, self._reference)


class NotEqualEvaluator:
    """Structural inequality; absent data never matches."""

    def __init__(self, reference: Any) -> None:
        self._equal = EqualEvaluator(reference)

    def evaluate(self, value: Any) -> bool:
        """Return whether a non-nil value differs from the reference."""
        if is_nil(value):
            return False
        return not self._equal.evaluate(value)


class NullCheckEvaluator:
    """Match on presence or absence of data, ignoring the reference."""

    def __init__(self, expect_null: bool) -> None:
        self._expect_null = expect_null

    def evaluate(self, value: Any) -> bool:
        """Return whether the value's nil state matches the expectation."""
        return is_nil(value) is self._expect_null


def new_equal(reference: Any) -> Evaluator:
    """Build an equality evaluator."""
    return EqualEvaluator(reference)


def new_not_equal(reference: Any) -> Evaluator:
    """Build an inequality evaluator."""
    return NotEqualEvaluator(reference)


def new_is_null(reference: Any) -> Evaluator:
    """Build an evaluator matching only absent values."""
    _ = reference
    return NullCheckEvaluator(expect_null=True)


def new_not_null(reference: Any) -> Evaluator:
    """Build an evaluator matching any present value."""
    _ = reference
    return NullCheckEvaluator(expect_null=False)
