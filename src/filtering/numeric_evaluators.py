"""Ordering evaluators: lt, lte, gt, gte.

Numbers compare by float value. Strings and collections compare their
length against the reference truncated to an integer.
"""

from __future__ import annotations

import operator
from typing import Any, Callable

from filtering.coercion import (
    collection_length,
    convert_float_value,
    convert_value,
    is_nil,
    is_number,
)
from filtering.evaluator_types import Evaluator, RuleType

_Comparison = Callable[[Any, Any], bool]


class OrderingEvaluator:
    """Compare numbers or collection lengths against a numeric reference."""

    def __init__(self, reference: float, compare: _Comparison) -> None:
        self._reference = reference
        self._length_reference = int(reference)
        self._compare = compare

    def evaluate(self, value: Any) -> bool:
        """Return the ordering result, or False for nil and unsupported kinds."""
        value = convert_value(value)
        if is_nil(value):
            return False
        if is_number(value):
            return self._compare(value, self._reference)
        length = collection_length(value)
        if length is None:
            return False
        return self._compare(length, self._length_reference)


def new_less_than(reference: Any) -> Evaluator:
    """Build an evaluator for ``value < reference``."""
    return OrderingEvaluator(convert_float_value(reference, RuleType.LESS_THAN.value), operator.lt)


def new_less_or_equal(reference: Any) -> Evaluator:
    """Build an evaluator for ``value <= reference``."""
    return OrderingEvaluator(
        convert_float_value(reference, RuleType.LESS_OR_EQUAL.value),
        operator.le,
    )


def new_greater_than(reference: Any) -> Evaluator:
    """Build an evaluator for ``value > reference``."""
    return OrderingEvaluator(
        convert_float_value(reference, RuleType.GREATER_THAN.value),
        operator.gt,
    )


def new_greater_or_equal(reference: Any) -> Evaluator:
    """Build an evaluator for ``value >= reference``."""
    return OrderingEvaluator(
        convert_float_value(reference, RuleType.GREATER_OR_EQUAL.value),
        operator.ge,
    )
