"""Value normalization shared by all evaluators.

Record values are coerced at evaluation time and reference values at
construction time, so evaluators only ever compare normalized forms.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence, Set
from numbers import Real
from typing import Any

from core.errors import FilterRuleError


def is_nil(value: Any) -> bool:
    """Return whether a value represents absent data."""
    return value is None


def is_number(value: Any) -> bool:
    """Return whether a value is a real number.

    Booleans are excluded even though ``bool`` subclasses ``int``.
    """
    return isinstance(value, Real) and not isinstance(value, bool)


def convert_value(value: Any) -> Any:
    """Convert numeric values to float and return others unchanged.

    Integers too large for a float are kept exact; Python orders them
    against floats without loss.

    Args:
        value: Raw record value.

    Returns:
        Float for any real number that fits, otherwise the input value.
    """
    if is_number(value):
        try:
            return float(value)
        except OverflowError:
            return value
    return value


def collection_length(value: Any) -> int | None:
    """Return the element count of strings and collections.

    Args:
        value: Raw record value.

    Returns:
        Length for strings, bytes, sequences, mappings, and sets;
        ``None`` for every other kind.
    """
    if isinstance(value, (str, bytes, bytearray, Sequence, Mapping, Set)):
        return len(value)
    return None


def convert_float_value(reference: Any, rule_type: str) -> float:
    """Convert a rule reference to float for numeric operators.

    Args:
        reference: Reference value supplied in the rule.
        rule_type: Operator name, used in error messages.

    Returns:
        Reference as a finite float.

    Raises:
        FilterRuleError: If the reference is not a real number, does not
            fit in a float, or is NaN or infinite.
    """
    if not is_number(reference):
        raise FilterRuleError(
            f"rule of type {rule_type} should have numeric value "
            f"(got {reference!r} ({type(reference).__name__}))"
        )
    try:
        converted = float(reference)
    except OverflowError as error:
        raise FilterRuleError(
            f"rule of type {rule_type} has a numeric value too large for a float"
        ) from error
    if not math.isfinite(converted):
        raise FilterRuleError(
            f"rule of type {rule_type} should have a finite numeric value (got {converted!r})"
        )
    return converted


def convert_string_value(reference: Any, rule_type: str) -> str:
    """Validate a rule reference for string-only operators.

    Args:
        reference: Reference value supplied in the rule.
        rule_type: Operator name, used in error messages.

    Returns:
        Reference string.

    Raises:
        FilterRuleError: If the reference is not a string.
    """
    if not isinstance(reference, str):
        raise FilterRuleError(
            f"rule of type {rule_type} should have string value "
            f"(got {reference!r} ({type(reference).__name__}))"
        )
    return reference


def deep_equal(left: Any, right: Any) -> bool:
    """Compare two normalized values structurally.

    Numbers compare by float value, booleans only equal booleans, and
    sequences and mappings compare element by element.
    """
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    left = convert_value(left)
    right = convert_value(right)
    if isinstance(left, Mapping) and isinstance(right, Mapping):
        if left.keys() != right.keys():
            return False
        return all(deep_equal(left[key], right[key]) for key in left)
    if _is_list_like(left) and _is_list_like(right):
        if len(left) != len(right):
            return False
        return all(deep_equal(item, other) for item, other in zip(left, right))
    if type(left) is not type(right):
        return False
    return bool(left == right)


def _is_list_like(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))
