"""Factory mapping operator names onto evaluator constructors.

New operators are added with one RuleType member and one registry entry;
existing evaluators stay untouched.
"""

from __future__ import annotations

from typing import Any, Callable

from core.constants import NEGATION_PREFIX
from core.errors import FilterRuleError
from filtering.coercion import is_nil
from filtering.equality_evaluators import new_equal, new_is_null, new_not_equal, new_not_null
from filtering.evaluator_types import Evaluator, RuleType, supported_rule_types
from filtering.numeric_evaluators import (
    new_greater_or_equal,
    new_greater_than,
    new_less_or_equal,
    new_less_than,
)
from filtering.string_evaluators import (
    new_contains,
    new_equal_fold,
    new_has_prefix,
    new_has_suffix,
    new_regexp,
)

EvaluatorFactory = Callable[[Any], Evaluator]

EVALUATOR_FACTORIES: dict[RuleType, EvaluatorFactory] = {
    RuleType.EQUAL: new_equal,
    RuleType.NOT_EQUAL: new_not_equal,
    RuleType.EQUAL_FOLD: new_equal_fold,
    RuleType.LESS_THAN: new_less_than,
    RuleType.LESS_OR_EQUAL: new_less_or_equal,
    RuleType.GREATER_THAN: new_greater_than,
    RuleType.GREATER_OR_EQUAL: new_greater_or_equal,
    RuleType.HAS_PREFIX: new_has_prefix,
    RuleType.HAS_SUFFIX: new_has_suffix,
    RuleType.CONTAINS: new_contains,
    RuleType.REGEXP: new_regexp,
    RuleType.IS_NULL: new_is_null,
    RuleType.NOT_NULL: new_not_null,
}


class NegatedEvaluator:
    """Invert another evaluator for present values."""

    def __init__(self, inner: Evaluator) -> None:
        self._inner = inner

    def evaluate(self, value: Any) -> bool:
        """Return the inverted result, keeping nil values as non-matches."""
        if is_nil(value):
            return False
        return not self._inner.evaluate(value)


def parse_rule_type(type_name: str) -> tuple[RuleType, bool]:
    """Split a wire operator name into its kind and negation flag.

    Args:
        type_name: Operator name such as ``"gte"`` or ``"!hasPrefix"``.

    Returns:
        Tuple of operator kind and whether the result is negated.

    Raises:
        FilterRuleError: If the name is not a known operator.
    """
    if not isinstance(type_name, str):
        raise FilterRuleError(
            f"rule type should be a string (got {type_name!r} ({type(type_name).__name__}))"
        )
    negate = type_name.startswith(NEGATION_PREFIX)
    base_name = type_name[len(NEGATION_PREFIX) :] if negate else type_name
    try:
        return RuleType(base_name), negate
    except ValueError as error:
        raise FilterRuleError(
            f"unknown rule type '{type_name}'. "
            f"Supported types: {', '.join(supported_rule_types())}."
        ) from error


def build_evaluator(type_name: str, reference: Any) -> Evaluator:
    """Construct the evaluator for one rule.

    Args:
        type_name: Wire operator name, optionally prefixed with ``!``.
        reference: Rule reference value.

    Returns:
        Ready evaluator.

    Raises:
        FilterRuleError: If the operator is unknown or the reference is invalid.
    """
    rule_type, negate = parse_rule_type(type_name)
    evaluator = EVALUATOR_FACTORIES[rule_type](reference)
    if negate:
        return NegatedEvaluator(evaluator)
    return evaluator
