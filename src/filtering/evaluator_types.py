"""Operator kinds and the evaluator capability.

Every rule type name on the wire maps to exactly one RuleType member.
Evaluators are small objects built once per rule from its reference value.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Protocol


class RuleType(str, Enum):
    """Closed set of comparison operator names accepted in rule sets."""

    EQUAL = "eq"
    NOT_EQUAL = "neq"
    EQUAL_FOLD = "equalFold"
    LESS_THAN = "lt"
    LESS_OR_EQUAL = "lte"
    GREATER_THAN = "gt"
    GREATER_OR_EQUAL = "gte"
    HAS_PREFIX = "hasPrefix"
    HAS_SUFFIX = "hasSuffix"
    CONTAINS = "contains"
    REGEXP = "regexp"
    IS_NULL = "isNull"
    NOT_NULL = "notNull"


class Evaluator(Protocol):
    """Compiled comparison against a fixed reference value."""

    def evaluate(self, value: Any) -> bool:
        """Return whether the value satisfies the comparison.

        Implementations never raise: unsupported or missing values are
        reported as a plain ``False``.
        """
        ...


def supported_rule_types() -> tuple[str, ...]:
    """Return wire names of all supported operators."""
    return tuple(rule_type.value for rule_type in RuleType)
