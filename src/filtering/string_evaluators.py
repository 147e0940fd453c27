"""String evaluators: prefix, suffix, contains, case folding, and regexp.

References must be strings at construction time. Any non-string record
value evaluates to False.
"""

from __future__ import annotations

import re
from typing import Any, Callable

from core.errors import FilterRuleError
from filtering.coercion import convert_string_value
from filtering.evaluator_types import Evaluator, RuleType


class StringEvaluator:
    """Apply a string predicate against a fixed reference string."""

    def __init__(self, reference: str, predicate: Callable[[str, str], bool]) -> None:
        self._reference = reference
        self._predicate = predicate

    def evaluate(self, value: Any) -> bool:
        """Return the predicate result, or False for non-string values."""
        if not isinstance(value, str):
            return False
        return self._predicate(value, self._reference)


class RegexpEvaluator:
    """Search string values with a pattern compiled once per rule."""

    def __init__(self, pattern: re.Pattern[str]) -> None:
        self._pattern = pattern

    def evaluate(self, value: Any) -> bool:
        """Return whether the pattern matches anywhere in a string value."""
        if not isinstance(value, str):
            return False
        return self._pattern.search(value) is not None


def new_has_prefix(reference: Any) -> Evaluator:
    """Build an evaluator matching strings that start with the reference."""
    return StringEvaluator(
        convert_string_value(reference, RuleType.HAS_PREFIX.value),
        str.startswith,
    )


def new_has_suffix(reference: Any) -> Evaluator:
    """Build an evaluator matching strings that end with the reference."""
    return StringEvaluator(
        convert_string_value(reference, RuleType.HAS_SUFFIX.value),
        str.endswith,
    )


def new_contains(reference: Any) -> Evaluator:
    """Build an evaluator matching strings that contain the reference."""
    return StringEvaluator(
        convert_string_value(reference, RuleType.CONTAINS.value),
        str.__contains__,
    )


def new_equal_fold(reference: Any) -> Evaluator:
    """Build a case-insensitive string equality evaluator."""
    folded_reference = convert_string_value(reference, RuleType.EQUAL_FOLD.value).casefold()
    return StringEvaluator(folded_reference, _equal_fold)


def new_regexp(reference: Any) -> Evaluator:
    """Build an evaluator from a regular expression pattern.

    Raises:
        FilterRuleError: If the pattern is not a string or does not compile.
    """
    pattern_text = convert_string_value(reference, RuleType.REGEXP.value)
    try:
        pattern = re.compile(pattern_text)
    except re.error as error:
        raise FilterRuleError(
            f"rule of type {RuleType.REGEXP.value} has an invalid pattern "
            f"{pattern_text!r}: {error}"
        ) from error
    return RegexpEvaluator(pattern)


def _equal_fold(value: str, folded_reference: str) -> bool:
    return value.casefold() == folded_reference
