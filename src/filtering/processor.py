"""In-place rule-set filtering and pagination of record lists.

The first level of a rule set is combined with AND and the second with OR:
``[[a], [b, c], [d]]`` evaluates to ``a AND (b OR c) AND d``.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableSequence, Sequence
from typing import Any, Callable

from core.config import FilterConfig
from core.constants import DEFAULT_MAX_RESULTS, DEFAULT_MAX_RULES, DEFAULT_QUERY_FILTER_KEY
from core.errors import (
    FieldNotFoundError,
    FilterConfigError,
    FilterPreconditionError,
    FilterRuleCountError,
)
from core.logging_config import get_logger
from core.types import FilterResult
from filtering.field_access import FieldAccessor, ReflectiveFieldAccessor
from filtering.rules import Rule, RuleSet, compile_rule_set, count_rules, parse_query

logger = get_logger(__name__)


class Processor:
    """Apply rule sets to record lists with fixed, validated options.

    Options are never mutated after construction, so one processor can be
    shared by every filter call in a process.

    Args:
        max_rules: Maximum total rule count accepted in one rule set.
        max_results: Page length used by ``apply``.
        query_filter_key: Query parameter read by ``parse_query``.
        field_accessor: Field lookup capability; defaults to a
            ``ReflectiveFieldAccessor``.

    Raises:
        FilterConfigError: If any option is invalid.
    """

    def __init__(
        self,
        max_rules: int = DEFAULT_MAX_RULES,
        max_results: int = DEFAULT_MAX_RESULTS,
        query_filter_key: str = DEFAULT_QUERY_FILTER_KEY,
        field_accessor: FieldAccessor | None = None,
    ) -> None:
        _require_positive("max_rules", max_rules)
        _require_positive("max_results", max_results)
        if not isinstance(query_filter_key, str) or not query_filter_key:
            raise FilterConfigError(
                "query_filter_key should be a non-empty string "
                f"(got {query_filter_key!r})."
            )
        self._max_rules = max_rules
        self._max_results = max_results
        self._query_filter_key = query_filter_key
        self._fields: FieldAccessor = field_accessor or ReflectiveFieldAccessor()
        logger.debug(
            "processor_created",
            max_rules=max_rules,
            max_results=max_results,
            query_filter_key=query_filter_key,
        )

    @classmethod
    def from_config(cls, config: FilterConfig) -> "Processor":
        """Build a processor from a validated runtime config."""
        return cls(
            max_rules=config.max_rules,
            max_results=config.max_results,
            query_filter_key=config.query_filter_key,
            field_accessor=ReflectiveFieldAccessor(name_tag=config.field_name_tag),
        )

    @property
    def max_rules(self) -> int:
        return self._max_rules

    @property
    def max_results(self) -> int:
        return self._max_results

    @property
    def query_filter_key(self) -> str:
        return self._query_filter_key

    def parse_query(self, query: str | Mapping[str, Any]) -> RuleSet:
        """Parse the rule set carried by the configured query parameter.

        A missing or empty parameter yields an empty rule set.

        Raises:
            FilterRuleError: If the parameter holds an invalid rule set.
        """
        return parse_query(query, self._query_filter_key)

    def apply(
        self,
        rule_set: Sequence[Sequence[Rule]] | None,
        records: MutableSequence[Any],
    ) -> FilterResult:
        """Filter ``records`` in place, keeping up to ``max_results`` matches.

        This is ``apply_subset`` with offset 0 and length ``max_results``.
        """
        return self.apply_subset(rule_set, records, 0, self._max_results)

    def apply_subset(
        self,
        rule_set: Sequence[Sequence[Rule]] | None,
        records: MutableSequence[Any],
        offset: int,
        length: int,
    ) -> FilterResult:
        """Filter ``records`` in place and keep one page of the matches.

        The first ``offset`` matches are dropped even though they match, and
        at most ``length`` matches are kept, in their original order.

        Args:
            rule_set: AND groups of OR alternatives; None or empty keeps
                every record.
            records: List to compact; it is modified in place.
            offset: Number of leading matches to skip.
            length: Maximum number of matches to keep.

        Returns:
            Retained count and total number of matching records.

        Raises:
            FilterPreconditionError: If offset, length, or records are invalid.
            FilterRuleCountError: If the rule set holds too many rules.
            FilterRuleError: If a rule has an unknown type or invalid value.
            FilterFieldError: If a field path is malformed. The list may be
                left partially compacted and should be discarded.
        """
        if offset < 0:
            raise FilterPreconditionError(f"offset must be positive (got {offset})")
        if length < 1:
            raise FilterPreconditionError(f"length must be strictly positive (got {length})")
        if rule_set is None:
            rule_set = []
        self._check_rules_count(rule_set)
        if not isinstance(records, MutableSequence):
            raise FilterPreconditionError(
                f"records should be a mutable list but is {type(records).__name__}"
            )
        compile_rule_set(rule_set)

        def matcher(record: Any) -> bool:
            return self._evaluate_rules(rule_set, record)

        result = _filter_in_place(records, offset, length, matcher)
        logger.debug(
            "filter_applied",
            retained=result.retained_count,
            total_matches=result.total_matches,
            offset=offset,
            length=length,
        )
        return result

    def _check_rules_count(self, rule_set: Sequence[Sequence[Rule]]) -> None:
        count = count_rules(rule_set)
        if count > self._max_rules:
            logger.warning("rule_count_rejected", rules=count, max_rules=self._max_rules)
            raise FilterRuleCountError(f"too many rules: got {count} max is {self._max_rules}")

    def _evaluate_rules(self, rule_set: Sequence[Sequence[Rule]], record: Any) -> bool:
        for group in rule_set:
            if not any(self._evaluate_rule(rule, record) for rule in group):
                return False
        return True

    def _evaluate_rule(self, rule: Rule, record: Any) -> bool:
        try:
            value = self._fields.get_field_value(record, rule.field)
        except FieldNotFoundError:
            return False
        return rule.evaluate(value)


def _filter_in_place(
    records: MutableSequence[Any],
    offset: int,
    length: int,
    matcher: Callable[[Any], bool],
) -> FilterResult:
    """Compact matching records to the front of the list and truncate it.

    ``retained`` counts records kept in the list and ``matches`` counts
    every matching record.
    """
    skip = offset
    retained = 0
    matches = 0
    for index in range(len(records)):
        record = records[index]
        if not matcher(record):
            continue
        matches += 1
        if skip > 0:
            skip -= 1
            continue
        if retained < length:
            records[retained] = record
            retained += 1
    del records[retained:]
    return FilterResult(retained_count=retained, total_matches=matches)


def _require_positive(option_name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise FilterConfigError(f"{option_name} should be an integer >= 1 (got {value!r}).")
