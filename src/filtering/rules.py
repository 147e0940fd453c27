"""Rule and rule-set models with JSON, query-string, and file parsing.

A rule set is a list of AND groups, each group a list of OR alternatives:
``[[a], [b, c], [d]]`` evaluates to ``a AND (b OR c) AND d``.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field as dataclass_field
from pathlib import Path
from typing import Any, cast
from urllib.parse import parse_qs

import yaml

from core.constants import RULE_FILE_JSON_SUFFIXES, RULE_FILE_YAML_SUFFIXES
from core.errors import FilterRuleError
from core.logging_config import get_logger
from filtering.evaluator_registry import build_evaluator
from filtering.evaluator_types import Evaluator

logger = get_logger(__name__)


@dataclass(frozen=True)
class Rule:
    """One field/operator/reference comparison.

    Attributes:
        field: Field name or dotted path on the record.
        type: Operator wire name, optionally prefixed with ``!``.
        value: Reference value the field is compared against.
    """

    field: str
    type: str
    value: Any = None
    _evaluator: Evaluator | None = dataclass_field(
        default=None,
        init=False,
        repr=False,
        compare=False,
    )

    def compile(self) -> Evaluator:
        """Build and cache the evaluator for this rule.

        Returns:
            Compiled evaluator.

        Raises:
            FilterRuleError: If the operator is unknown or the value is invalid.
        """
        if self._evaluator is None:
            object.__setattr__(self, "_evaluator", build_evaluator(self.type, self.value))
        return cast(Evaluator, self._evaluator)

    def evaluate(self, value: Any) -> bool:
        """Evaluate a record field value, compiling on first use."""
        return self.compile().evaluate(value)

    def to_dict(self) -> dict[str, Any]:
        return {"field": self.field, "type": self.type, "value": self.value}


RuleSet = list[list[Rule]]


def count_rules(rule_set: Sequence[Sequence[Rule]]) -> int:
    """Return the total number of rules across all groups."""
    return sum(len(group) for group in rule_set)


def compile_rule_set(rule_set: Sequence[Sequence[Rule]]) -> None:
    """Compile every rule so reference errors surface before evaluation.

    Raises:
        FilterRuleError: If any rule has an unknown type or invalid value.
    """
    for group in rule_set:
        for rule in group:
            rule.compile()


def parse_json(text: str | bytes) -> RuleSet:
    """Parse and compile a rule set from its JSON representation.

    Args:
        text: JSON text shaped as an array of arrays of rule objects.

    Returns:
        Compiled rule set.

    Raises:
        FilterRuleError: If JSON is malformed or any rule is invalid.
    """
    try:
        payload = json.loads(text)
    except (TypeError, ValueError) as error:
        raise FilterRuleError(f"failed unmarshaling rules: {error}") from error
    return build_rule_set(payload)


def parse_query(query: str | Mapping[str, Any], key: str) -> RuleSet:
    """Parse a rule set from one URL query parameter.

    Args:
        query: Raw query string, or a mapping of keys to a value or a list
            of values as returned by ``urllib.parse.parse_qs``.
        key: Query parameter holding the JSON rule set.

    Returns:
        Compiled rule set; empty when the parameter is missing or empty.

    Raises:
        FilterRuleError: If the parameter value is not a valid rule set.
    """
    values: Mapping[str, Any] = parse_qs(query) if isinstance(query, str) else query
    raw_value = values.get(key)
    if isinstance(raw_value, (list, tuple)):
        raw_value = raw_value[0] if raw_value else None
    if not raw_value:
        return []
    return parse_json(raw_value)


def load_rule_file(path: str | Path) -> RuleSet:
    """Load and compile a rule set from a JSON or YAML file.

    Args:
        path: File path ending in .json, .yaml, or .yml.

    Returns:
        Compiled rule set.

    Raises:
        FilterRuleError: If the file is missing, unreadable, or invalid.
    """
    rule_file = Path(path).expanduser().resolve()
    if not rule_file.exists():
        raise FilterRuleError(
            f"Rule file does not exist at {rule_file}. Provide a valid --rules-file path."
        )
    suffix = rule_file.suffix.lower()
    if suffix not in RULE_FILE_JSON_SUFFIXES + RULE_FILE_YAML_SUFFIXES:
        raise FilterRuleError(
            f"Unsupported rule file extension '{suffix}' for {rule_file}. "
            "Use a .json, .yaml, or .yml file."
        )
    try:
        text = rule_file.read_text(encoding="utf-8")
    except OSError as error:
        raise FilterRuleError(
            f"Failed to read rule file at {rule_file}: {error}. Check file permissions and retry."
        ) from error
    if suffix in RULE_FILE_JSON_SUFFIXES:
        return parse_json(text)
    try:
        payload = cast(object, yaml.safe_load(text))
    except yaml.YAMLError as error:
        raise FilterRuleError(
            f"Failed to parse YAML rule file at {rule_file}: {error}. Fix YAML syntax and retry."
        ) from error
    return build_rule_set(payload)


def build_rule_set(payload: object) -> RuleSet:
    """Convert decoded JSON or YAML data into a compiled rule set.

    Raises:
        FilterRuleError: If the payload shape or any rule is invalid.
    """
    if payload is None:
        return []
    if not _is_list(payload):
        raise FilterRuleError(
            f"rule set should be an array of arrays (got {type(payload).__name__})"
        )
    rule_set: RuleSet = []
    for group_index, group_payload in enumerate(cast(Sequence[object], payload)):
        if group_payload is None:
            rule_set.append([])
            continue
        if not _is_list(group_payload):
            raise FilterRuleError(
                f"rule group {group_index} should be an array "
                f"(got {type(group_payload).__name__})"
            )
        group = [
            _build_rule(rule_payload, group_index, rule_index)
            for rule_index, rule_payload in enumerate(cast(Sequence[object], group_payload))
        ]
        rule_set.append(group)
    compile_rule_set(rule_set)
    logger.debug("rule_set_parsed", groups=len(rule_set), rules=count_rules(rule_set))
    return rule_set


def rule_set_to_json(rule_set: Sequence[Sequence[Rule]]) -> str:
    """Render a rule set back to its JSON wire format."""
    return json.dumps([[rule.to_dict() for rule in group] for group in rule_set])


def _build_rule(payload: object, group_index: int, rule_index: int) -> Rule:
    position = f"rule [{group_index}][{rule_index}]"
    if not isinstance(payload, Mapping):
        raise FilterRuleError(f"{position} should be an object (got {type(payload).__name__})")
    field_name = payload.get("field")
    if not isinstance(field_name, str) or not field_name:
        raise FilterRuleError(f"{position} requires a non-empty string 'field'")
    type_name = payload.get("type")
    if not isinstance(type_name, str) or not type_name:
        raise FilterRuleError(f"{position} requires a non-empty string 'type'")
    return Rule(field=field_name, type=type_name, value=payload.get("value"))


def _is_list(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))
