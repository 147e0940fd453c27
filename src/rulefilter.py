"""Public SDK surface for rulefilter.

This module provides a stable import path for library users.
It re-exports the processor, rule models, and typed errors.
"""

from __future__ import annotations

from core.config import FilterConfig
from core.errors import (
    FieldNotFoundError,
    FilterConfigError,
    FilterError,
    FilterFieldError,
    FilterPreconditionError,
    FilterRuleCountError,
    FilterRuleError,
)
from core.types import FilterResult
from filtering.evaluator_registry import build_evaluator
from filtering.evaluator_types import Evaluator, RuleType, supported_rule_types
from filtering.field_access import FieldAccessor, ReflectiveFieldAccessor
from filtering.processor import Processor
from filtering.rules import Rule, RuleSet, load_rule_file, parse_json, rule_set_to_json

__all__ = [
    "Evaluator",
    "FieldAccessor",
    "FieldNotFoundError",
    "FilterConfig",
    "FilterConfigError",
    "FilterError",
    "FilterFieldError",
    "FilterPreconditionError",
    "FilterResult",
    "FilterRuleCountError",
    "FilterRuleError",
    "Processor",
    "ReflectiveFieldAccessor",
    "Rule",
    "RuleSet",
    "RuleType",
    "build_evaluator",
    "load_rule_file",
    "parse_json",
    "rule_set_to_json",
    "supported_rule_types",
]
