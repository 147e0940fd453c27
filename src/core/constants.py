"""Core constants used across rulefilter modules.

This module centralizes defaults and environment variable names.
Keeping values here avoids magic literals in filtering logic.
"""

from __future__ import annotations

DEFAULT_MAX_RULES = 3
DEFAULT_MAX_RESULTS = 2**31 - 1
DEFAULT_QUERY_FILTER_KEY = "filter"
DEFAULT_LOG_LEVEL = "WARNING"
FIELD_PATH_SEPARATOR = "."
NEGATION_PREFIX = "!"
RULE_FILE_JSON_SUFFIXES = (".json",)
RULE_FILE_YAML_SUFFIXES = (".yaml", ".yml")
ENV_MAX_RULES = "RULEFILTER_MAX_RULES"
ENV_MAX_RESULTS = "RULEFILTER_MAX_RESULTS"
ENV_QUERY_FILTER_KEY = "RULEFILTER_QUERY_FILTER_KEY"
ENV_FIELD_NAME_TAG = "RULEFILTER_FIELD_NAME_TAG"
ENV_LOG_LEVEL = "RULEFILTER_LOG_LEVEL"
