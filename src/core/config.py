"""Runtime configuration model for rulefilter.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import (
    DEFAULT_MAX_RESULTS,
    DEFAULT_MAX_RULES,
    DEFAULT_QUERY_FILTER_KEY,
    ENV_FIELD_NAME_TAG,
    ENV_MAX_RESULTS,
    ENV_MAX_RULES,
    ENV_QUERY_FILTER_KEY,
)
from core.errors import FilterConfigError


@dataclass(frozen=True)
class FilterConfig:
    """Validated processor configuration.

    Attributes:
        max_rules: Maximum total rule count accepted in one rule set.
        max_results: Page length used by the unbounded apply shortcut.
        query_filter_key: Query-string key holding an encoded rule set.
        field_name_tag: Optional dataclass metadata key used as field alias.
    """

    max_rules: int = DEFAULT_MAX_RULES
    max_results: int = DEFAULT_MAX_RESULTS
    query_filter_key: str = DEFAULT_QUERY_FILTER_KEY
    field_name_tag: str | None = None

    @classmethod
    def from_env(cls) -> "FilterConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            FilterConfigError: If environment values are invalid.
        """
        max_rules = _parse_positive_int(
            ENV_MAX_RULES,
            os.getenv(ENV_MAX_RULES, str(DEFAULT_MAX_RULES)),
        )
        max_results = _parse_positive_int(
            ENV_MAX_RESULTS,
            os.getenv(ENV_MAX_RESULTS, str(DEFAULT_MAX_RESULTS)),
        )
        query_filter_key = os.getenv(ENV_QUERY_FILTER_KEY, DEFAULT_QUERY_FILTER_KEY).strip()
        if not query_filter_key:
            raise FilterConfigError(
                f"Invalid {ENV_QUERY_FILTER_KEY} value: expected a non-empty key. "
                f"Unset {ENV_QUERY_FILTER_KEY} to use '{DEFAULT_QUERY_FILTER_KEY}'."
            )
        field_name_tag = os.getenv(ENV_FIELD_NAME_TAG) or None
        return cls(
            max_rules=max_rules,
            max_results=max_results,
            query_filter_key=query_filter_key,
            field_name_tag=field_name_tag,
        )


def _parse_positive_int(env_name: str, raw_value: str) -> int:
    """Parse a strictly positive integer environment value.

    Args:
        env_name: Environment variable name, used in error messages.
        raw_value: Raw string from environment.

    Returns:
        Parsed integer.

    Raises:
        FilterConfigError: If value is not an integer or is below one.
    """
    try:
        parsed_value = int(raw_value)
    except ValueError as error:
        raise FilterConfigError(
            f"Invalid {env_name} value: expected integer, got '{raw_value}'. "
            f"Set {env_name} to a numeric value."
        ) from error
    if parsed_value < 1:
        raise FilterConfigError(
            f"Invalid {env_name} value: expected a value >= 1, got {parsed_value}."
        )
    return parsed_value
