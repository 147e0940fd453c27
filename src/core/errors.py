"""Rulefilter exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each stage of a filter call raises a specific error type for debuggability.
"""

from __future__ import annotations


class FilterError(Exception):
    """Base exception for all rulefilter failures."""


class FilterConfigError(FilterError):
    """Raised for invalid processor options or environment values."""


class FilterRuleError(FilterError):
    """Raised for malformed rule sets, unknown operators, and bad references."""


class FilterRuleCountError(FilterRuleError):
    """Raised when a rule set holds more rules than the processor allows."""


class FilterPreconditionError(FilterError):
    """Raised for invalid offset, length, or filter target arguments."""


class FilterFieldError(FilterError):
    """Raised when a field path cannot be used to read a record."""


class FieldNotFoundError(FilterFieldError):
    """Raised when a field path does not resolve on a record.

    The processor treats this as a soft non-match, never as a failure.
    """


class FilterInputError(FilterError):
    """Raised for unreadable or malformed record input files."""
