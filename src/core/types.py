"""Shared typed models.

This module defines immutable result models returned by the processor
and consumed by the SDK and CLI layers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class FilterResult:
    """Outcome of one in-place filter call.

    Attributes:
        retained_count: Number of records kept in the compacted list.
        total_matches: Number of records matching the rule set, including
            the ones skipped by offset or dropped by the page length.
    """

    retained_count: int
    total_matches: int

    def __iter__(self) -> Iterator[int]:
        """Allow ``retained, total = processor.apply(...)`` unpacking."""
        yield self.retained_count
        yield self.total_matches
