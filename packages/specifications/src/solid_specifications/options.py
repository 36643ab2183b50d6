"""
Result-shaping options for filtering.

The specification decides *which* items match; ``FilterOptions`` decides
*how many* of the matches are returned. Options never reorder results.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class FilterOptions:
    """
    Immutable container for pagination parameters.

    Attributes:
        limit: Maximum number of matches to return (``None`` = unbounded).
        offset: Number of leading matches to skip (``None`` = none).
    """

    limit: int | None = None
    offset: int | None = None

    def __post_init__(self) -> None:
        if self.limit is not None and self.limit < 0:
            raise ValueError(f"limit must be non-negative, got {self.limit}")
        if self.offset is not None and self.offset < 0:
            raise ValueError(f"offset must be non-negative, got {self.offset}")

    @property
    def is_paginated(self) -> bool:
        return self.limit is not None or self.offset is not None

    def with_pagination(
        self,
        limit: int | None = None,
        offset: int | None = None,
    ) -> FilterOptions:
        """Return a copy with updated pagination parameters."""
        return replace(
            self,
            limit=limit if limit is not None else self.limit,
            offset=offset if offset is not None else self.offset,
        )

    def apply(self, matches: list[T]) -> list[T]:
        """Slice *matches* by offset then limit, keeping their order."""
        start = self.offset or 0
        if self.limit is None:
            return matches[start:]
        return matches[start : start + self.limit]
