"""Pagination envelope for list queries.

PaginatedResult carries one page of items plus the information a caller needs
to navigate: page number (1-based), page size, and the total count across all
pages. Page counts are derived, never stored.

Usage:
    page = PaginatedResult(items=dtos, total_count=25, page_number=2, page_size=10)
    page.total_pages        # 3
    page.has_previous_page  # True
    page.has_next_page      # True
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True, kw_only=True)
class PaginatedResult(Generic[T]):
    """One page of query results.

    Attributes:
        items: Items in the current page.
        page_number: Current page number (1-based).
        page_size: Number of items per page.
        total_count: Total number of items across all pages.
    """

    items: list[T] = field(default_factory=list)
    page_number: int = 1
    page_size: int = 10
    total_count: int = 0

    @property
    def total_pages(self) -> int:
        """Total number of pages (ceil(total_count / page_size))."""
        if self.page_size <= 0:
            return 0
        return math.ceil(self.total_count / self.page_size)

    @property
    def has_previous_page(self) -> bool:
        return self.page_number > 1

    @property
    def has_next_page(self) -> bool:
        return self.page_number < self.total_pages

    @classmethod
    def create(
        cls, source: Sequence[T], page_number: int, page_size: int
    ) -> "PaginatedResult[T]":
        """Build a page by slicing an in-memory sequence.

        Args:
            source: Full list of items.
            page_number: Page to return (1-based).
            page_size: Number of items per page.

        Returns:
            PaginatedResult holding the requested slice.
        """
        offset = max(page_number - 1, 0) * page_size
        return cls(
            items=list(source[offset : offset + page_size]),
            page_number=page_number,
            page_size=page_size,
            total_count=len(source),
        )
