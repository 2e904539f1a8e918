"""Domain service: paginate an ordered sequence.

Out-of-range pages are never an error; they are clamped into range.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from petadmin.domain.exceptions import ValidationError

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    items: list[T]
    total_pages: int
    clamped_page: int
    total_items: int
    page_size: int

    @property
    def has_next(self) -> bool:
        return self.clamped_page < self.total_pages

    @property
    def has_prev(self) -> bool:
        return self.clamped_page > 1

    @property
    def first_index(self) -> int:
        """1-based index of the first row shown, 0 when the page is empty."""
        if not self.items:
            return 0
        return (self.clamped_page - 1) * self.page_size + 1

    @property
    def last_index(self) -> int:
        if not self.items:
            return 0
        return self.first_index + len(self.items) - 1


def total_pages(item_count: int, page_size: int) -> int:
    """Number of pages for *item_count* rows; an empty view still has one page."""
    if page_size < 1:
        raise ValidationError(f"Page size must be positive, got {page_size}")
    return max(1, math.ceil(item_count / page_size))


def paginate(items: Sequence[T], page_size: int, current_page: int) -> Page[T]:
    pages = total_pages(len(items), page_size)
    page = min(max(1, current_page), pages)
    start = (page - 1) * page_size
    return Page(
        items=list(items[start:start + page_size]),
        total_pages=pages,
        clamped_page=page,
        total_items=len(items),
        page_size=page_size,
    )
