"""View-state value objects for the catalog screen.

Every facet, the sort column and the page cursor are explicit immutable
snapshots. The pipeline and paginator are pure functions of these, so
recomputing a view never depends on hidden counters.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from petadmin.domain.exceptions import ValidationError
from petadmin.domain.model.product import CurrencyType


class StatusFilter(Enum):
    ALL = "all"
    ACTIVE = "active"
    OUT_OF_STOCK = "out_of_stock"


class GroupFilter(Enum):
    ALL = "all"
    PET = "pet"
    FOOD = "food"
    TOY = "toy"
    OTHER = "other"


class SortDirection(Enum):
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> SortDirection:
        return SortDirection.DESC if self == SortDirection.ASC else SortDirection.ASC


@dataclass(frozen=True)
class FilterState:
    """Search term plus every facet selection.

    Invariant: ``pet_type`` is only kept while ``group`` is PET; any
    other grouping drops it.
    """

    search: str = ""
    status: StatusFilter = StatusFilter.ALL
    currency: CurrencyType | None = None  # None means "all"
    group: GroupFilter = GroupFilter.ALL
    pet_type: str | None = None

    def __post_init__(self) -> None:
        if self.group != GroupFilter.PET and self.pet_type is not None:
            object.__setattr__(self, "pet_type", None)

    @property
    def search_term(self) -> str:
        return self.search.strip()

    # --- Copy-on-write setters ------------------------------------------------

    def with_search(self, term: str) -> FilterState:
        return replace(self, search=term or "")

    def with_status(self, status: StatusFilter) -> FilterState:
        return replace(self, status=status)

    def with_currency(self, currency: CurrencyType | None) -> FilterState:
        return replace(self, currency=currency)

    def with_group(self, group: GroupFilter) -> FilterState:
        pet_type = self.pet_type if group == GroupFilter.PET else None
        return replace(self, group=group, pet_type=pet_type)

    def with_pet_type(self, pet_type: str | None) -> FilterState:
        return replace(self, pet_type=pet_type or None)

    # --- Summary --------------------------------------------------------------

    @property
    def applied_count(self) -> int:
        """How many facets (search included) currently narrow the view."""
        return sum(
            [
                bool(self.search_term),
                self.status != StatusFilter.ALL,
                self.currency is not None,
                self.group != GroupFilter.ALL,
            ]
        )

    @property
    def is_default(self) -> bool:
        return self == FilterState()


@dataclass(frozen=True)
class SortConfig:
    """A single active sort column, or none at all."""

    key: str | None = None
    direction: SortDirection = SortDirection.ASC

    @property
    def is_active(self) -> bool:
        return self.key is not None

    def toggle(self, key: str) -> SortConfig:
        """Column-header click: same key flips, a new key starts ascending."""
        if key == self.key:
            return replace(self, direction=self.direction.flipped())
        return SortConfig(key=key, direction=SortDirection.ASC)

    def with_direction(self, direction: SortDirection) -> SortConfig:
        return replace(self, direction=direction)


@dataclass(frozen=True)
class PaginationState:
    """Page size plus a 1-based page cursor.

    Navigation never fails: moving past either end is a no-op and jumps
    are clamped into ``[1, total_pages]``.
    """

    page_size: int = 10
    current_page: int = 1

    def __post_init__(self) -> None:
        if not isinstance(self.page_size, int) or self.page_size < 1:
            raise ValidationError(
                f"Page size must be a positive integer, got {self.page_size!r}"
            )

    def first(self) -> PaginationState:
        return replace(self, current_page=1)

    def clamp(self, total_pages: int) -> PaginationState:
        page = min(max(1, self.current_page), max(1, total_pages))
        if page == self.current_page:
            return self
        return replace(self, current_page=page)

    def go_to(self, page: int, total_pages: int) -> PaginationState:
        return replace(self, current_page=page).clamp(total_pages)

    def next_page(self, total_pages: int) -> PaginationState:
        if self.current_page >= total_pages:
            return self
        return replace(self, current_page=self.current_page + 1)

    def prev_page(self) -> PaginationState:
        if self.current_page <= 1:
            return self
        return replace(self, current_page=self.current_page - 1)

    def with_page_size(self, page_size: int) -> PaginationState:
        return PaginationState(page_size=page_size, current_page=self.current_page)
