"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from petadmin.domain.model.image_load import ImageView


@dataclass(frozen=True)
class CatalogSummary:
    """Counts over the whole collection, independent of any filter."""

    total: int
    active: int
    inactive: int


@dataclass(frozen=True)
class ProductRowDTO:
    """Output: a single table row as displayed to the user."""

    id: int
    name: str
    type: str
    group: str  # "Pet" or "Item"
    shop_name: str
    price: int
    currency_type: str
    quantity: int
    status: str  # "Active", "Inactive" or "Inactive (Pet Disabled)"
    description: str
    image: ImageView


@dataclass(frozen=True)
class CatalogPageDTO:
    """Output: one rendered page of the catalog table."""

    rows: list[ProductRowDTO]
    page: int
    total_pages: int
    total_items: int
    first_index: int
    last_index: int
    summary: CatalogSummary
    applied_filters: int
    search_term: str
