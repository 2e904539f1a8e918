"""Domain service: catalog view pipeline.

``compute_view`` turns the full product collection plus the current
view-state snapshot into the ordered sequence the table shows. It is a
pure function: the same inputs always give the same output, and the
input collection is never mutated.

Filtering order (AND-combined):
  1. search    — case-insensitive substring of name or description
  2. status    — active / out-of-stock
  3. currency  — exact currency match
  4. group     — pet / food / toy / other
  5. pet type  — exact species, only inside the pet group

Sorting is stable in both directions, so rows with equal keys keep the
order they had before sorting.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Sequence
from dataclasses import fields
from enum import Enum

from petadmin.domain.model.product import (
    DEFAULT_PET_TYPES,
    FOOD_TYPE,
    TOY_TYPE,
    Product,
    ProductStatus,
)
from petadmin.domain.model.view_state import (
    FilterState,
    GroupFilter,
    SortConfig,
    SortDirection,
    StatusFilter,
)

SORTABLE_FIELDS: frozenset[str] = frozenset(f.name for f in fields(Product))
NUMERIC_FIELDS: frozenset[str] = frozenset(
    {"id", "price", "quantity", "status", "shop_id", "pet_id"}
)

Predicate = Callable[[Product], bool]


def compute_view(
    products: Iterable[Product],
    filter_state: FilterState,
    sort_config: SortConfig,
    pet_types: Iterable[str] = DEFAULT_PET_TYPES,
) -> list[Product]:
    """Filter then sort *products* according to the view state."""
    predicates = build_predicates(filter_state, frozenset(pet_types))
    filtered = [p for p in products if all(pred(p) for pred in predicates)]
    return sort_products(filtered, sort_config)


# ---------------------------------------------------------------------------
# Filtering
# ---------------------------------------------------------------------------


def build_predicates(
    filter_state: FilterState, pet_types: frozenset[str]
) -> list[Predicate]:
    """One predicate per active facet; "all" facets contribute nothing."""
    predicates: list[Predicate] = []

    term = filter_state.search_term.lower()
    if term:
        predicates.append(lambda p: _matches_search(p, term))

    if filter_state.status == StatusFilter.ACTIVE:
        predicates.append(lambda p: p.status == ProductStatus.ACTIVE)
    elif filter_state.status == StatusFilter.OUT_OF_STOCK:
        predicates.append(is_out_of_stock)

    if filter_state.currency is not None:
        currency = filter_state.currency.value
        predicates.append(lambda p: p.currency_type == currency)

    group = filter_state.group
    if group == GroupFilter.PET:
        predicates.append(lambda p: p.is_pet_product(pet_types))
        if filter_state.pet_type:
            pet_type = filter_state.pet_type
            predicates.append(lambda p: p.type == pet_type)
    elif group == GroupFilter.FOOD:
        predicates.append(lambda p: p.type == FOOD_TYPE)
    elif group == GroupFilter.TOY:
        predicates.append(lambda p: p.type == TOY_TYPE)
    elif group == GroupFilter.OTHER:
        known = pet_types | {FOOD_TYPE, TOY_TYPE}
        predicates.append(lambda p: p.type not in known)

    return predicates


def is_out_of_stock(product: Product) -> bool:
    """Status is authoritative; an empty shelf also counts.

    A product is out of stock when it is not active, or when it has no
    quantity left even though it is still marked active.
    """
    return product.status != ProductStatus.ACTIVE or not _as_number(product.quantity) > 0


def _matches_search(product: Product, term: str) -> bool:
    name = (product.name or "").lower()
    description = (product.description or "").lower()
    return term in name or term in description


# ---------------------------------------------------------------------------
# Sorting
# ---------------------------------------------------------------------------


def sort_products(products: Sequence[Product], sort_config: SortConfig) -> list[Product]:
    """Stable sort on the configured key; unknown or missing key passes through."""
    key = sort_config.key
    if key is None or key not in SORTABLE_FIELDS:
        return list(products)

    if key in NUMERIC_FIELDS:
        def sort_key(p: Product):
            return _as_number(getattr(p, key, None))
    else:
        def sort_key(p: Product):
            return _as_text(getattr(p, key, None))

    return sorted(
        products,
        key=sort_key,
        reverse=sort_config.direction == SortDirection.DESC,
    )


def _as_number(value: object) -> float:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        try:
            number = float(str(value).strip())
        except (TypeError, ValueError):
            return 0.0
    if math.isnan(number):
        return 0.0
    return number


def _as_text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        value = value.value
    return str(value).lower()
