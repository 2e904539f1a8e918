"""CatalogView — the catalog screen's view-state controller.

Owns the explicit view-state snapshots (filters, sort, pagination) and
the search debouncer, and threads them into the pure pipeline and
paginator. It is also where the page-reset rule lives: any filter
change, search commit or sort change sends the user back to page 1,
while a shrinking collection or a page-size change only clamps.

Row images get one ImageResolver each, keyed by product id. Resolvers
for rows that leave the visible page are disposed so late load
callbacks cannot touch them.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Iterable, Sequence

from petadmin.application.dto import CatalogPageDTO, CatalogSummary, ProductRowDTO
from petadmin.application.product_store import ProductStore
from petadmin.application.search_debouncer import DEFAULT_INTERVAL, SearchDebouncer
from petadmin.domain.model.image_load import ImageResolver, ImageView, render_image
from petadmin.domain.model.pet import Pet, find_pet
from petadmin.domain.model.product import CurrencyType, Product, shop_name
from petadmin.domain.model.view_state import (
    FilterState,
    GroupFilter,
    PaginationState,
    SortConfig,
    SortDirection,
    StatusFilter,
)
from petadmin.domain.service.paginator import Page, paginate
from petadmin.domain.service.view_pipeline import compute_view

logger = logging.getLogger(__name__)

ComputeView = Callable[..., list[Product]]


class CatalogView:
    """Filter, sort and page state for the catalog table, over one ProductStore."""

    def __init__(
        self,
        store: ProductStore,
        page_size: int = 10,
        debounce_seconds: float = DEFAULT_INTERVAL,
        loop: asyncio.AbstractEventLoop | None = None,
        compute: ComputeView = compute_view,
    ) -> None:
        self._store = store
        self._compute = compute
        self._filters = FilterState()
        self._sort = SortConfig()
        self._pagination = PaginationState(page_size=page_size)
        self._debouncer = SearchDebouncer(self._on_search_commit, debounce_seconds, loop)
        self._view: list[Product] | None = None
        self._images: dict[int, ImageResolver] = {}
        self._unsubscribe = store.subscribe(self._on_store_changed)

    # --- Current state --------------------------------------------------------

    @property
    def filters(self) -> FilterState:
        return self._filters

    @property
    def sort(self) -> SortConfig:
        return self._sort

    @property
    def pagination(self) -> PaginationState:
        return self._pagination

    @property
    def raw_search(self) -> str:
        return self._debouncer.raw

    @property
    def debounce_seconds(self) -> float:
        return self._debouncer.interval

    # --- Search ---------------------------------------------------------------

    def type_search(self, text: str) -> None:
        """Feed one keystroke's worth of input through the debouncer."""
        self._debouncer.push(text)

    def submit_search(self, text: str) -> None:
        """Apply *text* immediately (e.g. enter key)."""
        self._debouncer.submit(text)

    def clear_search(self) -> None:
        self._debouncer.clear()

    # --- Facets ---------------------------------------------------------------

    def set_status_filter(self, status: StatusFilter) -> None:
        self._set_filters(self._filters.with_status(status))

    def set_currency_filter(self, currency: CurrencyType | None) -> None:
        self._set_filters(self._filters.with_currency(currency))

    def set_group_filter(self, group: GroupFilter) -> None:
        self._set_filters(self._filters.with_group(group))

    def set_pet_type(self, pet_type: str | None) -> None:
        self._set_filters(self._filters.with_pet_type(pet_type))

    def clear_all_filters(self) -> None:
        """Drop search, every facet and the sort; back to page 1."""
        self._debouncer.clear()
        self._filters = FilterState()
        self._sort = SortConfig()
        self._reset_page()

    # --- Sorting --------------------------------------------------------------

    def sort_by(self, key: str) -> None:
        self._set_sort(self._sort.toggle(key))

    def set_sort_direction(self, direction: SortDirection) -> None:
        if self._sort.key is None:
            return
        self._set_sort(self._sort.with_direction(direction))

    def clear_sort(self) -> None:
        self._set_sort(SortConfig())

    # --- Paging ---------------------------------------------------------------

    def next_page(self) -> None:
        self._pagination = self._pagination.next_page(self.page().total_pages)

    def prev_page(self) -> None:
        self._pagination = self._pagination.prev_page()

    def go_to_page(self, page: int) -> None:
        self._pagination = self._pagination.go_to(page, self.page().total_pages)

    def set_page_size(self, page_size: int) -> None:
        self._pagination = self._pagination.with_page_size(page_size)

    # --- Computation ----------------------------------------------------------

    def view(self) -> list[Product]:
        """Filtered and sorted products; recomputed only after a change."""
        if self._view is None:
            self._view = self._compute(
                self._store.products,
                self._filters,
                self._sort,
                self._store.pet_types,
            )
        return self._view

    def page(self) -> Page[Product]:
        page = paginate(self.view(), self._pagination.page_size, self._pagination.current_page)
        self._pagination = self._pagination.clamp(page.total_pages)
        return page

    def render(self) -> CatalogPageDTO:
        page = self.page()
        visible_ids = {p.id for p in page.items}
        for product_id in [pid for pid in self._images if pid not in visible_ids]:
            self._images.pop(product_id).dispose()

        pets = self._store.pets
        rows = [
            product_row(p, pets, self._store.pet_types, render_image(self.image_for(p)))
            for p in page.items
        ]
        return CatalogPageDTO(
            rows=rows,
            page=page.clamped_page,
            total_pages=page.total_pages,
            total_items=page.total_items,
            first_index=page.first_index,
            last_index=page.last_index,
            summary=catalog_summary(self._store.products),
            applied_filters=self._filters.applied_count + int(self._sort.is_active),
            search_term=self._filters.search_term,
        )

    # --- Images ---------------------------------------------------------------

    def image_for(self, product: Product) -> ImageResolver | None:
        """The resolver for *product*'s image, None when it has none.

        A changed image reference hard-resets the existing resolver.
        """
        resolver = self._images.get(product.id)
        reference = (product.image_url or "").strip()
        if not reference:
            if resolver is not None:
                self._images.pop(product.id).dispose()
            return None
        if resolver is None:
            resolver = ImageResolver(reference)
            self._images[product.id] = resolver
        elif resolver.reference != reference:
            resolver.reset(reference)
        return resolver

    def close(self) -> None:
        """Stop listening: debouncer timer, store changes, image callbacks."""
        self._debouncer.close()
        self._unsubscribe()
        for resolver in self._images.values():
            resolver.dispose()
        self._images.clear()

    # --- Internal helpers -----------------------------------------------------

    def _on_search_commit(self, term: str) -> None:
        self._set_filters(self._filters.with_search(term))

    def _on_store_changed(self) -> None:
        self._view = None

    def _set_filters(self, filters: FilterState) -> None:
        if filters == self._filters:
            return
        self._filters = filters
        self._reset_page()

    def _set_sort(self, sort: SortConfig) -> None:
        if sort == self._sort:
            return
        self._sort = sort
        self._reset_page()

    def _reset_page(self) -> None:
        self._view = None
        self._pagination = self._pagination.first()


# ---------------------------------------------------------------------------
# Mapping
# ---------------------------------------------------------------------------


def catalog_summary(products: Iterable[Product]) -> CatalogSummary:
    products = list(products)
    active = sum(1 for p in products if p.is_active)
    return CatalogSummary(total=len(products), active=active, inactive=len(products) - active)


def status_label(product: Product, pets: Sequence[Pet], pet_types: Iterable[str]) -> str:
    if product.is_active:
        return "Active"
    pet = find_pet(pets, product.pet_id)
    if product.is_pet_product(pet_types) and pet is not None and not pet.is_active:
        return "Inactive (Pet Disabled)"
    return "Inactive"


def product_row(
    product: Product,
    pets: Sequence[Pet],
    pet_types: Iterable[str],
    image: ImageView,
) -> ProductRowDTO:
    pet_types = tuple(pet_types)
    return ProductRowDTO(
        id=product.id,
        name=product.name,
        type=product.type,
        group=product.group(pet_types).label,
        shop_name=shop_name(product.shop_id),
        price=product.price,
        currency_type=product.currency_type,
        quantity=product.quantity,
        status=status_label(product, pets, pet_types),
        description=product.description or "",
        image=image,
    )
