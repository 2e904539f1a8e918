"""Application service: List Products use case (query).

One-shot rendering of a catalog page for non-interactive callers: the
search term is applied directly, without debouncing.
"""

from __future__ import annotations

from petadmin.application.catalog_view import catalog_summary, product_row
from petadmin.application.dto import CatalogPageDTO
from petadmin.application.product_store import ProductStore
from petadmin.domain.model.image_load import ImageResolver, render_image
from petadmin.domain.model.view_state import FilterState, PaginationState, SortConfig
from petadmin.domain.service.paginator import paginate
from petadmin.domain.service.view_pipeline import compute_view


class ListProductsHandler:

    def __init__(self, store: ProductStore) -> None:
        self._store = store

    def handle(
        self,
        filters: FilterState,
        sort: SortConfig,
        pagination: PaginationState,
    ) -> CatalogPageDTO:
        pet_types = self._store.pet_types
        view = compute_view(self._store.products, filters, sort, pet_types)
        page = paginate(view, pagination.page_size, pagination.current_page)
        pets = self._store.pets

        rows = [
            product_row(
                p, pets, pet_types,
                render_image(ImageResolver.for_reference(p.image_url)),
            )
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
            applied_filters=filters.applied_count + int(sort.is_active),
            search_term=filters.search_term,
        )
