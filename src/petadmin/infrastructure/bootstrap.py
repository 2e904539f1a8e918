"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from petadmin.application.catalog_view import CatalogView
from petadmin.application.product_store import ProductStore
from petadmin.domain.repository.product_repository import ProductRepository
from petadmin.infrastructure.api.image_probe import HttpImageProbe
from petadmin.infrastructure.api.rest_product_repository import RestProductRepository
from petadmin.infrastructure.config import Settings, get_settings
from petadmin.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def product_repository(settings: Settings | None = None) -> ProductRepository:
    settings = settings or get_settings()
    if settings.data_source == "file":
        return JsonProductRepository(
            settings.data_dir / "products.json",
            settings.data_dir / "pets.json",
        )
    return RestProductRepository(
        base_url=settings.api_base_url,
        token=settings.api_token,
        timeout=settings.request_timeout,
    )


def product_store(settings: Settings | None = None) -> ProductStore:
    """A store already seeded with the current products and pets."""
    store = ProductStore(product_repository(settings))
    store.refresh_pets()
    store.refresh()
    return store


def image_probe(settings: Settings | None = None) -> HttpImageProbe:
    settings = settings or get_settings()
    return HttpImageProbe(timeout=settings.image_timeout)


def catalog_view(settings: Settings | None = None) -> CatalogView:
    """The interactive catalog screen over a freshly seeded store."""
    settings = settings or get_settings()
    return CatalogView(
        product_store(settings),
        page_size=settings.page_size,
        debounce_seconds=settings.search_debounce_seconds,
    )
