"""ProductStore — sole owner of the in-memory product collection.

Views read from the store and ask it to mutate; they never touch the
collection themselves. Every mutation goes to the backend first and the
collection is only replaced by a fresh ``list_all`` once the backend has
confirmed. A failed call leaves the collection exactly as it was.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from petadmin.domain.exceptions import EntityNotFoundError
from petadmin.domain.model.pet import Pet, active_pet_types
from petadmin.domain.model.product import Product, ProductStatus
from petadmin.domain.model.product_draft import ProductDraft
from petadmin.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

Listener = Callable[[], None]


class ProductStore:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo
        self._products: list[Product] = []
        self._pets: list[Pet] = []
        self._listeners: list[Listener] = []

    # --- Read access ----------------------------------------------------------

    @property
    def products(self) -> tuple[Product, ...]:
        return tuple(self._products)

    @property
    def pets(self) -> tuple[Pet, ...]:
        return tuple(self._pets)

    @property
    def pet_types(self) -> tuple[str, ...]:
        return active_pet_types(self._pets)

    def get(self, product_id: int) -> Product:
        for product in self._products:
            if product.id == product_id:
                return product
        raise EntityNotFoundError(f"Product #{product_id} not found")

    def find_by_name(self, name: str) -> Product | None:
        wanted = name.strip().lower()
        for product in self._products:
            if (product.name or "").strip().lower() == wanted:
                return product
        return None

    # --- Change notification --------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener*; returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # --- Loading --------------------------------------------------------------

    def refresh(self) -> None:
        """Re-seed the collection from the backend."""
        products = self._product_repo.list_all()
        self._products = list(products)
        logger.info("Loaded %d shop products", len(self._products))
        self._notify()

    def refresh_pets(self) -> None:
        pets = self._product_repo.list_pets()
        self._pets = list(pets)
        logger.info("Loaded %d pets (%d pet types)", len(self._pets), len(self.pet_types))
        self._notify()

    # --- Mutations (backend first, then refresh) ------------------------------

    def create(self, draft: ProductDraft) -> Product:
        product = self._product_repo.create(draft)
        logger.info("Created product #%s '%s'", product.id, product.name)
        self.refresh()
        return product

    def update(self, product_id: int, draft: ProductDraft) -> Product:
        product = self._product_repo.update(product_id, draft)
        logger.info("Updated product #%s", product_id)
        self.refresh()
        return product

    def delete(self, product_id: int) -> None:
        self._product_repo.delete(product_id)
        logger.info("Deleted product #%s", product_id)
        self.refresh()

    def set_status(self, product_id: int, status: ProductStatus) -> Product:
        product = self._product_repo.set_status(product_id, status)
        logger.info("Product #%s status set to %s", product_id, status.name)
        self.refresh()
        return product

    # --- Internal helpers -----------------------------------------------------

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()
