"""Application service: Delete Product use case."""

from __future__ import annotations

from petadmin.application.product_store import ProductStore


class DeleteProductHandler:

    def __init__(self, store: ProductStore) -> None:
        self._store = store

    def handle(self, product_id: int) -> None:
        # Raises EntityNotFoundError before anything is sent to the backend.
        self._store.get(product_id)
        self._store.delete(product_id)
