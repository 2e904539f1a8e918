"""Application service: enable / disable a product."""

from __future__ import annotations

from petadmin.application.product_store import ProductStore
from petadmin.domain.exceptions import ValidationError
from petadmin.domain.model.product import Product, ProductStatus


class SetProductStatusHandler:

    def __init__(self, store: ProductStore) -> None:
        self._store = store

    def handle(self, product_id: int, status: ProductStatus) -> Product:
        product = self._store.get(product_id)

        if product.status == status:
            state = "activated" if status == ProductStatus.ACTIVE else "disabled"
            raise ValidationError(f"Product #{product_id} is already {state}")
        if status == ProductStatus.ACTIVE and product.quantity <= 0:
            raise ValidationError(
                f"Cannot activate product #{product_id}: it has no stock left"
            )

        return self._store.set_status(product_id, status)
