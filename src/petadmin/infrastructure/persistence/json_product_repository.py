"""JSON-file-backed implementation of ProductRepository.

Stands in for the backend during local development: products live in
``products.json`` and the pet directory in ``pets.json``, both in the
backend's own camelCase payload format.
"""

from __future__ import annotations

import json
from dataclasses import replace
from pathlib import Path

from petadmin.domain.exceptions import EntityNotFoundError
from petadmin.domain.model.pet import Pet
from petadmin.domain.model.product import Product, ProductStatus
from petadmin.domain.model.product_draft import ProductDraft
from petadmin.domain.repository.product_repository import ProductRepository
from petadmin.infrastructure.serialization import (
    pet_from_payload,
    product_from_payload,
    product_to_payload,
)


class JsonProductRepository(ProductRepository):

    def __init__(self, products_path: Path, pets_path: Path) -> None:
        self._products_path = products_path
        self._pets_path = pets_path
        self._ensure_file(self._products_path)
        self._ensure_file(self._pets_path)

    # --- ProductRepository interface ------------------------------------------

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def create(self, draft: ProductDraft) -> Product:
        products = self._load()
        # Auto-assign ID based on existing products
        next_id = max(products, default=0) + 1
        product = _from_draft(next_id, draft)
        products[product.id] = product
        self._persist(products)
        return product

    def update(self, product_id: int, draft: ProductDraft) -> Product:
        products = self._load()
        if product_id not in products:
            raise EntityNotFoundError(f"Product #{product_id} not found")
        product = _from_draft(product_id, draft)
        products[product_id] = product
        self._persist(products)
        return product

    def delete(self, product_id: int) -> None:
        products = self._load()
        if products.pop(product_id, None) is None:
            raise EntityNotFoundError(f"Product #{product_id} not found")
        self._persist(products)

    def set_status(self, product_id: int, status: ProductStatus) -> Product:
        products = self._load()
        if product_id not in products:
            raise EntityNotFoundError(f"Product #{product_id} not found")
        product = replace(products[product_id], status=status)
        products[product_id] = product
        self._persist(products)
        return product

    def list_pets(self) -> list[Pet]:
        raw = json.loads(self._pets_path.read_text(encoding="utf-8"))
        return [pet_from_payload(item) for item in raw]

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[int, Product]:
        raw = json.loads(self._products_path.read_text(encoding="utf-8"))
        products = [product_from_payload(item) for item in raw]
        return {p.id: p for p in products}

    def _persist(self, products: dict[int, Product]) -> None:
        raw = [product_to_payload(p) for p in products.values()]
        self._products_path.write_text(
            json.dumps(raw, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )

    @staticmethod
    def _ensure_file(path: Path) -> None:
        if not path.exists():
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("[]", encoding="utf-8")


def _from_draft(product_id: int, draft: ProductDraft) -> Product:
    return Product(
        id=product_id,
        name=draft.name,
        type=draft.type,
        price=draft.price,
        quantity=draft.quantity,
        currency_type=draft.currency_type,
        status=draft.status,
        description=draft.description,
        image_url=draft.image_url,
        shop_id=draft.shop_id,
        pet_id=draft.pet_id,
    )
