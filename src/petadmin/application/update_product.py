"""Application service: Update Product use case."""

from __future__ import annotations

from typing import Any

from petadmin.application.product_store import ProductStore
from petadmin.domain.exceptions import ValidationError
from petadmin.domain.model.product import Product
from petadmin.domain.model.product_draft import ProductDraft


class UpdateProductHandler:

    def __init__(self, store: ProductStore) -> None:
        self._store = store

    def handle(self, product_id: int, **changes: Any) -> Product:
        """Apply *changes* on top of the product's current fields.

        Fields that are not mentioned (or given as None) keep their
        current value, so an update cannot unlink a product from its pet.
        The merged result is validated as a whole: a backend record with
        no description or an unknown currency can only be edited when
        the call also supplies a valid value for that field.
        """
        product = self._store.get(product_id)

        fields = ProductDraft.from_product(product)
        unknown = set(changes) - set(fields)
        if unknown:
            raise ValidationError(f"Unknown product field(s): {', '.join(sorted(unknown))}")
        fields.update({k: v for k, v in changes.items() if v is not None})

        draft = ProductDraft.create(**fields, pet_types=self._store.pet_types)

        clash = self._store.find_by_name(draft.name)
        if clash is not None and clash.id != product_id:
            raise ValidationError(
                f'Product name "{draft.name}" already exists. '
                "Please choose a different name."
            )

        return self._store.update(product_id, draft)
