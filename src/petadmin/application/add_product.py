"""Application service: Add Product use case."""

from __future__ import annotations

from petadmin.application.product_store import ProductStore
from petadmin.domain.exceptions import ValidationError
from petadmin.domain.model.product import CurrencyType, Product
from petadmin.domain.model.product_draft import ProductDraft


class AddProductHandler:

    def __init__(self, store: ProductStore) -> None:
        self._store = store

    def handle(
        self,
        name: str,
        type: str,
        description: str,
        image_url: str,
        price: str | int,
        quantity: str | int,
        currency_type: str = CurrencyType.COIN.value,
        pet_id: int | None = None,
    ) -> Product:
        """Add a new product to the catalog.

        Drafts are validated and checked for a unique name before the
        backend is called.
        """
        draft = ProductDraft.create(
            name=name,
            type=type,
            description=description,
            image_url=image_url,
            price=price,
            quantity=quantity,
            currency_type=currency_type,
            pet_id=pet_id,
            pet_types=self._store.pet_types,
        )

        if self._store.find_by_name(draft.name) is not None:
            raise ValidationError(
                f'Product name "{draft.name}" already exists. '
                "Please choose a different name."
            )

        return self._store.create(draft)
