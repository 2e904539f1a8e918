"""ProductDraft — validated input for creating or editing a product.

Nothing reaches the backend unless it went through ``ProductDraft.create``.
All field rules are checked together so the user sees every problem at
once instead of fixing them one round-trip at a time.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from petadmin.domain.exceptions import ValidationError
from petadmin.domain.model.product import (
    DEFAULT_PET_TYPES,
    CurrencyType,
    Product,
    ProductStatus,
    ShopGroup,
)

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 1000
MAX_PRICE = 1_000_000
MAX_QUANTITY = 10_000
IMAGE_HOST = "drive.google.com"


@dataclass(frozen=True)
class ProductDraft:
    name: str
    type: str
    description: str
    image_url: str
    price: int
    quantity: int
    currency_type: str = CurrencyType.COIN.value
    status: ProductStatus = ProductStatus.ACTIVE
    pet_id: int | None = None
    shop_id: int | None = None

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(
        name: str | None,
        type: str | None,
        description: str | None,
        image_url: str | None,
        price: str | int | None,
        quantity: str | int | None,
        currency_type: str = CurrencyType.COIN.value,
        status: ProductStatus = ProductStatus.ACTIVE,
        pet_id: int | None = None,
        pet_types: Iterable[str] = DEFAULT_PET_TYPES,
    ) -> ProductDraft:
        """Build a draft, enforcing every form rule.

        A quantity of zero forces the status to INACTIVE: an empty shelf
        is never offered for sale.
        """
        errors: list[str] = []

        name = (name or "").strip()
        if not name:
            errors.append("Product name is required.")
        elif len(name) < NAME_MIN_LENGTH:
            errors.append(f"Product name must be at least {NAME_MIN_LENGTH} characters.")
        elif len(name) > NAME_MAX_LENGTH:
            errors.append(f"Product name cannot exceed {NAME_MAX_LENGTH} characters.")

        type = (type or "").strip()
        if not type:
            errors.append("Product type is required.")

        description = description or ""
        if not description.strip():
            errors.append("Description is required.")
        elif len(description) > DESCRIPTION_MAX_LENGTH:
            errors.append(
                f"Description cannot exceed {DESCRIPTION_MAX_LENGTH} characters."
            )

        image_url = (image_url or "").strip()
        if not image_url:
            errors.append("Image URL is required.")
        elif IMAGE_HOST not in image_url:
            errors.append("Please use Google Drive link.")

        parsed_price = _parse_int(price)
        if parsed_price is None or parsed_price <= 0:
            errors.append("Product price must be greater than 0.")
        elif parsed_price > MAX_PRICE:
            errors.append(f"Product price cannot exceed {MAX_PRICE:,}.")

        parsed_quantity = _parse_int(quantity)
        if parsed_quantity is None or parsed_quantity < 0:
            errors.append("Quantity must be a non-negative number (>=0).")
        elif parsed_quantity > MAX_QUANTITY:
            errors.append(f"Quantity cannot exceed {MAX_QUANTITY:,}.")

        if currency_type not in {c.value for c in CurrencyType}:
            errors.append(f"Unknown currency type '{currency_type}'.")

        if errors:
            raise ValidationError(
                "Please fix the following errors: " + " ".join(errors)
            )

        if parsed_quantity == 0:
            status = ProductStatus.INACTIVE

        is_pet = pet_id is not None or type in set(pet_types)
        shop = ShopGroup.PET if is_pet else ShopGroup.ITEM

        return ProductDraft(
            name=name,
            type=type,
            description=description.strip(),
            image_url=image_url,
            price=parsed_price,  # type: ignore[arg-type]
            quantity=parsed_quantity,  # type: ignore[arg-type]
            currency_type=currency_type,
            status=status,
            pet_id=pet_id,
            shop_id=shop.value,
        )

    @staticmethod
    def from_product(product: Product) -> dict:
        """Current field values of *product*, as keyword arguments for ``create``."""
        return {
            "name": product.name,
            "type": product.type,
            "description": product.description,
            "image_url": product.image_url,
            "price": product.price,
            "quantity": product.quantity,
            "currency_type": product.currency_type,
            "status": product.status,
            "pet_id": product.pet_id,
        }


def _parse_int(value: str | int | None) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return None
