"""Product aggregate.

A shop product is a catalog record sold for in-game currency. Products
are owned by the backend; this side only ever holds a copy that is
refreshed after every confirmed mutation.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


class ProductStatus(Enum):
    INACTIVE = 0
    ACTIVE = 1


class CurrencyType(Enum):
    COIN = "Coin"
    DIAMOND = "Diamond"
    GEM = "Gem"


class ShopGroup(Enum):
    """The two parent groupings a product can live in."""

    PET = 1
    ITEM = 2

    @property
    def label(self) -> str:
        return self.name.capitalize()


# ---------------------------------------------------------------------------
# Fixed type tags
# ---------------------------------------------------------------------------
FOOD_TYPE = "Food"
TOY_TYPE = "Toy"

# Used when no pet directory is available to derive species from.
DEFAULT_PET_TYPES: tuple[str, ...] = (
    "Canary",
    "Cat",
    "Dog",
    "Mouse",
    "Rabbit",
    "Turtle",
)


def shop_name(shop_id: int | None) -> str:
    """Display name for a shop id ("Pet", "Item" or "Shop <id>")."""
    for group in ShopGroup:
        if group.value == shop_id:
            return group.label
    return f"Shop {shop_id}"


@dataclass
class Product:
    """A product in the shop catalog.

    Kept as a plain mutable dataclass: records arrive from the backend
    and may be inconsistent (unknown currency, missing description), so
    nothing is validated here. Input validation happens on
    ``ProductDraft`` before anything is sent to the backend.
    """

    id: int
    name: str
    type: str
    price: int
    quantity: int
    currency_type: str = CurrencyType.COIN.value
    status: ProductStatus = ProductStatus.ACTIVE
    description: str | None = None
    image_url: str | None = None
    shop_id: int | None = None
    pet_id: int | None = None

    @property
    def is_active(self) -> bool:
        return self.status == ProductStatus.ACTIVE

    @property
    def in_stock(self) -> bool:
        return self.quantity > 0

    def is_pet_product(self, pet_types: Iterable[str] = DEFAULT_PET_TYPES) -> bool:
        """True if the product is linked to a pet or typed as a pet species."""
        if self.pet_id is not None:
            return True
        return self.type in set(pet_types)

    def group(self, pet_types: Iterable[str] = DEFAULT_PET_TYPES) -> ShopGroup:
        if self.is_pet_product(pet_types):
            return ShopGroup.PET
        return ShopGroup.ITEM
