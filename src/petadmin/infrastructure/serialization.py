"""Mapping between backend JSON payloads and domain objects.

The backend speaks camelCase (``shopProductId``, ``currencyType``,
``petID``); the domain uses snake_case. Payloads are untrusted, so
missing or malformed numbers fall back to 0 rather than failing the
whole listing.
"""

from __future__ import annotations

from typing import Any

from petadmin.domain.exceptions import ApiError
from petadmin.domain.model.pet import PET_ACTIVE, Pet
from petadmin.domain.model.product import CurrencyType, Product, ProductStatus
from petadmin.domain.model.product_draft import ProductDraft


def product_from_payload(item: dict[str, Any]) -> Product:
    product_id = item.get("shopProductId", item.get("id"))
    if product_id is None:
        raise ApiError(f"Product payload without an id: {item!r}")
    return Product(
        id=int(product_id),
        name=item.get("name") or "",
        type=item.get("type") or "",
        price=_int_or_zero(item.get("price")),
        quantity=_int_or_zero(item.get("quantity")),
        currency_type=item.get("currencyType") or CurrencyType.COIN.value,
        status=_status(item.get("status")),
        description=item.get("description"),
        image_url=item.get("imageUrl"),
        shop_id=_int_or_none(item.get("shopId")),
        pet_id=_int_or_none(item.get("petID", item.get("petId"))),
    )


def product_to_payload(product: Product) -> dict[str, Any]:
    return {
        "shopProductId": product.id,
        "shopId": product.shop_id,
        "petID": product.pet_id,
        "name": product.name,
        "type": product.type,
        "description": product.description,
        "imageUrl": product.image_url,
        "price": product.price,
        "currencyType": product.currency_type,
        "quantity": product.quantity,
        "status": product.status.value,
    }


def draft_to_payload(draft: ProductDraft) -> dict[str, Any]:
    return {
        "shopId": draft.shop_id,
        "petID": draft.pet_id,
        "name": draft.name,
        "type": draft.type,
        "description": draft.description,
        "imageUrl": draft.image_url,
        "price": draft.price,
        "currencyType": draft.currency_type,
        "quantity": draft.quantity,
        "status": draft.status.value,
    }


def pet_from_payload(item: dict[str, Any]) -> Pet:
    return Pet(
        id=_int_or_zero(item.get("petId", item.get("id"))),
        name=item.get("name") or item.get("petDefaultName") or "",
        type=item.get("petType") or item.get("type"),
        status=_int_or_zero(item.get("petStatus", item.get("status", PET_ACTIVE))),
    )


def pet_to_payload(pet: Pet) -> dict[str, Any]:
    return {"petId": pet.id, "name": pet.name, "petType": pet.type, "petStatus": pet.status}


# --- Internal helpers -----------------------------------------------------------


def _status(raw: Any) -> ProductStatus:
    return ProductStatus.ACTIVE if _int_or_zero(raw) == ProductStatus.ACTIVE.value else ProductStatus.INACTIVE


def _int_or_zero(raw: Any) -> int:
    value = _int_or_none(raw)
    return 0 if value is None else value


def _int_or_none(raw: Any) -> int | None:
    if raw is None or isinstance(raw, bool):
        return None
    try:
        return int(float(raw))
    except (TypeError, ValueError, OverflowError):
        return None
