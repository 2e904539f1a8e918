"""REST-backed implementation of ProductRepository.

Talks to the game backend's shop-product endpoints:

    GET    /shop-products
    POST   /shop-products
    PUT    /shop-products/{id}
    DELETE /shop-products/{id}
    PATCH  /shop-products/{id}/status?status={0|1}
    GET    /pets
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from petadmin.domain.exceptions import ApiError, EntityNotFoundError
from petadmin.domain.model.pet import Pet
from petadmin.domain.model.product import Product, ProductStatus
from petadmin.domain.model.product_draft import ProductDraft
from petadmin.domain.repository.product_repository import ProductRepository
from petadmin.infrastructure.serialization import (
    draft_to_payload,
    pet_from_payload,
    product_from_payload,
)

logger = logging.getLogger(__name__)


class RestProductRepository(ProductRepository):

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update({"Content-Type": "application/json"})
        if token:
            self._session.headers.update({"Authorization": f"Bearer {token}"})

    # --- ProductRepository interface ------------------------------------------

    def list_all(self) -> list[Product]:
        data = self._request("GET", "/shop-products")
        if not isinstance(data, list):
            raise ApiError("Unexpected response for product list (expected a JSON array)")
        return [product_from_payload(item) for item in data]

    def create(self, draft: ProductDraft) -> Product:
        data = self._request("POST", "/shop-products", json=draft_to_payload(draft))
        return product_from_payload(data)

    def update(self, product_id: int, draft: ProductDraft) -> Product:
        data = self._request(
            "PUT", f"/shop-products/{product_id}", json=draft_to_payload(draft)
        )
        return product_from_payload(data)

    def delete(self, product_id: int) -> None:
        self._request("DELETE", f"/shop-products/{product_id}")

    def set_status(self, product_id: int, status: ProductStatus) -> Product:
        data = self._request(
            "PATCH",
            f"/shop-products/{product_id}/status",
            params={"status": status.value},
        )
        return product_from_payload(data)

    def list_pets(self) -> list[Pet]:
        data = self._request("GET", "/pets")
        if not isinstance(data, list):
            raise ApiError("Unexpected response for pet list (expected a JSON array)")
        return [pet_from_payload(item) for item in data]

    # --- Transport helpers ----------------------------------------------------

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        url = f"{self._base_url}{path}"
        logger.debug("%s %s", method, url)
        try:
            response = self._session.request(method, url, timeout=self._timeout, **kwargs)
        except requests.RequestException as exc:
            logger.error("%s %s failed: %s", method, url, exc)
            raise ApiError(f"Cannot reach backend at {self._base_url}: {exc}") from exc

        if response.status_code == 404:
            raise EntityNotFoundError(f"Not found: {method} {path}")
        if not response.ok:
            message = self._error_message(response)
            logger.error("%s %s -> %d %s", method, url, response.status_code, message)
            raise ApiError(
                f"Backend rejected {method} {path} ({response.status_code}): {message}",
                status_code=response.status_code,
            )

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise ApiError(f"Backend returned invalid JSON for {method} {path}") from exc

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text.strip() or response.reason or ""
        if isinstance(body, dict):
            return str(body.get("message") or body.get("error") or body)
        return str(body)
