"""Abstract collaborator for the Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (REST backend, JSON file)
live in the infrastructure layer.

Implementations raise ``EntityNotFoundError`` for unknown ids and
``ApiError`` when the backend cannot carry out a request.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from petadmin.domain.model.pet import Pet
from petadmin.domain.model.product import Product, ProductStatus
from petadmin.domain.model.product_draft import ProductDraft


class ProductRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, in backend order."""

    @abstractmethod
    def create(self, draft: ProductDraft) -> Product:
        """Create a product and return it as stored."""

    @abstractmethod
    def update(self, product_id: int, draft: ProductDraft) -> Product:
        """Replace a product's fields and return it as stored."""

    @abstractmethod
    def delete(self, product_id: int) -> None:
        """Remove a product from the catalog."""

    @abstractmethod
    def set_status(self, product_id: int, status: ProductStatus) -> Product:
        """Enable or disable a product."""

    @abstractmethod
    def list_pets(self) -> list[Pet]:
        """Return the pet directory used to classify pet products."""
