"""Product repository interface.

The contract every Product store must satisfy.  Views depend on this
abstraction only, so the storage engine (Django ORM, in-memory, document
store) can be swapped without touching handler logic.

Failures are raised, never returned:

- ``ProductNotFound`` when a lookup, update or delete misses.
- ``ProductAlreadyExists`` when ``create`` collides with a stored id.
- ``RepositoryError`` for every other store failure.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from modules.products.entities import Product


class IProductRepository(ABC):
    """Repository contract for the Product entity."""

    @abstractmethod
    def create(self, product: Product) -> None:
        """Persist a new product."""

    @abstractmethod
    def find_all(self, page: int, limit: int, sort: str) -> List[Product]:
        """Return a page of products ordered by creation time.

        ``sort`` is ``"asc"`` or ``"desc"``.  ``page`` is 1-based; a zero
        ``page`` or ``limit`` lets the implementation pick its default.
        """

    @abstractmethod
    def find_by_id(self, id: str) -> Product:
        """Retrieve a product by its identifier."""

    @abstractmethod
    def update(self, product: Product) -> None:
        """Replace the stored product that has ``product.id``."""

    @abstractmethod
    def delete(self, product: Product) -> None:
        """Remove the stored product that has ``product.id``."""
