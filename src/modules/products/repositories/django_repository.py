"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API and maps
``ProductRecord`` rows to ``Product`` entities.  Database errors are
wrapped in ``RepositoryError`` so views never see driver exceptions.
"""

from __future__ import annotations

from typing import List

import structlog

from django.core.exceptions import ValidationError
from django.db import DatabaseError, IntegrityError, transaction

from modules.products.entities import Product
from modules.products.exceptions import (
    ProductAlreadyExists,
    ProductNotFound,
    RepositoryError,
)
from modules.products.models import ProductRecord
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)

_ORDERING = {
    "asc": ("created_at", "id"),
    "desc": ("-created_at", "-id"),
}


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    @staticmethod
    def _to_entity(record: ProductRecord) -> Product:
        return Product(
            id=record.id,
            name=record.name,
            price=record.price,
            created_at=record.created_at,
        )

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create(self, product: Product) -> None:
        try:
            with transaction.atomic():
                ProductRecord.objects.create(
                    id=product.id,
                    name=product.name,
                    price=product.price,
                    created_at=product.created_at,
                )
        except IntegrityError as exc:
            raise ProductAlreadyExists(
                f"Product {product.id} already exists."
            ) from exc
        except DatabaseError as exc:
            raise RepositoryError(f"Could not create product: {exc}") from exc
        logger.info("product.saved", product_id=str(product.id))

    def update(self, product: Product) -> None:
        """Rewrite ``name`` and ``price``; ``created_at`` is never touched."""
        try:
            with transaction.atomic():
                updated = ProductRecord.objects.filter(id=product.id).update(
                    name=product.name,
                    price=product.price,
                )
        except DatabaseError as exc:
            raise RepositoryError(f"Could not update product: {exc}") from exc
        if not updated:
            raise ProductNotFound(f"Product {product.id} not found.")
        logger.info("product.saved", product_id=str(product.id))

    def delete(self, product: Product) -> None:
        try:
            with transaction.atomic():
                deleted, _ = ProductRecord.objects.filter(id=product.id).delete()
        except DatabaseError as exc:
            raise RepositoryError(f"Could not delete product: {exc}") from exc
        if not deleted:
            raise ProductNotFound(f"Product {product.id} not found.")
        logger.info("product.removed", product_id=str(product.id))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_by_id(self, id: str) -> Product:
        """Retrieve a product by primary key.

        Unknown and malformed ids both raise ``ProductNotFound``.
        """
        try:
            record = ProductRecord.objects.get(id=id)
        except (ProductRecord.DoesNotExist, ValueError, ValidationError):
            raise ProductNotFound(f"Product {id} not found.") from None
        except DatabaseError as exc:
            raise RepositoryError(f"Could not load product: {exc}") from exc
        return self._to_entity(record)

    def find_all(self, page: int, limit: int, sort: str) -> List[Product]:
        """List products ordered by creation time.

        Only when both ``page`` and ``limit`` are positive is the result
        sliced to ``[(page - 1) * limit, page * limit)``; otherwise every
        product is returned.
        """
        ordering = _ORDERING.get((sort or "").lower())
        if ordering is None:
            raise RepositoryError(f"Invalid sort direction: {sort!r}.")

        queryset = ProductRecord.objects.order_by(*ordering)
        if page > 0 and limit > 0:
            offset = (page - 1) * limit
            queryset = queryset[offset : offset + limit]
        try:
            return [self._to_entity(record) for record in queryset]
        except DatabaseError as exc:
            raise RepositoryError(f"Could not list products: {exc}") from exc
