"""Product entity.

Plain immutable value with no framework dependencies.  Views build it,
repositories store it; neither mutates it.

Invariants are checked by ``Product.validate`` in a fixed order and the
first violation wins:

1. ``id`` is present.
2. ``id`` parses as a valid identifier.
3. ``name`` is non-empty.
4. ``price`` is non-zero (zero means "missing").
5. ``price`` is not negative.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import UUID

from modules.core.identifiers import InvalidIdentifier, new_id, parse_id
from modules.products.exceptions import ProductErrorKind, ProductValidationError


@dataclass(frozen=True)
class Product:
    id: UUID
    name: str
    price: float
    created_at: datetime

    @classmethod
    def new(cls, name: str, price: float) -> Product:
        """Create a validated product with a fresh id and creation time.

        Raises:
            ProductValidationError: if any invariant is violated.  No
                product is returned in that case.
        """
        product = cls(
            id=new_id(),
            name=name,
            price=price,
            created_at=datetime.now(timezone.utc),
        )
        product.validate()
        return product

    def validate(self) -> None:
        """Raise ``ProductValidationError`` for the first violated invariant."""
        if not self.id:
            raise ProductValidationError(ProductErrorKind.ID_REQUIRED)
        try:
            parse_id(str(self.id))
        except InvalidIdentifier:
            raise ProductValidationError(ProductErrorKind.ID_INVALID) from None
        if not self.name:
            raise ProductValidationError(ProductErrorKind.NAME_REQUIRED)
        if self.price == 0:
            raise ProductValidationError(ProductErrorKind.PRICE_REQUIRED)
        if self.price < 0:
            raise ProductValidationError(ProductErrorKind.PRICE_INVALID)
