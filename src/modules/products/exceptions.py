"""Product domain exceptions.

Two families:

- ``ProductValidationError`` is raised by the entity when an invariant is
  violated.  Its ``kind`` is a ``ProductErrorKind`` member, so callers
  branch on the kind instead of matching message text.
- ``RepositoryError`` and its subclasses are raised by repository
  implementations.  The API layer (Views) translates them into HTTP
  responses.
"""

from __future__ import annotations

from enum import StrEnum


class ProductErrorKind(StrEnum):
    """Entity invariants, listed in the order they are checked."""

    ID_REQUIRED = "id_required"
    ID_INVALID = "id_invalid"
    NAME_REQUIRED = "name_required"
    PRICE_REQUIRED = "price_required"
    PRICE_INVALID = "price_invalid"


_MESSAGES = {
    ProductErrorKind.ID_REQUIRED: "id is required",
    ProductErrorKind.ID_INVALID: "id is invalid",
    ProductErrorKind.NAME_REQUIRED: "name is required",
    ProductErrorKind.PRICE_REQUIRED: "price is required",
    ProductErrorKind.PRICE_INVALID: "price is invalid",
}


class ProductValidationError(ValueError):
    """A Product invariant was violated."""

    def __init__(self, kind: ProductErrorKind) -> None:
        self.kind = kind
        super().__init__(_MESSAGES[kind])


# ---------------------------------------------------------------------------
# Repository errors
# ---------------------------------------------------------------------------


class RepositoryError(Exception):
    """The backing store failed to complete the operation."""


class ProductNotFound(RepositoryError):
    """No product matches the requested identifier."""


class ProductAlreadyExists(RepositoryError):
    """A product with the same identifier is already stored."""
