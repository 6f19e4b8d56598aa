"""Product request DTOs.

Pydantic v2 models that decode request bodies before they reach the
entity.  Wire shapes are kept apart from ``Product`` so the API schema can
evolve without touching the domain.  DTOs are immutable (``frozen=True``).

Missing fields default to their zero value on purpose: the entity, not the
DTO, decides whether ``name`` or ``price`` is acceptable and reports the
matching ``ProductErrorKind``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, FiniteFloat


class CreateProductInput(BaseModel):
    """Body of ``POST /products``."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    price: FiniteFloat = 0


class UpdateProductInput(BaseModel):
    """Body of ``PUT /products/{id}``.

    Same fields as the wire shape of a product.  ``id`` and ``created_at``
    are decoded (a malformed value is rejected) but their values are
    ignored: the id comes from the path and the creation time is owned by
    the store.
    """

    model_config = ConfigDict(frozen=True)

    id: Optional[UUID] = None
    name: str = ""
    price: FiniteFloat = 0
    created_at: Optional[datetime] = None
