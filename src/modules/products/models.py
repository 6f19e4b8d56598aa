"""Product persistence model.

``ProductRecord`` is the durable representation of the ``Product`` entity
and is only touched by ``ProductDjangoRepository``.  The primary key is
assigned by the entity (UUIDv7), never by the database.
"""

from __future__ import annotations

from django.db import models


class ProductRecord(models.Model):
    id = models.UUIDField(primary_key=True, editable=False)
    name = models.CharField(max_length=255)
    price = models.FloatField()
    created_at = models.DateTimeField()

    class Meta:
        db_table = "products"
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["created_at"], name="products_created_at_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.id} - {self.name}"
