"""Product DRF serializer for API output."""

from __future__ import annotations

from rest_framework import serializers


class ProductSerializer(serializers.Serializer):
    """Wire shape of a Product: ``{id, name, price, created_at}``."""

    id = serializers.UUIDField()
    name = serializers.CharField(allow_blank=True, trim_whitespace=False)
    price = serializers.FloatField()
    created_at = serializers.DateTimeField()
