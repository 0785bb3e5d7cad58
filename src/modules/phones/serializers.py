"""Phone DRF serializers for API output.

Input validation lives in the Pydantic DTOs (``dtos.py``); these
serializers only render ``Phone`` entities.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.core.serializers import PriceField


class PhoneSerializer(serializers.Serializer):
    """Read-only representation of a catalog entry."""

    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(read_only=True)
    brand = serializers.CharField(read_only=True)
    price = PriceField()
    stock = serializers.IntegerField(read_only=True)
