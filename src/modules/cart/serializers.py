"""Cart DRF serializers for API output (camelCase wire names)."""

from __future__ import annotations

from rest_framework import serializers

from modules.core.serializers import PriceField


class CartLineSerializer(serializers.Serializer):
    phoneId = serializers.IntegerField(source="phone_id", read_only=True)
    quantity = serializers.IntegerField(read_only=True)


class CartLineTotalSerializer(CartLineSerializer):
    """A cart line with ``totalPrice`` = current price x quantity."""

    totalPrice = PriceField(source="total_price")
