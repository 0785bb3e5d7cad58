"""Serializer fields shared by every module."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Union

from rest_framework import serializers


class PriceField(serializers.DecimalField):
    """Read-only money amount rendered as a JSON number.

    Whole amounts are emitted as integers (``1200``, not ``1200.0``);
    anything else stays a ``Decimal`` and is encoded as a float.
    """

    def __init__(self, **kwargs: Any) -> None:
        kwargs.setdefault("max_digits", None)
        kwargs.setdefault("decimal_places", None)
        kwargs.setdefault("coerce_to_string", False)
        kwargs.setdefault("read_only", True)
        super().__init__(**kwargs)

    def to_representation(self, value: Any) -> Union[int, Decimal]:
        amount = super().to_representation(value)
        if amount == amount.to_integral_value():
            return int(amount)
        return amount
