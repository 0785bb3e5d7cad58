"""Cart entities.

``CartLine.phone_id`` is a weak reference: the catalog may delete the
phone while the line is still in the cart.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass
class CartLine:
    phone_id: int
    quantity: int


@dataclass(frozen=True)
class CartLineTotal:
    """A cart line priced against the current catalog."""

    phone_id: int
    quantity: int
    total_price: Decimal
