"""Phone catalog entity.

Invariants:
- ``id`` is issued by the store counter and never reused.
- ``stock`` is never negative; the Stock Coordinator only decrements it
  after checking availability.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass
class Phone:
    """Catalog entry, mutated in place by updates and stock reservations."""

    id: int
    name: str
    brand: str
    price: Decimal
    stock: int

    def has_stock_for(self, quantity: int) -> bool:
        return self.stock >= quantity
