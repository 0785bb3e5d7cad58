"""Domain events for stock reservation and checkout."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple
from uuid import UUID

from shared.domain.events import DomainEvent


@dataclass(frozen=True, kw_only=True)
class StockReserved(DomainEvent):
    """Raised when phone stock is moved into the cart."""

    phone_id: int
    quantity: int
    remaining: int


@dataclass(frozen=True, kw_only=True)
class OrderPlaced(DomainEvent):
    """Raised when checkout empties the cart.

    ``lines`` holds ``(phone_id, quantity)`` pairs; the order itself is not
    kept anywhere.
    """

    order_id: UUID
    lines: Tuple[Tuple[int, int], ...]

    @property
    def total_quantity(self) -> int:
        return sum(quantity for _, quantity in self.lines)
