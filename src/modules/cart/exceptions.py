"""Cart domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
``{"error": ...}`` responses.
"""

from __future__ import annotations

from typing import Sequence


class CartLineNotFound(Exception):
    """The cart holds no line for the requested phone."""


class CartIntegrityError(Exception):
    """Cart lines reference phones that are no longer in the catalog."""

    def __init__(self, phone_ids: Sequence[int]) -> None:
        self.phone_ids = list(phone_ids)
        super().__init__(
            "Cart references missing phones: "
            + ", ".join(str(pid) for pid in self.phone_ids)
        )
