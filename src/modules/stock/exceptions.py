"""Stock coordination exceptions.

Raised by the Stock Coordinator when a reservation or checkout cannot
be honoured.  The API layer (Views) catches these and translates them
into ``{"error": ...}`` responses.
"""

from __future__ import annotations


class OutOfStock(Exception):
    """The phone is unknown or has less stock than the requested quantity."""


class EmptyCart(Exception):
    """Checkout was requested with no lines in the cart."""


class InsufficientStock(Exception):
    """A cart line can no longer be covered by its phone's stock at checkout."""
