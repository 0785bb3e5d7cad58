"""Process-wide in-memory state.

Provides ``InMemoryStore``, the single owner of the phone catalog and the
shared cart.  Repositories receive the store by reference; nothing else
holds catalog or cart state.

- ``atomic()`` is the unit-of-work boundary: a re-entrant lock held for the
  whole of a service command, so one mutation runs at a time even under a
  threaded WSGI server.
- ids come from a monotonic counter and are never reused, not even after the
  highest id has been deleted.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from decimal import Decimal
from typing import TYPE_CHECKING, Iterator, List

import structlog
from django.conf import settings

if TYPE_CHECKING:
    from modules.cart.models import CartLine
    from modules.phones.models import Phone

logger = structlog.get_logger(__name__)

SEED_PHONES = [
    ("iPhone 14", "Apple", Decimal("1200"), 10),
    ("Galaxy S23", "Samsung", Decimal("900"), 15),
    ("Pixel 7", "Google", Decimal("800"), 8),
]


class InMemoryStore:
    """Owner of both collections for the lifetime of the process."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self.phones: List[Phone] = []
        self.cart: List[CartLine] = []
        self._last_id = 0

    @contextmanager
    def atomic(self) -> Iterator[InMemoryStore]:
        with self._lock:
            yield self

    def next_phone_id(self) -> int:
        with self._lock:
            self._last_id += 1
            return self._last_id

    def reset(self, seed: bool = True) -> None:
        """Drop all state; optionally reload the demo catalog."""
        from modules.phones.models import Phone

        with self._lock:
            self.phones = []
            self.cart = []
            self._last_id = 0
            if seed:
                for name, brand, price, stock in SEED_PHONES:
                    self.phones.append(
                        Phone(
                            id=self.next_phone_id(),
                            name=name,
                            brand=brand,
                            price=price,
                            stock=stock,
                        )
                    )
        logger.info("store.reset", seeded=seed, phones=len(self.phones))


store = InMemoryStore()
store.reset(seed=settings.SEED_CATALOG)
