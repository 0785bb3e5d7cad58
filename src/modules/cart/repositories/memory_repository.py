"""In-memory implementation of the Cart repository.

Satisfies ``ICartRepository`` over ``InMemoryStore.cart``; look-ups
return ``None`` for phones that have no line.
"""

from __future__ import annotations

from typing import ContextManager, List, Optional

import structlog

from modules.cart.models import CartLine
from modules.cart.repositories.interfaces import ICartRepository
from modules.core.store import InMemoryStore, store as default_store

logger = structlog.get_logger(__name__)


class CartMemoryRepository(ICartRepository):
    """Concrete Cart repository backed by the process store."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or default_store

    def atomic(self) -> ContextManager[object]:
        return self._store.atomic()

    def get_by_id(self, id: int) -> Optional[CartLine]:
        for line in self._store.cart:
            if line.phone_id == id:
                return line
        return None

    def list(self) -> List[CartLine]:
        return list(self._store.cart)

    def save(self, entity: CartLine) -> CartLine:
        with self._store.atomic():
            if not any(line is entity for line in self._store.cart):
                self._store.cart.append(entity)
        logger.info(
            "cart.line_saved", phone_id=entity.phone_id, quantity=entity.quantity
        )
        return entity

    def delete(self, id: int) -> Optional[CartLine]:
        with self._store.atomic():
            for index, line in enumerate(self._store.cart):
                if line.phone_id == id:
                    del self._store.cart[index]
                    return line
        return None

    def clear(self) -> List[CartLine]:
        with self._store.atomic():
            removed, self._store.cart = self._store.cart, []
        logger.info("cart.cleared", lines=len(removed))
        return removed
