"""In-memory implementation of the Phone repository.

Satisfies ``IPhoneRepository`` over ``InMemoryStore.phones``.
Error handling follows the Null Object pattern: look-ups return ``None``
instead of raising; the Service Layer decides how to translate a
missing phone into an API response.
"""

from __future__ import annotations

from typing import ContextManager, List, Optional

import structlog

from modules.core.store import InMemoryStore, store as default_store
from modules.phones.dtos import PhoneFilterDTO
from modules.phones.models import Phone
from modules.phones.repositories.interfaces import IPhoneRepository

logger = structlog.get_logger(__name__)


class PhoneMemoryRepository(IPhoneRepository):
    """Concrete Phone repository backed by the process store."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or default_store

    def atomic(self) -> ContextManager[object]:
        return self._store.atomic()

    def get_by_id(self, id: int) -> Optional[Phone]:
        for phone in self._store.phones:
            if phone.id == id:
                return phone
        return None

    def list(self) -> List[Phone]:
        return list(self._store.phones)

    def filter(self, filters: PhoneFilterDTO) -> List[Phone]:
        return [phone for phone in self._store.phones if filters.matches(phone)]

    def next_id(self) -> int:
        return self._store.next_phone_id()

    def save(self, entity: Phone) -> Phone:
        """Append a new phone; phones already in the catalog are updated in place."""
        with self._store.atomic():
            if not any(p is entity for p in self._store.phones):
                self._store.phones.append(entity)
        logger.info("phone.saved", phone_id=entity.id)
        return entity

    def delete(self, id: int) -> Optional[Phone]:
        """Remove a phone by id.

        Returns the removed phone, or ``None`` if no phone has that id.
        """
        with self._store.atomic():
            for index, phone in enumerate(self._store.phones):
                if phone.id == id:
                    del self._store.phones[index]
                    logger.info("phone.removed", phone_id=id)
                    return phone
        return None
