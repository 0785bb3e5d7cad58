"""Phone repository interface.

Extends ``IRepository[Phone, int]`` with the filtered listing and the
id allocation the catalog needs.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.phones.dtos import PhoneFilterDTO
    from modules.phones.models import Phone


class IPhoneRepository(IRepository["Phone", int]):
    """Repository contract for the Phone catalog."""

    @abstractmethod
    def filter(self, filters: PhoneFilterDTO) -> List[Phone]:
        """List phones matching every supplied filter, in insertion order."""

    @abstractmethod
    def next_id(self) -> int:
        """Allocate the id for a new phone."""
