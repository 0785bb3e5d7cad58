"""Cart repository interface.

Cart lines are keyed by the phone they reference: the cart holds at most
one line per phone.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.cart.models import CartLine


class ICartRepository(IRepository["CartLine", int]):
    """Repository contract for the shared cart."""

    @abstractmethod
    def clear(self) -> List[CartLine]:
        """Remove every line and return what was removed."""
