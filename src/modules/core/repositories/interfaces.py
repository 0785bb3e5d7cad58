"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on the store's lists directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ContextManager, Generic, List, Optional, TypeVar

T = TypeVar("T")
K = TypeVar("K")


class IRepository(ABC, Generic[T, K]):
    """Base generic repository contract.

    ``T`` is the entity managed by the repository (e.g. ``Phone``) and
    ``K`` the type of its lookup key.
    """

    @abstractmethod
    def atomic(self) -> ContextManager[object]:
        """Unit-of-work boundary shared by every repository on the same store."""

    @abstractmethod
    def get_by_id(self, id: K) -> Optional[T]:
        """Retrieve an entity by its key, ``None`` when absent."""

    @abstractmethod
    def list(self) -> List[T]:
        """List entities in insertion order."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist (create or update) an entity."""

    @abstractmethod
    def delete(self, id: K) -> Optional[T]:
        """Remove an entity by key and return it, ``None`` when absent."""
