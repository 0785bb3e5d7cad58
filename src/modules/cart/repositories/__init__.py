"""Cart repositories package."""

from modules.cart.repositories.interfaces import ICartRepository
from modules.cart.repositories.memory_repository import CartMemoryRepository

__all__ = ["CartMemoryRepository", "ICartRepository"]
