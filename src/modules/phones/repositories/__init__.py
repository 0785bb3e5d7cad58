"""Phone repositories package."""

from modules.phones.repositories.interfaces import IPhoneRepository
from modules.phones.repositories.memory_repository import PhoneMemoryRepository

__all__ = ["IPhoneRepository", "PhoneMemoryRepository"]
