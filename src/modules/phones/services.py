"""Phone service layer (Use Cases).

Orchestrates catalog operations, delegating storage to the injected
``IPhoneRepository``.  Every command runs inside the repository's
``atomic()`` block.

Rules enforced here:
- New phones get the next id from the store counter (never reused).
- Updates require at least one truthy field and merge only supplied
  fields over the stored phone.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog

from modules.phones.dtos import PhoneFilterDTO
from modules.phones.exceptions import NothingToUpdate, PhoneNotFound
from modules.phones.models import Phone

if TYPE_CHECKING:
    from modules.phones.dtos import CreatePhoneDTO, UpdatePhoneDTO
    from modules.phones.repositories.interfaces import IPhoneRepository

logger = structlog.get_logger(__name__)

UPDATABLE_FIELDS = ("name", "brand", "price", "stock")


class PhoneService:
    """Application service for catalog use-cases.

    Receives an ``IPhoneRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IPhoneRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_phone(self, dto: CreatePhoneDTO) -> Phone:
        """Insert a new phone at the end of the catalog."""
        with self._repo.atomic():
            phone = Phone(
                id=self._repo.next_id(),
                name=dto.name,
                brand=dto.brand,
                price=dto.price,
                stock=dto.stock,
            )
            phone = self._repo.save(phone)
        logger.info("phone.created", phone_id=phone.id, brand=phone.brand)
        return phone

    def update_phone(self, id: int, dto: UpdatePhoneDTO) -> Phone:
        """Merge the supplied fields over an existing phone.

        Raises:
            PhoneNotFound: if the phone does not exist.
            NothingToUpdate: if no field carries a truthy value.
        """
        with self._repo.atomic():
            phone = self._repo.get_by_id(id)
            if not phone:
                raise PhoneNotFound(f"Phone {id} not found.")

            log = logger.bind(phone_id=id)
            if not dto.has_changes():
                log.warning("phone.update_rejected")
                raise NothingToUpdate("No fields to update.")

            for field in UPDATABLE_FIELDS:
                value = getattr(dto, field)
                if value is not None:
                    setattr(phone, field, value)

            phone = self._repo.save(phone)
        log.info("phone.updated", fields=sorted(dto.changes()))
        return phone

    def delete_phone(self, id: int) -> Phone:
        """Remove a phone from the catalog and return it.

        Cart lines referencing the phone are left in place; the cart
        reports them as dangling.

        Raises:
            PhoneNotFound: if the phone does not exist.
        """
        with self._repo.atomic():
            phone = self._repo.delete(id)
        if not phone:
            raise PhoneNotFound(f"Phone {id} not found.")
        logger.info("phone.deleted", phone_id=id)
        return phone

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_phones(self, filters: Optional[PhoneFilterDTO] = None) -> List[Phone]:
        """Return phones in insertion order, optionally filtered."""
        return self._repo.filter(filters or PhoneFilterDTO())

    def get_phone(self, id: int) -> Phone:
        """Retrieve a single phone by id.

        Raises:
            PhoneNotFound: if the phone does not exist.
        """
        phone = self._repo.get_by_id(id)
        if not phone:
            raise PhoneNotFound(f"Phone {id} not found.")
        return phone
