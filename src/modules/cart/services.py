"""Cart service layer (Use Cases).

Read and removal operations on the shared cart.  Adding to the cart
reserves stock and therefore lives in ``modules.stock.services``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog

from modules.cart.exceptions import CartIntegrityError, CartLineNotFound
from modules.cart.models import CartLine, CartLineTotal

if TYPE_CHECKING:
    from modules.cart.repositories.interfaces import ICartRepository
    from modules.phones.repositories.interfaces import IPhoneRepository

logger = structlog.get_logger(__name__)


class CartService:
    """Application service for cart use-cases.

    Receives repositories via constructor injection (DIP).
    """

    def __init__(
        self,
        cart_repository: ICartRepository,
        phone_repository: IPhoneRepository,
    ) -> None:
        self._cart_repo = cart_repository
        self._phone_repo = phone_repository

    def lines(self) -> List[CartLine]:
        """Return the raw cart lines in insertion order."""
        return self._cart_repo.list()

    def list_cart(self) -> List[CartLineTotal]:
        """Return every line priced at the current catalog price.

        Raises:
            CartIntegrityError: a line references a deleted phone.
        """
        with self._cart_repo.atomic():
            totals: List[CartLineTotal] = []
            missing: List[int] = []
            for line in self._cart_repo.list():
                phone = self._phone_repo.get_by_id(line.phone_id)
                if not phone:
                    missing.append(line.phone_id)
                    continue
                totals.append(
                    CartLineTotal(
                        phone_id=line.phone_id,
                        quantity=line.quantity,
                        total_price=phone.price * line.quantity,
                    )
                )

        if missing:
            logger.error("cart.dangling_lines", phone_ids=missing)
            raise CartIntegrityError(missing)
        return totals

    def remove_line(self, phone_id: int) -> CartLine:
        """Drop the line for ``phone_id``; reserved stock is not returned.

        Raises:
            CartLineNotFound: the cart has no line for the phone.
        """
        with self._cart_repo.atomic():
            line = self._cart_repo.delete(phone_id)
        if not line:
            raise CartLineNotFound(f"Phone {phone_id} is not in the cart.")
        logger.info("cart.line_removed", phone_id=phone_id, quantity=line.quantity)
        return line
