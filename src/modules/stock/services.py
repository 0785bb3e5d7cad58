"""Stock Coordinator (Use Cases spanning catalog and cart).

Keeps cart quantities and phone stock consistent:

- Adding to the cart reserves stock immediately: the phone's ``stock`` is
  decremented by the quantity added, so the cart never holds more than
  was available at the moment of addition.
- Checkout compares every line with its phone's remaining (already
  decremented) stock before the cart is cleared, and fails when a phone is
  gone or a line is larger than what is left on the shelf.
- Checkout does not return stock and keeps no order record; the placed
  order exists only as the ``OrderPlaced`` event.

Both commands run inside a single ``atomic()`` block and either apply
completely or leave catalog and cart untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Tuple
from uuid import UUID, uuid4

import structlog

from modules.cart.models import CartLine
from modules.stock.events import OrderPlaced, StockReserved
from modules.stock.exceptions import EmptyCart, InsufficientStock, OutOfStock
from shared.infrastructure.bus import event_bus as default_event_bus

if TYPE_CHECKING:
    from modules.cart.dtos import AddToCartDTO
    from modules.cart.repositories.interfaces import ICartRepository
    from modules.phones.repositories.interfaces import IPhoneRepository
    from shared.domain.bus import IEventBus

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class PlacedOrder:
    order_id: UUID
    lines: Tuple[Tuple[int, int], ...]


class StockCoordinator:
    """Application service for stock-sensitive cart use-cases.

    Receives repositories via constructor injection (DIP).
    """

    def __init__(
        self,
        phone_repository: IPhoneRepository,
        cart_repository: ICartRepository,
        event_bus: IEventBus | None = None,
    ) -> None:
        self._phone_repo = phone_repository
        self._cart_repo = cart_repository
        self._event_bus = event_bus or default_event_bus

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def add_to_cart(self, dto: AddToCartDTO) -> List[CartLine]:
        """Reserve ``dto.quantity`` units of a phone into the cart.

        Raises:
            OutOfStock: the phone does not exist or has too little stock.
        """
        log = logger.bind(phone_id=dto.phone_id, quantity=dto.quantity)

        with self._phone_repo.atomic():
            phone = self._phone_repo.get_by_id(dto.phone_id)
            if not phone or not phone.has_stock_for(dto.quantity):
                log.warning(
                    "stock.reservation_rejected",
                    available=phone.stock if phone else None,
                )
                raise OutOfStock(f"Not enough stock for phone {dto.phone_id}.")

            line = self._cart_repo.get_by_id(dto.phone_id)
            if line:
                line.quantity += dto.quantity
            else:
                line = CartLine(phone_id=dto.phone_id, quantity=dto.quantity)
            self._cart_repo.save(line)

            phone.stock -= dto.quantity
            self._phone_repo.save(phone)
            cart = self._cart_repo.list()

        log.info("stock.reserved", remaining=phone.stock, line_quantity=line.quantity)
        self._event_bus.publish(
            StockReserved(
                phone_id=phone.id,
                quantity=dto.quantity,
                remaining=phone.stock,
            )
        )
        return cart

    def checkout(self) -> PlacedOrder:
        """Validate every cart line against stock, then empty the cart.

        Raises:
            EmptyCart: the cart has no lines.
            InsufficientStock: a line's phone is gone or has too little stock.
        """
        with self._cart_repo.atomic():
            lines = self._cart_repo.list()
            if not lines:
                logger.warning("checkout.empty_cart")
                raise EmptyCart("Cart is empty.")

            for line in lines:
                phone = self._phone_repo.get_by_id(line.phone_id)
                if not phone or not phone.has_stock_for(line.quantity):
                    logger.warning(
                        "checkout.insufficient_stock",
                        phone_id=line.phone_id,
                        quantity=line.quantity,
                        available=phone.stock if phone else None,
                    )
                    raise InsufficientStock(
                        f"Not enough stock for phone {line.phone_id} at checkout."
                    )

            self._cart_repo.clear()

        order = PlacedOrder(
            order_id=uuid4(),
            lines=tuple((line.phone_id, line.quantity) for line in lines),
        )
        logger.info("checkout.completed", order_id=str(order.order_id), lines=len(lines))
        self._event_bus.publish(OrderPlaced(order_id=order.order_id, lines=order.lines))
        return order
