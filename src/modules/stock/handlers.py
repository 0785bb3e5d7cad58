"""Event handlers for stock domain events."""

from __future__ import annotations

import structlog

from modules.stock.events import OrderPlaced, StockReserved
from shared.domain.bus import IEventHandler

logger = structlog.get_logger(__name__)


class StockReservedHandler(IEventHandler[StockReserved]):
    def handle(self, event: StockReserved) -> None:
        logger.info(
            "stock.event.reserved",
            phone_id=event.phone_id,
            quantity=event.quantity,
            remaining=event.remaining,
        )
        if event.remaining == 0:
            logger.warning("stock.event.depleted", phone_id=event.phone_id)


class OrderPlacedHandler(IEventHandler[OrderPlaced]):
    def handle(self, event: OrderPlaced) -> None:
        logger.info(
            "checkout.event.order_placed",
            order_id=str(event.order_id),
            lines=len(event.lines),
            total_quantity=event.total_quantity,
        )


stock_reserved_handler = StockReservedHandler()
order_placed_handler = OrderPlacedHandler()
