from django.apps import AppConfig


class StockConfig(AppConfig):
    name = "modules.stock"
    label = "stock"

    def ready(self) -> None:
        from modules.stock.events import OrderPlaced, StockReserved
        from modules.stock.handlers import order_placed_handler, stock_reserved_handler
        from shared.infrastructure.bus import event_bus

        event_bus.subscribe(StockReserved, stock_reserved_handler)
        event_bus.subscribe(OrderPlaced, order_placed_handler)
