"""Checkout API view."""

from __future__ import annotations

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.cart.repositories.memory_repository import CartMemoryRepository
from modules.core.exceptions import error_response
from modules.phones.repositories.memory_repository import PhoneMemoryRepository
from modules.stock.exceptions import EmptyCart, InsufficientStock
from modules.stock.services import StockCoordinator


class CheckoutView(APIView):
    """POST /checkout: validates stock and empties the cart."""

    http_method_names = ["post"]

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._coordinator = StockCoordinator(
            phone_repository=PhoneMemoryRepository(),
            cart_repository=CartMemoryRepository(),
        )

    def post(self, request: Request) -> Response:
        try:
            self._coordinator.checkout()
        except EmptyCart:
            return error_response("Cart is empty", status.HTTP_400_BAD_REQUEST)
        except InsufficientStock:
            return error_response(
                "Not enough stock for checkout", status.HTTP_400_BAD_REQUEST
            )
        return Response({"message": "Order placed successfully"})
