"""Cart API views.

``/cart`` combines the ``CartService`` (listing, removal) with the
``StockCoordinator`` (adding, which reserves stock).  Domain exceptions
are caught and translated into ``{"error": ...}`` responses.
"""

from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.cart.dtos import AddToCartDTO
from modules.cart.exceptions import CartIntegrityError, CartLineNotFound
from modules.cart.repositories.memory_repository import CartMemoryRepository
from modules.cart.serializers import CartLineSerializer, CartLineTotalSerializer
from modules.cart.services import CartService
from modules.core.exceptions import error_response
from modules.core.parsers import json_object, parse_id
from modules.phones.repositories.memory_repository import PhoneMemoryRepository
from modules.stock.exceptions import OutOfStock
from modules.stock.services import StockCoordinator


class CartView(APIView):
    """Shared cart endpoint: ``/cart``."""

    http_method_names = ["get", "post", "delete"]

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        phone_repository = PhoneMemoryRepository()
        cart_repository = CartMemoryRepository()
        self._service = CartService(
            cart_repository=cart_repository,
            phone_repository=phone_repository,
        )
        self._coordinator = StockCoordinator(
            phone_repository=phone_repository,
            cart_repository=cart_repository,
        )

    def get(self, request: Request) -> Response:
        """GET /cart: lines with ``totalPrice``."""
        try:
            totals = self._service.list_cart()
        except CartIntegrityError as exc:
            return error_response(
                "Cart references missing phones",
                status.HTTP_409_CONFLICT,
                phoneIds=exc.phone_ids,
            )
        return Response(CartLineTotalSerializer(totals, many=True).data)

    def post(self, request: Request) -> Response:
        """POST /cart: body ``{"phoneId": int, "quantity": int}``."""
        data = json_object(request)

        try:
            dto = AddToCartDTO(
                phone_id=data.get("phoneId"),
                quantity=data.get("quantity"),
            )
        except PydanticValidationError:
            return error_response("Invalid data", status.HTTP_400_BAD_REQUEST)

        try:
            cart = self._coordinator.add_to_cart(dto)
        except OutOfStock:
            return error_response("Not enough stock", status.HTTP_400_BAD_REQUEST)

        return Response(CartLineSerializer(cart, many=True).data)

    def delete(self, request: Request) -> Response:
        """DELETE /cart?phoneId=: remaining lines."""
        phone_id = parse_id(request.query_params.get("phoneId"))
        if phone_id is None:
            return error_response("Item not in cart", status.HTTP_404_NOT_FOUND)

        try:
            self._service.remove_line(phone_id)
        except CartLineNotFound:
            return error_response("Item not in cart", status.HTTP_404_NOT_FOUND)

        return Response(CartLineSerializer(self._service.lines(), many=True).data)
