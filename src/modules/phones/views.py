"""Phone API views.

Exposes the ``PhoneService`` via HTTP using DRF APIViews.
Domain exceptions are caught and translated into ``{"error": ...}``
responses; the view never swallows generic exceptions.
"""

from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.core.exceptions import error_response
from modules.core.parsers import json_object, parse_id
from modules.phones.dtos import CreatePhoneDTO, PhoneFilterDTO, UpdatePhoneDTO
from modules.phones.exceptions import NothingToUpdate, PhoneNotFound
from modules.phones.repositories.memory_repository import PhoneMemoryRepository
from modules.phones.serializers import PhoneSerializer
from modules.phones.services import PhoneService

PHONE_NOT_FOUND = "Phone not found"
INVALID_DATA = "Invalid data"


class PhoneServiceMixin:
    """Builds the ``PhoneService`` with ``PhoneMemoryRepository`` (DIP)."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = PhoneService(repository=PhoneMemoryRepository())


class PhoneListView(PhoneServiceMixin, APIView):
    """Collection endpoint: ``/phones``."""

    http_method_names = ["get", "post"]

    def get(self, request: Request) -> Response:
        """GET /phones?brand=&maxPrice="""
        try:
            filters = PhoneFilterDTO(
                brand=request.query_params.get("brand") or None,
                max_price=request.query_params.get("maxPrice") or None,
            )
        except PydanticValidationError:
            # A price bound that is not a number matches no phone.
            return Response([])

        phones = self._service.list_phones(filters)
        return Response(PhoneSerializer(phones, many=True).data)

    def post(self, request: Request) -> Response:
        """POST /phones"""
        data = json_object(request)

        try:
            dto = CreatePhoneDTO(
                name=data.get("name"),
                brand=data.get("brand"),
                price=data.get("price"),
                stock=data.get("stock"),
            )
        except PydanticValidationError:
            return error_response(INVALID_DATA, status.HTTP_400_BAD_REQUEST)

        phone = self._service.create_phone(dto)
        return Response(PhoneSerializer(phone).data, status=status.HTTP_201_CREATED)


class PhoneDetailView(PhoneServiceMixin, APIView):
    """Item endpoint: ``/phones/<id>``."""

    http_method_names = ["get", "put", "delete"]

    def get(self, request: Request, pk: str) -> Response:
        """GET /phones/{pk}"""
        try:
            phone = self._service.get_phone(self._phone_id(pk))
        except PhoneNotFound:
            return error_response(PHONE_NOT_FOUND, status.HTTP_404_NOT_FOUND)
        return Response(PhoneSerializer(phone).data)

    def put(self, request: Request, pk: str) -> Response:
        """PUT /phones/{pk}

        The phone must exist before the body is even looked at.
        """
        phone_id = self._phone_id(pk)
        try:
            self._service.get_phone(phone_id)
        except PhoneNotFound:
            return error_response(PHONE_NOT_FOUND, status.HTTP_404_NOT_FOUND)

        data = json_object(request)

        try:
            dto = UpdatePhoneDTO(
                name=data.get("name"),
                brand=data.get("brand"),
                price=data.get("price"),
                stock=data.get("stock"),
            )
        except PydanticValidationError:
            return error_response(INVALID_DATA, status.HTTP_400_BAD_REQUEST)

        try:
            phone = self._service.update_phone(phone_id, dto)
        except PhoneNotFound:
            return error_response(PHONE_NOT_FOUND, status.HTTP_404_NOT_FOUND)
        except NothingToUpdate:
            return error_response("No fields to update", status.HTTP_400_BAD_REQUEST)

        return Response(PhoneSerializer(phone).data)

    def delete(self, request: Request, pk: str) -> Response:
        """DELETE /phones/{pk}"""
        try:
            phone = self._service.delete_phone(self._phone_id(pk))
        except PhoneNotFound:
            return error_response(PHONE_NOT_FOUND, status.HTTP_404_NOT_FOUND)
        return Response(PhoneSerializer(phone).data)

    @staticmethod
    def _phone_id(pk: str) -> int:
        # An id that does not parse can never match; -1 is never issued.
        phone_id = parse_id(pk)
        return -1 if phone_id is None else phone_id
