"""DRF exception handler producing the ``{"error": ...}`` envelope.

Domain exceptions are translated by the views themselves; this handler
covers what DRF raises before a view method runs (body parsing, method
dispatch) so every response shares one error shape.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import MethodNotAllowed, NotFound, ParseError
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = structlog.get_logger(__name__)

INVALID_JSON = "Invalid JSON format"
ROUTE_NOT_FOUND = "Not Found"


def error_response(message: str, status_code: int, **extra: Any) -> Response:
    """Build a JSON error response in the service-wide envelope."""
    body: Dict[str, Any] = {"error": message}
    body.update(extra)
    return Response(body, status=status_code)


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    if isinstance(exc, ParseError):
        logger.warning("request.malformed_body", detail=str(exc.detail))
        return error_response(INVALID_JSON, status.HTTP_400_BAD_REQUEST)

    # Unknown method on a known path is reported like an unknown path.
    if isinstance(exc, (MethodNotAllowed, NotFound, Http404)):
        return error_response(ROUTE_NOT_FOUND, status.HTTP_404_NOT_FOUND)

    response = exception_handler(exc, context)
    if response is None:
        return None

    detail = response.data.get("detail") if isinstance(response.data, dict) else None
    response.data = {"error": str(detail) if detail else "Request failed"}
    return response
