import time
import uuid
from contextvars import ContextVar
from typing import Callable

import structlog
from django.core.exceptions import RequestDataTooBig
from django.http import HttpRequest, HttpResponse, JsonResponse, UnreadablePostError

correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default="")

logger = structlog.get_logger()

BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})


class CorrelationIdMiddleware:
    """Middleware that extracts or generates a correlation ID for each request.

    Reads X-Request-ID header from the incoming request. If absent,
    generates a new UUID4. The ID is stored in a ContextVar so structlog
    processors can inject it into every log line, and is returned to the
    client via the X-Request-ID response header.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        cid = request.META.get("HTTP_X_REQUEST_ID") or str(uuid.uuid4())
        correlation_id_var.set(cid)

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=cid)

        started = time.monotonic()
        logger.info(
            "request_started",
            method=request.method,
            path=request.get_full_path(),
        )

        response = self.get_response(request)

        logger.info(
            "request_finished",
            method=request.method,
            path=request.get_full_path(),
            status_code=response.status_code,
            duration_ms=round((time.monotonic() - started) * 1000, 2),
        )

        response["X-Request-ID"] = cid
        return response


class RequestBodyGuardMiddleware:
    """Read request bodies up front, within the configured limits.

    ``DATA_UPLOAD_MAX_MEMORY_SIZE`` caps the body size; a stalled upload
    surfaces as ``UnreadablePostError`` once the connection's read timeout
    expires.  Both become JSON errors before any view runs, and views then
    parse the already-buffered body.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        if request.method in BODY_METHODS:
            try:
                request.body
            except RequestDataTooBig:
                logger.warning(
                    "request.body_too_large",
                    content_length=request.META.get("CONTENT_LENGTH"),
                )
                return JsonResponse({"error": "Request body too large"}, status=413)
            except UnreadablePostError:
                logger.warning("request.body_unreadable")
                return JsonResponse({"error": "Request body timeout"}, status=408)
        return self.get_response(request)
