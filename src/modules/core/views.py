from typing import Any, Dict

import structlog
from django.http import HttpRequest, JsonResponse
from django.utils import timezone

from modules.core.store import store

logger = structlog.get_logger()


def health_check(request: HttpRequest) -> JsonResponse:
    services: Dict[str, Dict[str, Any]] = {}

    with store.atomic():
        services["store"] = {
            "status": "up",
            "phones": len(store.phones),
            "cart_lines": len(store.cart),
        }

    logger.info("health_check_completed", status="healthy")

    return JsonResponse(
        {
            "status": "healthy",
            "timestamp": timezone.now().isoformat(),
            "services": services,
        }
    )


def route_not_found(request: HttpRequest, *args: Any, **kwargs: Any) -> JsonResponse:
    """Catch-all for unmatched method/path combinations."""
    logger.info("route_not_found", method=request.method, path=request.path)
    return JsonResponse({"error": "Not Found"}, status=404)
