"""Request body parsing shared by all modules.

Bodies are decoded as JSON whatever ``Content-Type`` the client sends;
an empty or non-object body counts as malformed.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from rest_framework.exceptions import ParseError
from rest_framework.parsers import JSONParser
from rest_framework.request import Request


class LenientJSONParser(JSONParser):
    """JSON parser selected for any media type."""

    media_type = "*/*"


def json_object(request: Request) -> Dict[str, Any]:
    """Return the decoded JSON object of ``request``.

    Raises:
        ParseError: the body is missing, not JSON, or not a JSON object.
    """
    data = request.data
    if request.stream is None:
        raise ParseError("Request body is empty.")
    if not isinstance(data, dict):
        raise ParseError("Request body must be a JSON object.")
    return data


def parse_id(value: Any) -> Optional[int]:
    """Decode an id from a path segment or query value, ``None`` if unusable."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
