"""Integration tests for request body limits."""

import pytest

from django.http import UnreadablePostError
from django.test import RequestFactory

from modules.core.middleware import RequestBodyGuardMiddleware

pytestmark = pytest.mark.integration


class _StalledStream:
    """Body stream whose reads time out."""

    def read(self, *args, **kwargs):
        raise TimeoutError("timed out")

    def close(self):
        pass


class TestBodySizeLimit:
    def test_oversized_body_returns_413(self, api_client, settings):
        settings.DATA_UPLOAD_MAX_MEMORY_SIZE = 64
        payload = {"name": "N" * 200, "brand": "Nokia", "price": 100, "stock": 100}
        response = api_client.post("/phones", payload, format="json")
        assert response.status_code == 413
        assert response.json() == {"error": "Request body too large"}
        assert len(api_client.get("/phones").json()) == 3

    def test_body_within_limit_is_accepted(self, api_client, settings):
        settings.DATA_UPLOAD_MAX_MEMORY_SIZE = 1024
        payload = {"name": "Nokia", "brand": "Nokia", "price": 100, "stock": 100}
        response = api_client.post("/phones", payload, format="json")
        assert response.status_code == 201


class TestBodyReadTimeout:
    def test_stalled_body_returns_408(self):
        request = RequestFactory().post(
            "/phones", data="{}", content_type="application/json"
        )
        request._stream = _StalledStream()
        get_response_called = []

        middleware = RequestBodyGuardMiddleware(lambda r: get_response_called.append(r))
        response = middleware(request)

        assert response.status_code == 408
        assert b"Request body timeout" in response.content
        assert get_response_called == []

    def test_body_is_not_read_for_get(self):
        request = RequestFactory().get("/phones")
        request._stream = _StalledStream()

        middleware = RequestBodyGuardMiddleware(lambda r: "passed")
        assert middleware(request) == "passed"

    def test_unreadable_post_error_is_what_django_raises(self):
        request = RequestFactory().post(
            "/phones", data="{}", content_type="application/json"
        )
        request._stream = _StalledStream()
        with pytest.raises(UnreadablePostError):
            request.body
