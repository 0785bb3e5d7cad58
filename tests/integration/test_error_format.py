"""Integration tests for the ``{"error": ...}`` envelope on framework-level failures."""

import pytest

pytestmark = pytest.mark.integration


class TestRouteNotFound:
    @pytest.mark.parametrize("path", ["/", "/unknown", "/phones/1/extra", "/phones/"])
    def test_unknown_path_returns_404(self, api_client, path):
        response = api_client.get(path)
        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}

    def test_unknown_path_with_body_returns_404(self, api_client):
        response = api_client.post("/orders", {"a": 1}, format="json")
        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}

    @pytest.mark.parametrize(
        "method, path",
        [
            ("patch", "/phones/1"),
            ("delete", "/phones"),
            ("put", "/cart"),
            ("delete", "/checkout"),
            ("options", "/phones"),
            ("options", "/phones/1"),
            ("options", "/cart"),
            ("options", "/checkout"),
        ],
    )
    def test_unsupported_method_returns_404(self, api_client, method, path):
        response = getattr(api_client, method)(path)
        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}

    @pytest.mark.parametrize("path", ["/phones", "/phones/1", "/cart", "/checkout"])
    def test_head_returns_404(self, api_client, path):
        # The test client strips HEAD bodies, so only the status is visible.
        response = api_client.head(path)
        assert response.status_code == 404


class TestMalformedBody:
    @pytest.mark.parametrize("path", ["/phones", "/cart"])
    def test_malformed_json_has_standard_format(self, api_client, path):
        response = api_client.post(path, data="{not json", content_type="application/json")
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid JSON format"}

    def test_json_string_body_is_rejected(self, api_client):
        response = api_client.post("/phones", data='"Nokia"', content_type="application/json")
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid JSON format"}

    def test_responses_are_json(self, api_client):
        response = api_client.get("/unknown")
        assert response["Content-Type"].startswith("application/json")
