"""Integration tests for POST /checkout."""

from __future__ import annotations

import pytest

pytestmark = pytest.mark.integration


def _add(client, phone_id, quantity):
    return client.post("/cart", {"phoneId": phone_id, "quantity": quantity}, format="json")


class TestCheckout:
    def test_empty_cart_returns_400(self, api_client):
        response = api_client.post("/checkout")
        assert response.status_code == 400
        assert response.json() == {"error": "Cart is empty"}

    def test_checkout_clears_cart(self, api_client):
        _add(api_client, 2, 1)
        response = api_client.post("/checkout")
        assert response.status_code == 200
        assert response.json() == {"message": "Order placed successfully"}
        assert api_client.get("/cart").json() == []

    def test_checkout_keeps_reserved_stock_off_the_shelf(self, api_client):
        _add(api_client, 2, 1)
        api_client.post("/checkout")
        assert api_client.get("/phones/2").json()["stock"] == 14

    def test_line_larger_than_remaining_stock_fails(self, api_client):
        # 6 of 10 reserved leaves 4, fewer than the line holds.
        _add(api_client, 1, 6)
        response = api_client.post("/checkout")
        assert response.status_code == 400
        assert response.json() == {"error": "Not enough stock for checkout"}
        assert api_client.get("/cart").json() == [
            {"phoneId": 1, "quantity": 6, "totalPrice": 7200}
        ]

    def test_stock_lowered_after_reservation_fails(self, api_client):
        _add(api_client, 3, 2)
        api_client.put("/phones/3", {"stock": 1}, format="json")
        response = api_client.post("/checkout")
        assert response.status_code == 400
        assert response.json() == {"error": "Not enough stock for checkout"}

    def test_deleted_phone_fails(self, api_client):
        _add(api_client, 2, 1)
        api_client.delete("/phones/2")
        response = api_client.post("/checkout")
        assert response.status_code == 400
        assert response.json() == {"error": "Not enough stock for checkout"}

    def test_failed_checkout_leaves_other_lines(self, api_client):
        _add(api_client, 2, 1)
        _add(api_client, 1, 6)
        api_client.post("/checkout")
        assert len(api_client.get("/cart").json()) == 2

    def test_get_is_not_a_route(self, api_client):
        response = api_client.get("/checkout")
        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}
