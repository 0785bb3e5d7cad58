"""Unit tests for CartService.

Covers:
- list_cart: pricing at current catalog price, dangling lines.
- remove_line: happy path, unknown line.
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from modules.cart.exceptions import CartIntegrityError, CartLineNotFound
from modules.cart.models import CartLine, CartLineTotal
from modules.cart.services import CartService
from modules.phones.models import Phone

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def cart_repo():
    return MagicMock()


@pytest.fixture()
def phone_repo():
    phones = {
        1: Phone(id=1, name="iPhone 14", brand="Apple", price=Decimal("1200"), stock=10),
        3: Phone(id=3, name="Pixel 7", brand="Google", price=Decimal("800"), stock=8),
    }
    repo = MagicMock()
    repo.get_by_id.side_effect = phones.get
    return repo


@pytest.fixture()
def service(cart_repo, phone_repo):
    return CartService(cart_repository=cart_repo, phone_repository=phone_repo)


# ===========================================================================
# list_cart
# ===========================================================================


class TestListCart:
    def test_totals(self, service, cart_repo):
        cart_repo.list.return_value = [
            CartLine(phone_id=3, quantity=2),
            CartLine(phone_id=1, quantity=1),
        ]

        totals = service.list_cart()

        assert totals == [
            CartLineTotal(phone_id=3, quantity=2, total_price=Decimal("1600")),
            CartLineTotal(phone_id=1, quantity=1, total_price=Decimal("1200")),
        ]

    def test_empty(self, service, cart_repo):
        cart_repo.list.return_value = []
        assert service.list_cart() == []

    def test_dangling_lines_raise(self, service, cart_repo):
        cart_repo.list.return_value = [
            CartLine(phone_id=1, quantity=1),
            CartLine(phone_id=4, quantity=5),
            CartLine(phone_id=5, quantity=1),
        ]

        with pytest.raises(CartIntegrityError) as exc_info:
            service.list_cart()
        assert exc_info.value.phone_ids == [4, 5]


# ===========================================================================
# remove_line
# ===========================================================================


class TestRemoveLine:
    def test_success(self, service, cart_repo, phone_repo):
        cart_repo.delete.return_value = CartLine(phone_id=1, quantity=2)

        line = service.remove_line(1)

        assert line.quantity == 2
        cart_repo.delete.assert_called_once_with(1)
        phone_repo.save.assert_not_called()

    def test_not_found(self, service, cart_repo):
        cart_repo.delete.return_value = None
        with pytest.raises(CartLineNotFound):
            service.remove_line(9)
