"""Unit tests for PhoneService.

Covers:
- create_phone: id assignment, persistence.
- update_phone: merge of supplied fields, not found, nothing to update.
- get_phone / delete_phone: happy path, not found.
- list_phones: delegation to repository.
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from modules.phones.dtos import CreatePhoneDTO, PhoneFilterDTO, UpdatePhoneDTO
from modules.phones.exceptions import NothingToUpdate, PhoneNotFound
from modules.phones.models import Phone
from modules.phones.services import PhoneService

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_repo():
    repo = MagicMock()
    repo.save.side_effect = lambda phone: phone
    return repo


@pytest.fixture()
def service(mock_repo):
    return PhoneService(repository=mock_repo)


def _make_phone(**overrides) -> Phone:
    defaults = {
        "id": 1,
        "name": "iPhone 14",
        "brand": "Apple",
        "price": Decimal("1200"),
        "stock": 10,
    }
    defaults.update(overrides)
    return Phone(**defaults)


# ===========================================================================
# create_phone
# ===========================================================================


class TestCreatePhone:
    def test_success(self, service, mock_repo):
        mock_repo.next_id.return_value = 7
        dto = CreatePhoneDTO(name="Nokia", brand="Nokia", price=100, stock=100)

        phone = service.create_phone(dto)

        assert phone.id == 7
        assert phone.price == Decimal("100")
        mock_repo.save.assert_called_once_with(phone)
        mock_repo.atomic.assert_called_once()


# ===========================================================================
# update_phone
# ===========================================================================


class TestUpdatePhone:
    def test_merges_supplied_fields(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _make_phone()

        phone = service.update_phone(1, UpdatePhoneDTO(price=Decimal("1100")))

        assert phone.price == Decimal("1100")
        assert phone.name == "iPhone 14"
        assert phone.stock == 10
        mock_repo.save.assert_called_once()

    def test_zero_applied_with_other_field(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _make_phone()

        phone = service.update_phone(1, UpdatePhoneDTO(name="Renamed", stock=0))

        assert phone.stock == 0
        assert phone.name == "Renamed"

    def test_not_found(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(PhoneNotFound):
            service.update_phone(99, UpdatePhoneDTO(name="X"))
        mock_repo.save.assert_not_called()

    def test_nothing_to_update(self, service, mock_repo):
        original = _make_phone()
        mock_repo.get_by_id.return_value = original

        with pytest.raises(NothingToUpdate):
            service.update_phone(1, UpdatePhoneDTO(stock=0))
        assert original.stock == 10
        mock_repo.save.assert_not_called()


# ===========================================================================
# get_phone / delete_phone / list_phones
# ===========================================================================


class TestGetPhone:
    def test_success(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _make_phone()
        assert service.get_phone(1).name == "iPhone 14"

    def test_not_found(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None
        with pytest.raises(PhoneNotFound):
            service.get_phone(1)


class TestDeletePhone:
    def test_success(self, service, mock_repo):
        mock_repo.delete.return_value = _make_phone()
        assert service.delete_phone(1).id == 1
        mock_repo.delete.assert_called_once_with(1)

    def test_not_found(self, service, mock_repo):
        mock_repo.delete.return_value = None
        with pytest.raises(PhoneNotFound):
            service.delete_phone(1)


class TestListPhones:
    def test_delegates_filters(self, service, mock_repo):
        filters = PhoneFilterDTO(brand="Apple")
        mock_repo.filter.return_value = [_make_phone()]

        result = service.list_phones(filters)

        assert len(result) == 1
        mock_repo.filter.assert_called_once_with(filters)

    def test_defaults_to_unfiltered(self, service, mock_repo):
        service.list_phones()
        (filters,), _ = mock_repo.filter.call_args
        assert filters == PhoneFilterDTO()
