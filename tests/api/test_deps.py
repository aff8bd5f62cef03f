from __future__ import annotations

from unittest import mock

import pytest
from fastapi import Request

from dispatcher.api import deps, exceptions
from dispatcher.app.customers.domain import Customer
from dispatcher.app.customers.usecases import CustomerUseCase

pytestmark = [pytest.mark.anyio]


@pytest.fixture
def usecases():
    return mock.MagicMock(customer=mock.MagicMock(CustomerUseCase))


class TestCurrentCustomer:
    async def test(self, usecases: mock.MagicMock, customer: Customer):
        # GIVEN
        usecases.customer.get_by_token.return_value = customer
        # WHEN
        result = await deps.current_customer(usecases, token="a1b2c3")
        # THEN
        assert result == customer
        usecases.customer.get_by_token.assert_awaited_once_with("a1b2c3")

    @pytest.mark.parametrize("token", [None, ""])
    async def test_when_token_is_missing(self, usecases: mock.MagicMock, token):
        with pytest.raises(exceptions.MissingToken):
            await deps.current_customer(usecases, token=token)
        usecases.customer.get_by_token.assert_not_awaited()

    async def test_when_token_is_invalid(self, usecases: mock.MagicMock):
        # GIVEN
        usecases.customer.get_by_token.side_effect = Customer.NotFound
        # WHEN / THEN
        with pytest.raises(exceptions.InvalidToken):
            await deps.current_customer(usecases, token="zzz")
        usecases.customer.get_by_token.assert_awaited_once_with("zzz")


class TestUseCases:
    async def test(self):
        request = mock.MagicMock(Request)
        assert await deps.usecases(request) == request.state.usecases
