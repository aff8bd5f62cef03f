from __future__ import annotations

from contextlib import AsyncExitStack
from unittest import mock

import pytest

from dispatcher.app.customers.repositories import ICustomerRepository
from dispatcher.app.customers.services import CustomerService


async def _atomic():
    yield AsyncExitStack()


@pytest.fixture
def customer_service() -> CustomerService:
    """A CustomerService instance with mocked database."""
    database = mock.MagicMock(
        customer=mock.AsyncMock(ICustomerRepository),
        atomic=_atomic,
    )
    return CustomerService(database=database)
