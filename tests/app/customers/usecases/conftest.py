from __future__ import annotations

from contextlib import AsyncExitStack
from unittest import mock

import pytest

from dispatcher.app.customers.services import CustomerService
from dispatcher.app.customers.usecases import CustomerUseCase


async def _atomic():
    yield AsyncExitStack()


@pytest.fixture
def customer_use_case():
    services = mock.MagicMock(
        customer=mock.MagicMock(CustomerService),
        atomic=_atomic,
    )
    return CustomerUseCase(services=services)
