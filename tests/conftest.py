from __future__ import annotations

import pytest

from dispatcher.app.customers.domain import Customer


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture
def customer() -> Customer:
    return Customer(
        id="559968cd-b048-4bbc-ba21-d12625fcee45",
        display_name="Customer 1",
        plan_tier="basic",
    )


@pytest.fixture
def other_customer() -> Customer:
    return Customer(
        id="2612b586-4799-42ff-8c44-d4841e1e70ed",
        display_name="Customer 2",
        plan_tier="advanced",
    )
