from __future__ import annotations

from typing import TYPE_CHECKING, Self
from unittest import mock

import pytest
from httpx import ASGITransport, AsyncClient

from dispatcher.api import deps
from dispatcher.api.main import create_app
from dispatcher.app.customers.usecases import CustomerUseCase
from dispatcher.app.scripts.usecases import DispatchUseCase, ScriptUseCase
from dispatcher.infrastructure.context import UseCases

if TYPE_CHECKING:
    from fastapi import FastAPI

    from dispatcher.app.customers.domain import Customer


class TestClient(AsyncClient):
    def __init__(self, *, app: FastAPI, **kwargs):
        self.app = app
        super().__init__(transport=ASGITransport(app=app), **kwargs)

    def mock_customer(self, customer: Customer) -> Self:
        async def get_current_customer():
            return customer

        self.app.dependency_overrides[deps.current_customer] = get_current_customer
        return self


@pytest.fixture(scope="session")
async def app():
    """Application fixture."""
    return create_app(lifespan=mock.MagicMock())


@pytest.fixture
async def client(app: FastAPI):
    """Test client fixture to make requests against app endpoints."""
    async with TestClient(app=app, base_url="http://test") as cli:
        yield cli
    app.dependency_overrides.pop(deps.current_customer, None)


@pytest.fixture
def _usecases():
    return mock.MagicMock(
        UseCases,
        customer=mock.MagicMock(CustomerUseCase),
        dispatch=mock.MagicMock(DispatchUseCase),
        script=mock.MagicMock(ScriptUseCase),
    )


@pytest.fixture
def customer_use_case(_usecases: UseCases):
    """A mocked instance of a CustomerUseCase."""
    return _usecases.customer


@pytest.fixture
def dispatch_use_case(_usecases: UseCases):
    """A mocked instance of a DispatchUseCase."""
    return _usecases.dispatch


@pytest.fixture
def script_use_case(_usecases: UseCases):
    """A mocked instance of a ScriptUseCase."""
    return _usecases.script


@pytest.fixture(autouse=True)
async def mock_usecases_deps(anyio_backend, app: FastAPI, _usecases: UseCases):
    async def get_usecases():
        return _usecases
    app.dependency_overrides[deps.usecases] = get_usecases
