from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import AsyncExitStack
from typing import TYPE_CHECKING, Self

from dispatcher.app.customers.services import CustomerService
from dispatcher.app.customers.usecases import CustomerUseCase
from dispatcher.app.scripts.services import (
    NamespaceService,
    OwnershipService,
    PolicyService,
)
from dispatcher.app.scripts.usecases import DispatchUseCase, ScriptUseCase
from dispatcher.infrastructure.clients import (
    DispatchFabricClient,
    NamespaceRegistryClient,
)
from dispatcher.infrastructure.database.sqlalchemy import SQLAlchemyDatabase
from dispatcher.toolkit import taskgroups

if TYPE_CHECKING:
    from dispatcher.app.infrastructure import IDispatchFabric, INamespaceRegistry
    from dispatcher.app.infrastructure.database import ITransaction
    from dispatcher.config import (
        AppConfig,
        DatabaseConfig,
        DispatchFabricClientConfig,
        NamespaceRegistryClientConfig,
    )

__all__ = [
    "AppContext",
    "UseCases",
]


class AppContext:
    __slots__ = ["usecases", "_infra", "_stack"]

    def __init__(self, config: AppConfig):
        self._stack = AsyncExitStack()
        self._infra = Infrastructure(config)
        services = Services(self._infra)
        self.usecases = UseCases(services)

    async def __aenter__(self) -> Self:
        await self._stack.enter_async_context(self._infra)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self._stack.aclose()


class Infrastructure:
    __slots__ = ["database", "fabric", "registry", "_stack"]

    def __init__(self, config: AppConfig):
        self.database = self._get_database(config.database)
        self.fabric = self._get_fabric(config.fabric)
        self.registry = self._get_registry(config.registry)
        self._stack = AsyncExitStack()

    async def __aenter__(self) -> Self:
        await taskgroups.gather(
            self._stack.enter_async_context(self.database),
            self._stack.enter_async_context(self.fabric),
            self._stack.enter_async_context(self.registry),
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self._stack.aclose()

    @staticmethod
    def _get_database(db_config: DatabaseConfig) -> SQLAlchemyDatabase:
        return SQLAlchemyDatabase(db_config)

    @staticmethod
    def _get_fabric(fabric_config: DispatchFabricClientConfig) -> IDispatchFabric:
        return DispatchFabricClient(fabric_config)

    @staticmethod
    def _get_registry(
        registry_config: NamespaceRegistryClientConfig,
    ) -> INamespaceRegistry:
        return NamespaceRegistryClient(registry_config)


class Services:
    __slots__ = [
        "_database",
        "customer",
        "fabric",
        "namespace",
        "ownership",
        "policy",
    ]

    def __init__(self, infra: Infrastructure):
        database = infra.database
        registry = infra.registry

        self._database = database

        self.customer = CustomerService(database=database)
        self.fabric = infra.fabric
        self.namespace = NamespaceService(registry=registry)
        self.ownership = OwnershipService(registry=registry)
        self.policy = PolicyService(database=database)

    def atomic(self) -> AsyncIterator[ITransaction]:
        return self._database.atomic()


class UseCases:
    __slots__ = ["customer", "dispatch", "script"]

    def __init__(self, services: Services):
        self.customer = CustomerUseCase(services=services)
        self.dispatch = DispatchUseCase(services=services)
        self.script = ScriptUseCase(services=services)
