from __future__ import annotations

from contextlib import AsyncExitStack
from typing import TYPE_CHECKING, AsyncIterator, Self

from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine

from dispatcher.app.infrastructure import IDatabase

from .connection import Connector, db_context
from .repositories import (
    CustomerRepository,
    OutboundPolicyRepository,
    ResourcePolicyRepository,
)
from .tables import metadata

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncEngine

    from dispatcher.app.customers.repositories import ICustomerRepository
    from dispatcher.app.infrastructure.database import ITransaction
    from dispatcher.app.scripts.repositories import (
        IOutboundPolicyRepository,
        IResourcePolicyRepository,
    )
    from dispatcher.config import SQLAlchemyConfig


class Transaction(AsyncExitStack):
    def __init__(self, engine: AsyncEngine) -> None:
        super().__init__()
        self._engine = engine

    async def __aenter__(self) -> Self:
        await super().__aenter__()
        if db_context.get() is None:
            conn = await self.enter_async_context(self._engine.begin())
            token = db_context.set(conn)
            self.callback(db_context.reset, token)
        return self


def _enable_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class SQLAlchemyDatabase(IDatabase):
    customer: ICustomerRepository
    outbound_policy: IOutboundPolicyRepository
    resource_policy: IResourcePolicyRepository

    def __init__(self, config: SQLAlchemyConfig) -> None:
        self.config = config
        self.engine = create_async_engine(
            config.dsn,
            echo=config.echo,
            connect_args={"timeout": config.timeout},
        )
        if self.engine.dialect.name == "sqlite":
            event.listen(self.engine.sync_engine, "connect", _enable_foreign_keys)

        connector = Connector(self.engine, timeout=config.timeout)
        self.customer = CustomerRepository(connector)
        self.outbound_policy = OutboundPolicyRepository(connector)
        self.resource_policy = ResourcePolicyRepository(connector)

    async def __aenter__(self) -> Self:
        return self

    async def atomic(self) -> AsyncIterator[ITransaction]:
        yield Transaction(self.engine)

    async def migrate(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(metadata.create_all)

    async def shutdown(self) -> None:
        await self.engine.dispose()
