from __future__ import annotations

import asyncio
import contextlib
from contextvars import ContextVar
from typing import TYPE_CHECKING, AsyncIterator

from sqlalchemy.exc import InterfaceError, OperationalError

from dispatcher.app.infrastructure import DependencyUnavailable

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

__all__ = [
    "Connector",
    "db_context",
]

db_context: ContextVar[AsyncConnection | None] = ContextVar("db_context", default=None)


class Connector:
    """
    Provides a connection for a single database operation. Inside an atomic block
    the connection of that block is reused, otherwise a new connection is opened and
    committed when the operation completes.
    """

    __slots__ = ("engine", "timeout")

    def __init__(self, engine: AsyncEngine, timeout: float):
        self.engine = engine
        self.timeout = timeout

    @contextlib.asynccontextmanager
    async def connect(self) -> AsyncIterator[AsyncConnection]:
        conn = db_context.get()
        try:
            async with asyncio.timeout(self.timeout):
                if conn is not None:
                    yield conn
                else:
                    async with self.engine.begin() as conn:
                        yield conn
        except (InterfaceError, OperationalError, TimeoutError) as exc:
            raise DependencyUnavailable("Database is unavailable") from exc
