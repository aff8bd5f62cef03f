from __future__ import annotations

from typing import TYPE_CHECKING, AsyncIterator, Protocol, Self

if TYPE_CHECKING:
    from types import TracebackType

__all__ = [
    "IAtomic",
    "IDatabase",
    "ITransaction",
]


class ITransaction(Protocol):
    async def __aenter__(self) -> Self:
        ...  # pragma: no cover

    async def __aexit__(
        self,
        __exc_type: type[Exception] | None,
        __exc_value: Exception | None,
        __traceback: TracebackType | None
    ) -> bool | None:
        ...  # pragma: no cover


class IAtomic(Protocol):
    def atomic(self) -> AsyncIterator[ITransaction]:
        """
        Opens an atomic block.

        All database operations either all occurs, or nothing occurs. Nested atomic
        blocks are allowed, but they will act as no-op.
        """


class IDatabase(IAtomic, Protocol):
    async def __aenter__(self) -> Self:
        return self  # pragma: no cover

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.shutdown()

    async def migrate(self) -> None:
        """Creates all tables that do not exist yet."""

    async def shutdown(self) -> None:
        """Performs all necessary actions to shutdown database correctly."""
