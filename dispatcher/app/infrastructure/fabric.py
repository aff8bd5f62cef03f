from __future__ import annotations

from contextlib import AbstractAsyncContextManager
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from dispatcher.app.scripts.domain import (
        DispatchRequest,
        DispatchResponse,
        OutboundPolicy,
        ResourcePolicy,
    )

__all__ = [
    "IDispatchFabric",
    "IScriptHandle",
]


class IScriptHandle(Protocol):
    script_name: str

    async def fetch(self, request: DispatchRequest) -> DispatchResponse:
        """
        Invokes the script with the request and returns its response unmodified.

        Raises:
            DependencyUnavailable: If the script can't be invoked.
            Script.NotFound: If there is no script with such name.
        """


class IDispatchFabric(AbstractAsyncContextManager["IDispatchFabric"], Protocol):
    def get(
        self,
        script_name: str,
        *,
        limits: ResourcePolicy | None = None,
        outbound: OutboundPolicy | None = None,
    ) -> IScriptHandle:
        """
        Returns a handle to a script configured with optional constraints.

        Getting a handle never fails, existence of the script is checked only when
        the handle is invoked.
        """
