from __future__ import annotations

from contextlib import AsyncExitStack
from typing import TYPE_CHECKING, Self
from urllib.parse import quote

from httpx import AsyncClient, HTTPError

from dispatcher.app.infrastructure import DependencyUnavailable
from dispatcher.app.scripts.domain import DispatchResponse, Script

if TYPE_CHECKING:
    from httpx import AsyncBaseTransport

    from dispatcher.app.scripts.domain import (
        DispatchRequest,
        OutboundPolicy,
        ResourcePolicy,
    )
    from dispatcher.config import DispatchFabricClientConfig

__all__ = [
    "DispatchFabricClient",
    "ScriptHandle",
]

ERROR_HEADER = "x-dispatch-error"
SCRIPT_NOT_FOUND = "script-not-found"

LIMITS_CPU_MS_HEADER = "x-dispatch-limits-cpu-ms"
LIMITS_MEMORY_HEADER = "x-dispatch-limits-memory"
OUTBOUND_HEADER = "x-dispatch-outbound"
DISPATCH_HEADERS = frozenset([LIMITS_CPU_MS_HEADER, LIMITS_MEMORY_HEADER, OUTBOUND_HEADER])

HOP_BY_HOP_HEADERS = frozenset([
    "connection",
    "content-length",
    "host",
    "keep-alive",
    "proxy-authenticate",
    "proxy-authorization",
    "te",
    "trailer",
    "transfer-encoding",
    "upgrade",
])


def _end_to_end(
    headers: list[tuple[str, str]], exclude: frozenset[str] = frozenset()
) -> list[tuple[str, str]]:
    return [
        (key, value) for key, value in headers
        if key.lower() not in HOP_BY_HOP_HEADERS and key.lower() not in exclude
    ]


class ScriptHandle:
    """A lazily validated reference to a script in the dispatch fabric."""

    __slots__ = ("client", "script_name", "limits", "outbound")

    def __init__(
        self,
        client: AsyncClient,
        script_name: str,
        *,
        limits: ResourcePolicy | None = None,
        outbound: OutboundPolicy | None = None,
    ):
        self.client = client
        self.script_name = script_name
        self.limits = limits
        self.outbound = outbound

    def _dispatch_headers(self) -> list[tuple[str, str]]:
        headers = []
        if self.limits is not None:
            if self.limits.cpu_ms is not None:
                headers.append((LIMITS_CPU_MS_HEADER, str(self.limits.cpu_ms)))
            if self.limits.memory is not None:
                headers.append((LIMITS_MEMORY_HEADER, str(self.limits.memory)))
        if self.outbound is not None:
            headers.append((OUTBOUND_HEADER, self.outbound.outbound_script_name))
        return headers

    async def fetch(self, request: DispatchRequest) -> DispatchResponse:
        url = f"/{quote(self.script_name, safe='')}"
        if path := request.path.lstrip("/"):
            url = f"{url}/{quote(path, safe='/')}"
        if request.query:
            url = f"{url}?{request.query}"
        # constraints come from stored policies only, never from the caller
        headers = _end_to_end(request.headers, exclude=DISPATCH_HEADERS)
        headers += self._dispatch_headers()

        try:
            response = await self.client.request(
                request.method,
                url,
                headers=headers,
                content=request.body,
            )
        except HTTPError as exc:
            message = f"Failed to invoke script '{self.script_name}': {exc!r}"
            raise DependencyUnavailable(message) from exc

        if response.headers.get(ERROR_HEADER) == SCRIPT_NOT_FOUND:
            raise Script.NotFound() from None

        return DispatchResponse(
            status_code=response.status_code,
            # body is already decoded by httpx
            headers=_end_to_end(
                response.headers.multi_items(), exclude=frozenset(["content-encoding"])
            ),
            body=response.content,
        )


class DispatchFabricClient:
    """
    A client for the fabric that executes scripts from the dispatch namespace.

    Every script is reachable under its name, constraints are passed along with the
    request as headers. The fabric responds with `X-Dispatch-Error:
    script-not-found` when there is no script with the requested name.
    """

    __slots__ = ("_stack", "client")

    def __init__(
        self,
        config: DispatchFabricClientConfig,
        *,
        transport: AsyncBaseTransport | None = None,
    ):
        self.client = AsyncClient(
            base_url=str(config.url),
            timeout=config.timeout,
            follow_redirects=False,
            transport=transport,
        )
        self._stack = AsyncExitStack()

    async def __aenter__(self) -> Self:
        await self._stack.enter_async_context(self.client)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self._stack.aclose()

    def get(
        self,
        script_name: str,
        *,
        limits: ResourcePolicy | None = None,
        outbound: OutboundPolicy | None = None,
    ) -> ScriptHandle:
        return ScriptHandle(self.client, script_name, limits=limits, outbound=outbound)
