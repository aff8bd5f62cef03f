from __future__ import annotations

from contextlib import AsyncExitStack
from typing import TYPE_CHECKING, Any, Self
from urllib.parse import quote

import orjson
from httpx import AsyncClient, HTTPError

from dispatcher.app.infrastructure import DependencyUnavailable
from dispatcher.app.scripts.domain import OwnershipTagSet, Script
from dispatcher.toolkit import taskgroups

if TYPE_CHECKING:
    from collections.abc import Iterable

    from httpx import AsyncBaseTransport, Response

    from dispatcher.config import NamespaceRegistryClientConfig

__all__ = [
    "NamespaceRegistryClient",
]

_MODULE_CONTENT_TYPE = "application/javascript+module"


def _script_path(script_name: str, suffix: str = "") -> str:
    return f"/scripts/{quote(script_name, safe='')}{suffix}"


def _parse_body(response: Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


def _parse_result(response: Response) -> Any:
    try:
        payload = response.json()
    except ValueError as exc:
        payload = exc
    if not isinstance(payload, dict):
        request = response.request
        raise DependencyUnavailable(
            f"{request.method} {request.url} returned a malformed body: "
            f"{response.text}"
        ) from None
    return payload.get("result")


def _raise_for_status(response: Response) -> None:
    if response.is_success:
        return
    request = response.request
    raise DependencyUnavailable(
        f"{request.method} {request.url} failed with status "
        f"{response.status_code}: {response.text}"
    ) from None


class NamespaceRegistryClient:
    """
    A client for the dispatch namespace API.

    The registry stores scripts and free-form tags for every script name. It knows
    nothing about customers.
    """

    __slots__ = ("_stack", "client")

    def __init__(
        self,
        config: NamespaceRegistryClientConfig,
        *,
        transport: AsyncBaseTransport | None = None,
    ):
        base_url = (
            f"{str(config.url).rstrip('/')}/accounts/{config.account_id}"
            f"/workers/dispatch/namespaces/{config.namespace}"
        )
        self.client = AsyncClient(
            base_url=base_url,
            headers={"Authorization": f"Bearer {config.api_token}"},
            timeout=config.timeout,
            http2=True,
            transport=transport,
        )
        self._stack = AsyncExitStack()

    async def __aenter__(self) -> Self:
        await self._stack.enter_async_context(self.client)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self._stack.aclose()

    async def _request(self, method: str, url: str, **kwargs) -> Response:
        try:
            return await self.client.request(method, url, **kwargs)
        except HTTPError as exc:
            message = f"{method} {url} failed: {exc!r}"
            raise DependencyUnavailable(message) from exc

    async def delete_script(self, script_name: str) -> None:
        response = await self._request("DELETE", _script_path(script_name))
        if response.status_code == 404:
            return
        _raise_for_status(response)

    async def get_tags(self, script_name: str) -> OwnershipTagSet:
        response = await self._request("GET", _script_path(script_name, "/tags"))
        # script that has never been uploaded has no tags
        if response.status_code == 404:
            return OwnershipTagSet()
        _raise_for_status(response)
        return OwnershipTagSet(_parse_result(response) or [])

    async def list_scripts(self) -> list[Script]:
        response = await self._request("GET", "/scripts")
        _raise_for_status(response)
        items = _parse_result(response) or []
        tags = await taskgroups.gather(*(self.get_tags(item["id"]) for item in items))
        return [
            Script.model_validate({**item, "tags": item_tags.as_list()})
            for item, item_tags in zip(items, tags, strict=True)
        ]

    async def list_scripts_by_tags(
        self, tags: Iterable[tuple[str, bool]]
    ) -> list[Script]:
        value = ",".join(f"{tag}:{'yes' if allow else 'no'}" for tag, allow in tags)
        response = await self._request("GET", "/scripts", params={"tags": value})
        _raise_for_status(response)
        items = _parse_result(response) or []
        return [
            Script.model_validate({**item, "tags": item.get("tags") or []})
            for item in items
        ]

    async def put_script(self, script_name: str, content: bytes) -> None:
        main_module = f"{script_name}.mjs"
        metadata = orjson.dumps({"main_module": main_module})
        files = {
            "script": (main_module, content, _MODULE_CONTENT_TYPE),
            "metadata": ("metadata.json", metadata, "application/json"),
        }
        response = await self._request("PUT", _script_path(script_name), files=files)
        if not response.is_success:
            raise Script.UploadRejected(
                response.status_code, _parse_body(response)
            ) from None

    async def put_tags(self, script_name: str, tags: OwnershipTagSet) -> None:
        response = await self._request(
            "PUT", _script_path(script_name, "/tags"), json=tags.as_list()
        )
        _raise_for_status(response)
