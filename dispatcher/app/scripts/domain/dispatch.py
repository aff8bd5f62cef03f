from __future__ import annotations

from typing import NamedTuple

__all__ = [
    "DispatchRequest",
    "DispatchResponse",
]


class DispatchRequest(NamedTuple):
    """An inbound request to be forwarded to a script as is."""

    method: str
    path: str = ""
    query: str = ""
    headers: list[tuple[str, str]] = []
    body: bytes = b""


class DispatchResponse(NamedTuple):
    """A response produced by a script."""

    status_code: int
    headers: list[tuple[str, str]]
    body: bytes
