from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, PositiveInt

__all__ = [
    "OutboundPolicy",
    "ResourcePolicy",
]


class OutboundPolicyNotFound(Exception):
    pass


class ResourcePolicyNotFound(Exception):
    pass


class ResourcePolicy(BaseModel):
    """Execution limits bound to a script name."""

    NotFound: ClassVar[type[ResourcePolicyNotFound]] = ResourcePolicyNotFound

    script_name: str
    cpu_ms: PositiveInt | None = None
    memory: PositiveInt | None = None

    def is_empty(self) -> bool:
        return self.cpu_ms is None and self.memory is None


class OutboundPolicy(BaseModel):
    """A script that mediates outbound network calls of another script."""

    NotFound: ClassVar[type[OutboundPolicyNotFound]] = OutboundPolicyNotFound

    script_name: str
    outbound_script_name: str
