from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from dispatcher.app.infrastructure.database import IDatabase
from dispatcher.app.scripts.domain import OutboundPolicy, ResourcePolicy

if TYPE_CHECKING:
    from dispatcher.app.scripts.repositories import (
        IOutboundPolicyRepository,
        IResourcePolicyRepository,
    )

__all__ = ["PolicyService"]


class IServiceDatabase(IDatabase, Protocol):
    outbound_policy: IOutboundPolicyRepository
    resource_policy: IResourcePolicyRepository


class PolicyService:
    __slots__ = ["db"]

    def __init__(self, database: IServiceDatabase):
        self.db = database

    async def get_outbound_policy(self, script_name: str) -> OutboundPolicy | None:
        """Returns an outbound policy for a script or None if there is no policy."""
        try:
            return await self.db.outbound_policy.get(script_name)
        except OutboundPolicy.NotFound:
            return None

    async def get_resource_policy(self, script_name: str) -> ResourcePolicy | None:
        """Returns a resource policy for a script or None if there is no policy."""
        try:
            return await self.db.resource_policy.get(script_name)
        except ResourcePolicy.NotFound:
            return None

    async def set_outbound_policy(
        self, script_name: str, outbound_script_name: str | None
    ) -> OutboundPolicy | None:
        """
        Saves an outbound policy for a script if outbound script name is provided,
        otherwise does nothing. An existing policy is overwritten.
        """
        if not outbound_script_name:
            return None
        policy = OutboundPolicy(
            script_name=script_name,
            outbound_script_name=outbound_script_name,
        )
        return await self.db.outbound_policy.save(policy)

    async def set_resource_policy(
        self, script_name: str, cpu_ms: int | None, memory: int | None
    ) -> ResourcePolicy | None:
        """
        Saves resource limits for a script if at least one limit is provided,
        otherwise does nothing. An existing policy is overwritten, not merged.
        """
        policy = ResourcePolicy(script_name=script_name, cpu_ms=cpu_ms, memory=memory)
        if policy.is_empty():
            return None
        return await self.db.resource_policy.save(policy)
