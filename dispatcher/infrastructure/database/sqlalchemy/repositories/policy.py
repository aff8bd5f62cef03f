from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select
from sqlalchemy.dialects.sqlite import insert

from dispatcher.app.scripts.domain import OutboundPolicy, ResourcePolicy
from dispatcher.app.scripts.repositories import (
    IOutboundPolicyRepository,
    IResourcePolicyRepository,
)
from dispatcher.infrastructure.database.sqlalchemy.tables import (
    outbound_policies,
    resource_policies,
)

if TYPE_CHECKING:
    from dispatcher.infrastructure.database.sqlalchemy.connection import Connector

__all__ = [
    "OutboundPolicyRepository",
    "ResourcePolicyRepository",
]


class OutboundPolicyRepository(IOutboundPolicyRepository):
    def __init__(self, connector: Connector):
        self.connector = connector

    async def get(self, script_name: str) -> OutboundPolicy:
        query = (
            select(outbound_policies)
            .where(outbound_policies.c.script_name == script_name)
        )
        async with self.connector.connect() as conn:
            row = (await conn.execute(query)).first()
        if row is None:
            raise OutboundPolicy.NotFound() from None
        return OutboundPolicy(
            script_name=row.script_name,
            outbound_script_name=row.outbound_script_name,
        )

    async def save(self, policy: OutboundPolicy) -> OutboundPolicy:
        query = insert(outbound_policies).values(
            script_name=policy.script_name,
            outbound_script_name=policy.outbound_script_name,
        )
        query = query.on_conflict_do_update(
            index_elements=[outbound_policies.c.script_name],
            set_={"outbound_script_name": query.excluded.outbound_script_name},
        )
        async with self.connector.connect() as conn:
            await conn.execute(query)
        return policy


class ResourcePolicyRepository(IResourcePolicyRepository):
    def __init__(self, connector: Connector):
        self.connector = connector

    async def get(self, script_name: str) -> ResourcePolicy:
        query = (
            select(resource_policies)
            .where(resource_policies.c.script_name == script_name)
        )
        async with self.connector.connect() as conn:
            row = (await conn.execute(query)).first()
        if row is None:
            raise ResourcePolicy.NotFound() from None
        return ResourcePolicy(
            script_name=row.script_name,
            cpu_ms=row.cpu_ms,
            memory=row.memory,
        )

    async def save(self, policy: ResourcePolicy) -> ResourcePolicy:
        query = insert(resource_policies).values(
            script_name=policy.script_name,
            cpu_ms=policy.cpu_ms,
            memory=policy.memory,
        )
        # a republished policy replaces the previous one entirely
        query = query.on_conflict_do_update(
            index_elements=[resource_policies.c.script_name],
            set_={
                "cpu_ms": query.excluded.cpu_ms,
                "memory": query.excluded.memory,
            },
        )
        async with self.connector.connect() as conn:
            await conn.execute(query)
        return policy
