from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Protocol

from dispatcher.app.infrastructure import DependencyUnavailable
from dispatcher.app.scripts.domain import PublishResult, PublishStep, Script
from dispatcher.cache import cache
from dispatcher.config import config

if TYPE_CHECKING:
    from dispatcher.app.customers.domain import Customer
    from dispatcher.app.scripts.services import (
        NamespaceService,
        OwnershipService,
        PolicyService,
    )

    class IUseCaseServices(Protocol):
        namespace: NamespaceService
        ownership: OwnershipService
        policy: PolicyService

__all__ = ["ScriptUseCase"]

logger = logging.getLogger(__name__)

_CLAIM_LOCK_KEY = "claim_script:{script_name}"
_CLAIM_LOCK_GRACE = 5


class ScriptUseCase:
    __slots__ = ["ns_service", "ownership_service", "policy_service"]

    def __init__(self, services: IUseCaseServices):
        self.ns_service = services.namespace
        self.ownership_service = services.ownership
        self.policy_service = services.policy

    async def delete_all(self) -> list[str]:
        """
        Deletes every script in the namespace. Resource and outbound policies are
        kept.
        """
        return await self.ns_service.delete_all()

    async def list_all(self) -> list[Script]:
        """Lists every script in the namespace."""
        return await self.ns_service.list_all()

    async def list_owned(self, customer: Customer) -> list[Script]:
        """Lists scripts owned by the customer."""
        return await self.ns_service.list_by_owner(customer.id)

    async def publish(
        self,
        script_name: str,
        customer: Customer,
        content: bytes,
        *,
        cpu_ms: int | None = None,
        memory: int | None = None,
        outbound: str | None = None,
    ) -> PublishResult:
        """
        Claims a script name for the customer and publishes the script with its
        resource limits and outbound script.

        A script is published once its content is uploaded. Saving limits, outbound
        script and ownership tags happens after the upload, and failure of any of
        these steps doesn't undo the upload, instead the step is reported in
        `PublishResult.failed_steps`.

        Raises:
            DependencyUnavailable: If ownership can't be checked, the script can't
                be uploaded or publishing outlasts the claim lock TTL.
            Script.NameReserved: If the name is claimed by another customer.
            Script.UploadRejected: If the registry rejects the script.
        """
        lock_key = _CLAIM_LOCK_KEY.format(script_name=script_name)
        lock_ttl = config.features.claim_lock_ttl.total_seconds()

        # the lock outlives the deadline, so no one can claim the name mid-publish
        async with cache.lock(lock_key, expire=lock_ttl + _CLAIM_LOCK_GRACE, wait=True):
            try:
                async with asyncio.timeout(lock_ttl):
                    failed_steps = await self._publish(
                        script_name,
                        customer,
                        content,
                        cpu_ms=cpu_ms,
                        memory=memory,
                        outbound=outbound,
                    )
            except TimeoutError as exc:
                msg = f"Publishing {script_name} took longer than {lock_ttl:g}s"
                raise DependencyUnavailable(msg) from exc

        logger.info("Published script %s for customer %s", script_name, customer.id)
        return PublishResult(script_name=script_name, failed_steps=failed_steps)

    async def _publish(
        self,
        script_name: str,
        customer: Customer,
        content: bytes,
        *,
        cpu_ms: int | None,
        memory: int | None,
        outbound: str | None,
    ) -> list[PublishStep]:
        failed_steps: list[PublishStep] = []

        allowed = await self.ownership_service.check_claim(script_name, customer.id)
        if not allowed:
            raise Script.NameReserved() from None

        await self.ns_service.upload(script_name, content)

        try:
            await self.policy_service.set_resource_policy(
                script_name, cpu_ms=cpu_ms, memory=memory
            )
        except DependencyUnavailable:
            logger.exception("Failed to save resource policy for %s", script_name)
            failed_steps.append(PublishStep.resource_policy)

        try:
            await self.policy_service.set_outbound_policy(script_name, outbound)
        except DependencyUnavailable:
            logger.exception("Failed to save outbound policy for %s", script_name)
            failed_steps.append(PublishStep.outbound_policy)

        try:
            await self.ownership_service.claim(script_name, customer)
        except DependencyUnavailable:
            logger.exception(
                "Failed to tag %s as owned by customer %s",
                script_name,
                customer.id,
            )
            failed_steps.append(PublishStep.ownership_tags)

        return failed_steps
