from __future__ import annotations

from typing import TYPE_CHECKING

from dispatcher.app.scripts.domain import OwnershipTagSet

if TYPE_CHECKING:
    from dispatcher.app.customers.domain import Customer
    from dispatcher.app.infrastructure import INamespaceRegistry

__all__ = ["OwnershipService"]


class OwnershipService:
    """Decides who owns a script name based on tags in the namespace registry."""

    __slots__ = ["registry"]

    def __init__(self, registry: INamespaceRegistry):
        self.registry = registry

    async def check_claim(self, script_name: str, customer_id: str) -> bool:
        """
        Returns True if a customer may create or update a script with a given name.
        An unclaimed name is free to claim.

        Raises:
            DependencyUnavailable: If tags can't be fetched from the registry.
        """
        tags = await self.get_tags(script_name)
        return tags.allows(customer_id)

    async def claim(self, script_name: str, customer: Customer) -> OwnershipTagSet:
        """
        Marks a script as owned by the customer, replacing any existing tags.

        Raises:
            DependencyUnavailable: If tags can't be saved to the registry.
        """
        tags = OwnershipTagSet.for_customer(customer)
        await self.registry.put_tags(script_name, tags)
        return tags

    async def get_tags(self, script_name: str) -> OwnershipTagSet:
        return await self.registry.get_tags(script_name)
