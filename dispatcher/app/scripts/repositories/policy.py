from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from dispatcher.app.scripts.domain import OutboundPolicy, ResourcePolicy


class IOutboundPolicyRepository(Protocol):
    async def get(self, script_name: str) -> OutboundPolicy:
        """
        Returns an outbound policy for a given script name.

        Raises:
            OutboundPolicy.NotFound: If there is no policy for the script.
        """

    async def save(self, policy: OutboundPolicy) -> OutboundPolicy:
        """Saves a policy, replacing an existing policy for the same script name."""


class IResourcePolicyRepository(Protocol):
    async def get(self, script_name: str) -> ResourcePolicy:
        """
        Returns a resource policy for a given script name.

        Raises:
            ResourcePolicy.NotFound: If there is no policy for the script.
        """

    async def save(self, policy: ResourcePolicy) -> ResourcePolicy:
        """Saves a policy, replacing an existing policy for the same script name."""
