from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from dispatcher.toolkit import taskgroups

if TYPE_CHECKING:
    from dispatcher.app.infrastructure import IDispatchFabric
    from dispatcher.app.scripts.domain import DispatchRequest, DispatchResponse
    from dispatcher.app.scripts.services import PolicyService

    class IUseCaseServices(Protocol):
        fabric: IDispatchFabric
        policy: PolicyService

__all__ = ["DispatchUseCase"]


class DispatchUseCase:
    __slots__ = ["fabric", "policy_service"]

    def __init__(self, services: IUseCaseServices):
        self.fabric = services.fabric
        self.policy_service = services.policy

    async def dispatch(
        self, script_name: str, request: DispatchRequest
    ) -> DispatchResponse:
        """
        Forwards a request to a script with its resource limits and outbound script
        attached, and returns the script response.

        Raises:
            DependencyUnavailable: If policies can't be fetched or the script can't
                be invoked.
            Script.NotFound: If there is no script with such name.
        """
        limits, outbound = await taskgroups.gather(
            self.policy_service.get_resource_policy(script_name),
            self.policy_service.get_outbound_policy(script_name),
        )
        handle = self.fabric.get(script_name, limits=limits, outbound=outbound)
        return await handle.fetch(request)
