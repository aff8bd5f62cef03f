from __future__ import annotations

from typing import TYPE_CHECKING

from dispatcher.toolkit import taskgroups

if TYPE_CHECKING:
    from dispatcher.app.infrastructure import INamespaceRegistry
    from dispatcher.app.scripts.domain import Script

__all__ = ["NamespaceService"]


class NamespaceService:
    __slots__ = ["registry"]

    def __init__(self, registry: INamespaceRegistry):
        self.registry = registry

    async def delete_all(self) -> list[str]:
        """Deletes every script in the namespace and returns their names."""
        scripts = await self.registry.list_scripts()
        await taskgroups.gather(
            *(self.registry.delete_script(script.id) for script in scripts)
        )
        return [script.id for script in scripts]

    async def list_all(self) -> list[Script]:
        return await self.registry.list_scripts()

    async def list_by_owner(self, customer_id: str) -> list[Script]:
        """Lists scripts tagged with a given customer ID."""
        return await self.registry.list_scripts_by_tags([(customer_id, True)])

    async def upload(self, script_name: str, content: bytes) -> None:
        """
        Creates or replaces a script content.

        Raises:
            DependencyUnavailable: If the registry can't be reached.
            Script.UploadRejected: If the registry rejects the script.
        """
        await self.registry.put_script(script_name, content)
