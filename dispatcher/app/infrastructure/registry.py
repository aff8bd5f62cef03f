from __future__ import annotations

from contextlib import AbstractAsyncContextManager
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterable

    from dispatcher.app.scripts.domain import OwnershipTagSet, Script

__all__ = [
    "INamespaceRegistry",
]


class INamespaceRegistry(
    AbstractAsyncContextManager["INamespaceRegistry"], Protocol
):
    async def delete_script(self, script_name: str) -> None:
        """
        Deletes a script from the namespace. Deleting a script that doesn't exist is
        not an error.

        Raises:
            DependencyUnavailable: If the registry can't be reached or fails.
        """

    async def get_tags(self, script_name: str) -> OwnershipTagSet:
        """
        Returns tags on a script. A script that doesn't exist has no tags.

        Raises:
            DependencyUnavailable: If the registry can't be reached or fails.
        """

    async def list_scripts(self) -> list[Script]:
        """
        Lists all scripts in the namespace together with their tags.

        Raises:
            DependencyUnavailable: If the registry can't be reached or fails.
        """

    async def list_scripts_by_tags(
        self, tags: Iterable[tuple[str, bool]]
    ) -> list[Script]:
        """
        Lists scripts filtered by tags. Each tag is paired with a flag telling
        whether scripts with that tag should be included or excluded.

        Raises:
            DependencyUnavailable: If the registry can't be reached or fails.
        """

    async def put_script(self, script_name: str, content: bytes) -> None:
        """
        Creates or replaces a script code.

        Raises:
            DependencyUnavailable: If the registry can't be reached.
            Script.UploadRejected: If the registry rejects the script.
        """

    async def put_tags(self, script_name: str, tags: OwnershipTagSet) -> None:
        """
        Replaces all tags on a script.

        Raises:
            DependencyUnavailable: If the registry can't be reached or fails.
        """
