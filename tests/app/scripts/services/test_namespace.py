from __future__ import annotations

from typing import TYPE_CHECKING, cast
from unittest import mock

import pytest

from dispatcher.app.infrastructure import DependencyUnavailable
from dispatcher.app.scripts.domain import Script

if TYPE_CHECKING:
    from dispatcher.app.scripts.services import NamespaceService

pytestmark = [pytest.mark.anyio]


class TestDeleteAll:
    async def test(self, ns_service: NamespaceService):
        # GIVEN
        registry = cast(mock.AsyncMock, ns_service.registry)
        registry.list_scripts.return_value = [Script(id="foo"), Script(id="bar")]
        # WHEN
        result = await ns_service.delete_all()
        # THEN
        assert result == ["foo", "bar"]
        registry.delete_script.assert_has_awaits(
            [mock.call("foo"), mock.call("bar")], any_order=True
        )

    async def test_when_namespace_is_empty(self, ns_service: NamespaceService):
        # GIVEN
        registry = cast(mock.AsyncMock, ns_service.registry)
        registry.list_scripts.return_value = []
        # WHEN
        result = await ns_service.delete_all()
        # THEN
        assert result == []
        registry.delete_script.assert_not_awaited()


class TestListAll:
    async def test(self, ns_service: NamespaceService):
        registry = cast(mock.AsyncMock, ns_service.registry)
        result = await ns_service.list_all()
        assert result == registry.list_scripts.return_value


class TestListByOwner:
    async def test(self, ns_service: NamespaceService):
        # GIVEN
        registry = cast(mock.AsyncMock, ns_service.registry)
        # WHEN
        result = await ns_service.list_by_owner("abc")
        # THEN
        assert result == registry.list_scripts_by_tags.return_value
        registry.list_scripts_by_tags.assert_awaited_once_with([("abc", True)])


class TestUpload:
    async def test(self, ns_service: NamespaceService):
        # GIVEN
        registry = cast(mock.AsyncMock, ns_service.registry)
        # WHEN
        await ns_service.upload("foo", b"export default {}")
        # THEN
        registry.put_script.assert_awaited_once_with("foo", b"export default {}")

    async def test_when_rejected(self, ns_service: NamespaceService):
        # GIVEN
        registry = cast(mock.AsyncMock, ns_service.registry)
        registry.put_script.side_effect = Script.UploadRejected(400, "bad script")
        # WHEN / THEN
        with pytest.raises(Script.UploadRejected):
            await ns_service.upload("foo", b"export default {")

    async def test_when_registry_is_unavailable(self, ns_service: NamespaceService):
        # GIVEN
        registry = cast(mock.AsyncMock, ns_service.registry)
        registry.put_script.side_effect = DependencyUnavailable
        # WHEN / THEN
        with pytest.raises(DependencyUnavailable):
            await ns_service.upload("foo", b"export default {}")
