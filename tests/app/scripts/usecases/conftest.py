from __future__ import annotations

from unittest import mock

import pytest

from dispatcher.app.infrastructure import IDispatchFabric, IScriptHandle
from dispatcher.app.scripts.services import (
    NamespaceService,
    OwnershipService,
    PolicyService,
)
from dispatcher.app.scripts.usecases import DispatchUseCase, ScriptUseCase


@pytest.fixture
def dispatch_use_case():
    fabric = mock.MagicMock(IDispatchFabric)
    fabric.get.return_value = mock.MagicMock(IScriptHandle)
    services = mock.MagicMock(
        fabric=fabric,
        policy=mock.MagicMock(PolicyService),
    )
    return DispatchUseCase(services=services)


@pytest.fixture
def script_use_case():
    services = mock.MagicMock(
        namespace=mock.MagicMock(NamespaceService),
        ownership=mock.MagicMock(OwnershipService),
        policy=mock.MagicMock(PolicyService),
    )
    return ScriptUseCase(services=services)
