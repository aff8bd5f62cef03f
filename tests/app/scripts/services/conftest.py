from __future__ import annotations

from unittest import mock

import pytest

from dispatcher.app.infrastructure import INamespaceRegistry
from dispatcher.app.scripts.repositories import (
    IOutboundPolicyRepository,
    IResourcePolicyRepository,
)
from dispatcher.app.scripts.services import (
    NamespaceService,
    OwnershipService,
    PolicyService,
)


@pytest.fixture
def registry():
    return mock.AsyncMock(INamespaceRegistry)


@pytest.fixture
def ns_service(registry) -> NamespaceService:
    """A NamespaceService instance with mocked registry."""
    return NamespaceService(registry=registry)


@pytest.fixture
def ownership_service(registry) -> OwnershipService:
    """An OwnershipService instance with mocked registry."""
    return OwnershipService(registry=registry)


@pytest.fixture
def policy_service() -> PolicyService:
    """A PolicyService instance with mocked database."""
    database = mock.MagicMock(
        outbound_policy=mock.AsyncMock(IOutboundPolicyRepository),
        resource_policy=mock.AsyncMock(IResourcePolicyRepository),
    )
    return PolicyService(database=database)
