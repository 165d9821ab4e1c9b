"""Quota domain test fixtures and helpers."""

from typing import Optional
from unittest.mock import AsyncMock
from uuid import UUID

import pytest

from bastion import schemas
from bastion.domains.quotas.fakes.repository import (
    FakeAppMemoryRepository,
    FakeRouteCountRepository,
)
from bastion.domains.quotas.policies import MaxMemoryPolicy, MaxRoutesPolicy

DEFAULT_ORG_ID = UUID("00000000-0000-0000-0000-000000000001")


def _make_org(
    total_routes: int = 10, memory_limit: int = 1024, org_id: UUID = DEFAULT_ORG_ID
) -> schemas.Organization:
    return schemas.Organization(
        id=org_id,
        name="quota-org",
        quota_definition=schemas.QuotaDefinition(
            name="test", total_routes=total_routes, memory_limit=memory_limit
        ),
    )


def _make_routes_policy(
    route_counter: Optional[FakeRouteCountRepository] = None,
) -> tuple[MaxRoutesPolicy, FakeRouteCountRepository]:
    """Build a MaxRoutesPolicy wired to a fake. Returns (policy, fake)."""
    counter = route_counter or FakeRouteCountRepository()
    return MaxRoutesPolicy(route_counter=counter), counter


def _make_memory_policy(
    memory_repo: Optional[FakeAppMemoryRepository] = None,
) -> tuple[MaxMemoryPolicy, FakeAppMemoryRepository]:
    """Build a MaxMemoryPolicy wired to a fake. Returns (policy, fake)."""
    repo = memory_repo or FakeAppMemoryRepository()
    return MaxMemoryPolicy(memory_repo=repo), repo


@pytest.fixture
def db():
    return AsyncMock()
