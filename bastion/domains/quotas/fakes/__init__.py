"""Fake implementations for quota domain testing."""

from bastion.domains.quotas.fakes.policies import FakeRouteQuotaPolicy
from bastion.domains.quotas.fakes.repository import (
    FakeAppMemoryRepository,
    FakeRouteCountRepository,
)

__all__ = ["FakeAppMemoryRepository", "FakeRouteCountRepository", "FakeRouteQuotaPolicy"]
