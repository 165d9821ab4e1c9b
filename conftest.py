"""Root conftest for pytest configuration and shared fixtures.

This conftest is loaded before both testpaths (tests/ and bastion/domains/),
making its fixtures available to centralized tests AND colocated domain tests.
"""

import os

import pytest

# ---------------------------------------------------------------------------
# Environment variables: must be set before any bastion module import
# Uses setdefault so real env vars (CI) are never overridden.
# ---------------------------------------------------------------------------
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("LOCAL_DEVELOPMENT", "false")
os.environ.setdefault("QUOTA_ENFORCEMENT_ENABLED", "true")


# ---------------------------------------------------------------------------
# Shared fake fixtures: individual protocol fakes
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_membership_repo():
    """Fake RoleMembershipRepository with an empty store."""
    from bastion.domains.access.fakes import FakeRoleMembershipRepository

    return FakeRoleMembershipRepository()


@pytest.fixture
def fake_route_counter():
    """Fake RouteCountRepository reporting zero routes by default."""
    from bastion.domains.quotas.fakes import FakeRouteCountRepository

    return FakeRouteCountRepository()


@pytest.fixture
def fake_memory_repo():
    """Fake AppMemoryRepository with no apps."""
    from bastion.domains.quotas.fakes import FakeAppMemoryRepository

    return FakeAppMemoryRepository()


@pytest.fixture
def fake_route_quota():
    """Fake RouteQuotaPolicy that allows unless told to deny."""
    from bastion.domains.quotas.fakes import FakeRouteQuotaPolicy

    return FakeRouteQuotaPolicy()


@pytest.fixture
def policy_registry():
    """Fully built PolicyRegistry with the default policies."""
    from bastion.domains.access.registry import PolicyRegistry

    registry = PolicyRegistry()
    registry.build()
    return registry
