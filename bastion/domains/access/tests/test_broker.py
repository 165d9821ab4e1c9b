"""Unit tests for RoleContextBroker."""

from uuid import uuid4

import pytest

from bastion.domains.access.broker import RoleContextBroker
from bastion.domains.access.schemas import RoleMembership
from bastion.domains.access.tests.conftest import (
    DEFAULT_ORG_ID,
    DEFAULT_SPACE_ID,
    OTHER_SPACE_ID,
    USER_ID,
)
from bastion.domains.access.types import OrganizationRole, Scope, SpaceRole


@pytest.mark.asyncio
async def test_anonymous_does_not_hit_the_store(db, membership_repo):
    broker = RoleContextBroker(membership_repo)

    ctx = await broker.resolve_role_context(db, None)

    assert ctx.is_authenticated is False
    assert ctx.is_admin is False
    assert membership_repo._calls == []


@pytest.mark.asyncio
async def test_memberships_are_grouped_by_role(db, membership_repo):
    membership_repo.grant_org(USER_ID, OrganizationRole.MANAGER, DEFAULT_ORG_ID)
    membership_repo.grant_space(USER_ID, SpaceRole.DEVELOPER, DEFAULT_SPACE_ID)
    membership_repo.grant_space(USER_ID, SpaceRole.DEVELOPER, OTHER_SPACE_ID)
    membership_repo.grant_space(USER_ID, SpaceRole.AUDITOR, OTHER_SPACE_ID)
    broker = RoleContextBroker(membership_repo)

    ctx = await broker.resolve_role_context(db, USER_ID)

    assert ctx.user_id == USER_ID
    assert ctx.in_organization_as(DEFAULT_ORG_ID, OrganizationRole.MANAGER) is True
    assert ctx.in_organization_as(DEFAULT_ORG_ID, OrganizationRole.AUDITOR) is False
    assert ctx.spaces_as(SpaceRole.DEVELOPER) == {DEFAULT_SPACE_ID, OTHER_SPACE_ID}
    assert ctx.spaces_as(SpaceRole.AUDITOR) == {OTHER_SPACE_ID}
    assert ctx.spaces_as(SpaceRole.MANAGER) == frozenset()
    assert membership_repo._calls == [("get_by_user", db, USER_ID)]


@pytest.mark.asyncio
async def test_admin_flag_is_carried(db, membership_repo):
    ctx = await RoleContextBroker(membership_repo).resolve_role_context(
        db, USER_ID, is_admin=True
    )
    assert ctx.is_admin is True


@pytest.mark.asyncio
async def test_unknown_roles_are_skipped(db, membership_repo):
    membership_repo.seed(
        RoleMembership(
            user_id=USER_ID, scope=Scope.SPACE, role="owner", resource_id=DEFAULT_SPACE_ID
        )
    )
    membership_repo.grant_space(USER_ID, SpaceRole.MANAGER, DEFAULT_SPACE_ID)

    ctx = await RoleContextBroker(membership_repo).resolve_role_context(db, USER_ID)

    assert ctx.space_roles == {SpaceRole.MANAGER: frozenset({DEFAULT_SPACE_ID})}


@pytest.mark.asyncio
async def test_context_is_a_snapshot(db, membership_repo):
    membership_repo.grant_space(USER_ID, SpaceRole.DEVELOPER, DEFAULT_SPACE_ID)
    broker = RoleContextBroker(membership_repo)

    ctx = await broker.resolve_role_context(db, USER_ID)
    membership_repo.revoke_all(USER_ID)

    assert ctx.in_space_as(DEFAULT_SPACE_ID, SpaceRole.DEVELOPER) is True
    fresh = await broker.resolve_role_context(db, USER_ID)
    assert fresh.in_space_as(DEFAULT_SPACE_ID, SpaceRole.DEVELOPER) is False


@pytest.mark.asyncio
async def test_user_without_memberships_gets_empty_context(db, membership_repo):
    ctx = await RoleContextBroker(membership_repo).resolve_role_context(db, uuid4())

    assert ctx.is_authenticated is True
    assert ctx.organization_roles == {}
    assert ctx.space_roles == {}
