"""Access domain test fixtures and helpers."""

from typing import Optional
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest

from bastion import schemas
from bastion.domains.access.context import RoleContext
from bastion.domains.access.fakes.repository import FakeRoleMembershipRepository
from bastion.domains.access.registry import PolicyRegistry
from bastion.domains.access.types import OrganizationRole, SpaceRole

DEFAULT_ORG_ID = UUID("00000000-0000-0000-0000-000000000001")
OTHER_ORG_ID = UUID("00000000-0000-0000-0000-000000000002")
DEFAULT_SPACE_ID = UUID("00000000-0000-0000-0000-00000000000a")
OTHER_SPACE_ID = UUID("00000000-0000-0000-0000-00000000000b")
USER_ID = UUID("00000000-0000-0000-0000-0000000000f1")

# create, read, update, delete
ALL = (True, True, True, True)
NONE = (False, False, False, False)
READ_ONLY = (False, True, False, False)


# ---------------------------------------------------------------------------
# Resource builders
# ---------------------------------------------------------------------------


def _make_quota(total_routes: int = 10, memory_limit: int = 1024) -> schemas.QuotaDefinition:
    return schemas.QuotaDefinition(
        name="default", total_routes=total_routes, memory_limit=memory_limit
    )


def _make_org(org_id: UUID = DEFAULT_ORG_ID, **overrides) -> schemas.Organization:
    defaults = dict(id=org_id, name=f"org-{org_id.hex[-4:]}", quota_definition=_make_quota())
    defaults.update(overrides)
    return schemas.Organization(**defaults)


def _make_space(
    space_id: UUID = DEFAULT_SPACE_ID, org_id: Optional[UUID] = DEFAULT_ORG_ID
) -> schemas.Space:
    return schemas.Space(id=space_id, name=f"space-{space_id.hex[-4:]}", organization_id=org_id)


def _space_ref(
    space_id: UUID = DEFAULT_SPACE_ID,
    org_id: Optional[UUID] = DEFAULT_ORG_ID,
    is_deleted: bool = False,
) -> schemas.SpaceRef:
    return schemas.SpaceRef(id=space_id, organization_id=org_id, is_deleted=is_deleted)


def _make_app(space: Optional[schemas.SpaceRef] = None, **overrides) -> schemas.App:
    defaults = dict(name="web", space=space if space is not None else _space_ref())
    defaults.update(overrides)
    return schemas.App(**defaults)


def _make_instance(space: Optional[schemas.SpaceRef] = None) -> schemas.ServiceInstance:
    return schemas.ServiceInstance(
        name="db", space=space if space is not None else _space_ref()
    )


def _make_binding(
    app_space: Optional[schemas.SpaceRef] = None,
    instance_space: Optional[schemas.SpaceRef] = None,
) -> schemas.ServiceBinding:
    return schemas.ServiceBinding(
        app=_make_app(space=app_space), service_instance=_make_instance(space=instance_space)
    )


def _make_private_domain(org_id: Optional[UUID] = DEFAULT_ORG_ID, **overrides):
    owner = schemas.OrganizationRef(id=org_id) if org_id is not None else None
    defaults = dict(name="apps.example.com", owning_organization=owner)
    defaults.update(overrides)
    return schemas.PrivateDomain(**defaults)


def _make_shared_domain() -> schemas.SharedDomain:
    return schemas.SharedDomain(name="shared.example.com")


# ---------------------------------------------------------------------------
# Context builders
# ---------------------------------------------------------------------------


def _org_ctx(role: OrganizationRole, org_id: UUID = DEFAULT_ORG_ID) -> RoleContext:
    return RoleContext.for_user(USER_ID, organization_roles={role: {org_id}})


def _space_ctx(
    role: SpaceRole, space_id: UUID = DEFAULT_SPACE_ID, org_id: Optional[UUID] = DEFAULT_ORG_ID
) -> RoleContext:
    """Space role plus plain org membership, the way real users are set up."""
    organization_roles = {OrganizationRole.MEMBER: {org_id}} if org_id else {}
    return RoleContext.for_user(
        USER_ID, organization_roles=organization_roles, space_roles={role: {space_id}}
    )


def _no_roles_ctx() -> RoleContext:
    return RoleContext.for_user(uuid4())


def _predicates(policy, ctx: RoleContext, resource) -> tuple[bool, bool, bool, bool]:
    return (
        policy.can_create(ctx, resource),
        policy.can_read(ctx, resource),
        policy.can_update(ctx, resource),
        policy.can_delete(ctx, resource),
    )


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def registry() -> PolicyRegistry:
    registry = PolicyRegistry()
    registry.build()
    return registry


@pytest.fixture
def membership_repo() -> FakeRoleMembershipRepository:
    return FakeRoleMembershipRepository()


@pytest.fixture
def db():
    return AsyncMock()
