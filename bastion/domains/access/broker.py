"""Role context broker: builds the per-request RoleContext."""

from collections import defaultdict
from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from bastion.core.logging import logger
from bastion.domains.access.context import Actor, RoleContext
from bastion.domains.access.protocols import RoleMembershipRepositoryProtocol
from bastion.domains.access.types import OrganizationRole, Scope, SpaceRole

broker_logger = logger.with_prefix("RoleContextBroker: ").with_context(
    component="role_context_broker"
)


class RoleContextBroker:
    """Resolves an actor's role memberships into a frozen RoleContext.

    Memberships are read once per request. The returned context never goes
    back to the store, so every decision made with it sees the same roles even
    if a grant changes mid-request.
    """

    def __init__(self, membership_repo: RoleMembershipRepositoryProtocol) -> None:
        """Initialize with the role-membership repository."""
        self._membership_repo = membership_repo

    async def resolve_role_context(
        self, db: AsyncSession, user_id: Optional[UUID], is_admin: bool = False
    ) -> RoleContext:
        """Resolve the role context for an actor.

        Args:
            db: Database session
            user_id: Authenticated user ID, or None for anonymous requests
            is_admin: Whether the actor is a global administrator

        Returns:
            RoleContext snapshot for the current request
        """
        if user_id is None:
            return RoleContext.anonymous()

        memberships = await self._membership_repo.get_by_user(db, user_id)

        organization_roles: dict[OrganizationRole, set[UUID]] = defaultdict(set)
        space_roles: dict[SpaceRole, set[UUID]] = defaultdict(set)
        for membership in memberships:
            try:
                if membership.scope == Scope.ORGANIZATION:
                    organization_roles[OrganizationRole(membership.role)].add(
                        membership.resource_id
                    )
                else:
                    space_roles[SpaceRole(membership.role)].add(membership.resource_id)
            except ValueError:
                broker_logger.with_context(user_id=str(user_id)).warning(
                    f"Skipping unknown {membership.scope.value} role '{membership.role}'"
                )

        broker_logger.with_context(user_id=str(user_id)).debug(
            f"Resolved {len(memberships)} memberships "
            f"(admin={is_admin}, org roles={len(organization_roles)}, "
            f"space roles={len(space_roles)})"
        )

        return RoleContext(
            actor=Actor(user_id=user_id, is_admin=is_admin),
            organization_roles={role: frozenset(ids) for role, ids in organization_roles.items()},
            space_roles={role: frozenset(ids) for role, ids in space_roles.items()},
        )
