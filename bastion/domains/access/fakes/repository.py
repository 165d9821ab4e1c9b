"""Fake role-membership repository for testing."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from bastion.domains.access.schemas import RoleMembership
from bastion.domains.access.types import OrganizationRole, Scope, SpaceRole


class FakeRoleMembershipRepository:
    """In-memory fake for RoleMembershipRepositoryProtocol."""

    def __init__(self) -> None:
        """Initialize with empty store and call log."""
        self._store: dict[UUID, list[RoleMembership]] = {}
        self._calls: list[tuple] = []

    def seed(self, membership: RoleMembership) -> None:
        """Populate store with a membership record."""
        self._store.setdefault(membership.user_id, []).append(membership)

    def grant_org(self, user_id: UUID, role: OrganizationRole, organization_id: UUID) -> None:
        """Seed an organization role."""
        self.seed(
            RoleMembership(
                user_id=user_id,
                scope=Scope.ORGANIZATION,
                role=role.value,
                resource_id=organization_id,
            )
        )

    def grant_space(self, user_id: UUID, role: SpaceRole, space_id: UUID) -> None:
        """Seed a space role."""
        self.seed(
            RoleMembership(
                user_id=user_id, scope=Scope.SPACE, role=role.value, resource_id=space_id
            )
        )

    def revoke_all(self, user_id: UUID) -> None:
        """Drop every membership of a user."""
        self._store.pop(user_id, None)

    async def get_by_user(self, db: AsyncSession, user_id: UUID) -> list[RoleMembership]:
        """Return the seeded memberships of the user."""
        self._calls.append(("get_by_user", db, user_id))
        return list(self._store.get(user_id, []))
