"""Role context: the actor's identity and role facts for one decision."""

from types import MappingProxyType
from typing import Mapping, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from bastion.domains.access.hierarchy import HierarchyRef
from bastion.domains.access.types import Grant, OrganizationRole, Scope, SpaceRole

_NO_IDS: frozenset[UUID] = frozenset()


class Actor(BaseModel):
    """Identity on whose behalf an operation is attempted.

    ``user_id`` is ``None`` for anonymous (unauthenticated) requests.
    """

    user_id: Optional[UUID] = None
    is_admin: bool = False

    model_config = ConfigDict(frozen=True)

    @property
    def is_authenticated(self) -> bool:
        """An actor is authenticated iff it carries an identity."""
        return self.user_id is not None


class RoleContext(BaseModel):
    """Immutable snapshot of an actor's role memberships.

    Built once per request (see ``RoleContextBroker``) and passed explicitly to
    every policy call. Memberships are frozen at construction, so a role grant
    that changes concurrently never affects a decision in progress. The role
    maps are read-only views; item assignment raises ``TypeError``.
    """

    actor: Actor
    organization_roles: Mapping[OrganizationRole, frozenset[UUID]] = Field(
        default_factory=dict, validate_default=True
    )
    space_roles: Mapping[SpaceRole, frozenset[UUID]] = Field(
        default_factory=dict, validate_default=True
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("organization_roles", "space_roles", mode="after")
    @classmethod
    def read_only_roles(cls, roles: Mapping) -> Mapping:
        """Freeze the role map so the snapshot cannot change after construction."""
        return MappingProxyType({role: frozenset(ids) for role, ids in roles.items()})

    @model_validator(mode="after")
    def anonymous_has_no_roles(self):
        """Anonymous actors cannot hold memberships."""
        if not self.actor.is_authenticated and (
            any(self.organization_roles.values()) or any(self.space_roles.values())
        ):
            raise ValueError("Anonymous role context cannot carry role memberships")
        return self

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def anonymous(cls) -> "RoleContext":
        """Context for an unauthenticated request."""
        return cls(actor=Actor())

    @classmethod
    def admin(cls, user_id: UUID) -> "RoleContext":
        """Context for a global administrator."""
        return cls(actor=Actor(user_id=user_id, is_admin=True))

    @classmethod
    def for_user(
        cls,
        user_id: UUID,
        organization_roles: Optional[dict[OrganizationRole, frozenset[UUID]]] = None,
        space_roles: Optional[dict[SpaceRole, frozenset[UUID]]] = None,
        is_admin: bool = False,
    ) -> "RoleContext":
        """Context for an authenticated user with the given memberships."""
        return cls(
            actor=Actor(user_id=user_id, is_admin=is_admin),
            organization_roles={r: frozenset(ids) for r, ids in (organization_roles or {}).items()},
            space_roles={r: frozenset(ids) for r, ids in (space_roles or {}).items()},
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def is_admin(self) -> bool:
        """Global admin override."""
        return self.actor.is_admin

    @property
    def is_authenticated(self) -> bool:
        """Whether the actor is authenticated."""
        return self.actor.is_authenticated

    @property
    def user_id(self) -> Optional[UUID]:
        """User ID if authenticated."""
        return self.actor.user_id

    def in_organization_as(self, organization_id: Optional[UUID], role: OrganizationRole) -> bool:
        """Whether the actor holds ``role`` in the organization. ``None`` is never a match."""
        if organization_id is None:
            return False
        return organization_id in self.organization_roles.get(role, _NO_IDS)

    def in_space_as(self, space_id: Optional[UUID], role: SpaceRole) -> bool:
        """Whether the actor holds ``role`` in the space. ``None`` is never a match."""
        if space_id is None:
            return False
        return space_id in self.space_roles.get(role, _NO_IDS)

    def organizations_as(self, role: OrganizationRole) -> frozenset[UUID]:
        """IDs of organizations where the actor holds ``role``."""
        return self.organization_roles.get(role, _NO_IDS)

    def spaces_as(self, role: SpaceRole) -> frozenset[UUID]:
        """IDs of spaces where the actor holds ``role``."""
        return self.space_roles.get(role, _NO_IDS)

    def holds(self, grant: Grant, hierarchy: HierarchyRef) -> bool:
        """Whether the actor holds ``grant`` on the resolved hierarchy."""
        if grant.scope == Scope.ORGANIZATION:
            return self.in_organization_as(hierarchy.organization_id, grant.role)
        return self.in_space_as(hierarchy.space_id, grant.role)
