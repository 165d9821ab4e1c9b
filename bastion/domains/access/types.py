"""Access domain types.

Enums and small value objects shared by the policies, the role-context broker
and the registry. No IO; everything here is deterministic.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class ResourceKind(str, Enum):
    """Kinds of resources subject to authorization."""

    ORGANIZATION = "organization"
    SPACE = "space"
    APP = "app"
    EVENT = "event"
    SERVICE = "service"
    SERVICE_INSTANCE = "service_instance"
    SERVICE_BINDING = "service_binding"
    DOMAIN = "domain"
    ROUTE = "route"
    TASK = "task"
    BILLING_EVENT = "billing_event"


class Operation(str, Enum):
    """Operations an actor may attempt on a resource."""

    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"


class Scope(str, Enum):
    """Level of the hierarchy a role is granted on."""

    ORGANIZATION = "organization"
    SPACE = "space"


class OrganizationRole(str, Enum):
    """Roles an actor can hold in an organization."""

    MANAGER = "manager"
    AUDITOR = "auditor"
    BILLING_MANAGER = "billing_manager"
    MEMBER = "member"


class SpaceRole(str, Enum):
    """Roles an actor can hold in a space."""

    DEVELOPER = "developer"
    MANAGER = "manager"
    AUDITOR = "auditor"


Role = Union[OrganizationRole, SpaceRole]


@dataclass(frozen=True)
class Grant:
    """A single role on a single hierarchy level, e.g. "space developer"."""

    scope: Scope
    role: Role

    def __post_init__(self) -> None:
        expected = OrganizationRole if self.scope == Scope.ORGANIZATION else SpaceRole
        if not isinstance(self.role, expected):
            raise TypeError(
                f"{self.scope.value} grant needs a {expected.__name__}, got {self.role!r}"
            )

    @classmethod
    def org(cls, role: OrganizationRole) -> "Grant":
        """Grant on the resource's organization."""
        return cls(Scope.ORGANIZATION, role)

    @classmethod
    def space(cls, role: SpaceRole) -> "Grant":
        """Grant on the resource's space."""
        return cls(Scope.SPACE, role)

    def __str__(self) -> str:
        return f"{self.scope.value}:{self.role.value}"


# Shorthands used by the rule table.
ORG_MANAGER = Grant.org(OrganizationRole.MANAGER)
ORG_AUDITOR = Grant.org(OrganizationRole.AUDITOR)
ORG_BILLING_MANAGER = Grant.org(OrganizationRole.BILLING_MANAGER)
ORG_MEMBER = Grant.org(OrganizationRole.MEMBER)
SPACE_DEVELOPER = Grant.space(SpaceRole.DEVELOPER)
SPACE_MANAGER = Grant.space(SpaceRole.MANAGER)
SPACE_AUDITOR = Grant.space(SpaceRole.AUDITOR)
