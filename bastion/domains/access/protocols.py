"""Access domain protocols.

AccessPolicyProtocol: per-kind decision object (stateless singleton).
HierarchyResolverProtocol: nil-safe owning space/organization lookup.
RoleMembershipRepositoryProtocol: read access to role-membership records.
"""

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from bastion.domains.access.types import Operation, ResourceKind

if TYPE_CHECKING:
    from bastion.domains.access.context import RoleContext
    from bastion.domains.access.filters import Filter
    from bastion.domains.access.hierarchy import HierarchyRef
    from bastion.domains.access.schemas import RoleMembership


@runtime_checkable
class AccessPolicyProtocol(Protocol):
    """Authorization decisions for one resource kind.

    Every predicate is a total function: it returns a bool and never raises
    for a resource with missing parents.
    """

    kind: ResourceKind

    def can_create(self, context: "RoleContext", resource: Any) -> bool:
        """Whether the actor may create ``resource``."""
        ...

    def can_read(self, context: "RoleContext", resource: Any) -> bool:
        """Whether the actor may read ``resource``."""
        ...

    def can_update(self, context: "RoleContext", resource: Any) -> bool:
        """Whether the actor may update ``resource``."""
        ...

    def can_delete(self, context: "RoleContext", resource: Any) -> bool:
        """Whether the actor may delete ``resource``."""
        ...

    def allows(self, operation: Operation, context: "RoleContext", resource: Any) -> bool:
        """Dispatch to the predicate for ``operation``."""
        ...

    def visibility_filter(self, context: "RoleContext") -> "Filter":
        """Filter scoping which instances of the kind the actor may enumerate."""
        ...


class HierarchyResolverProtocol(Protocol):
    """Resolves a resource's optional owning space and organization."""

    def resolve(self, resource: Any) -> "HierarchyRef":
        """Resolve hierarchy references. Missing parents resolve to ``None``."""
        ...

    def fields(self, resource: Any) -> dict[str, Any]:
        """Logical field view used to evaluate visibility filters in memory."""
        ...


class RoleMembershipRepositoryProtocol(Protocol):
    """Read-only access to role-membership records."""

    async def get_by_user(self, db: AsyncSession, user_id: UUID) -> list["RoleMembership"]:
        """Get every organization and space membership of a user."""
        ...
