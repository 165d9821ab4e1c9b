"""Default access policy.

``BaseAccess`` evaluates a per-kind ``AccessRules`` table entry. Every
predicate applies, in order:

1. admin: allow everything
2. anonymous: deny everything (the one exception is ``public_read``, which
   allows reads before this check)
3. the kind's grants, resolved against the resource's hierarchy

With no grants configured a kind is admin-only, and ``can_read`` is true
exactly when the resource passes the kind's visibility filter.
"""

from dataclasses import dataclass
from typing import Any, Optional

from bastion.domains.access.context import RoleContext
from bastion.domains.access.filters import Filter, field_in
from bastion.domains.access.hierarchy import DefaultHierarchyResolver
from bastion.domains.access.protocols import HierarchyResolverProtocol
from bastion.domains.access.types import Grant, Operation, ResourceKind, Scope

_NO_GRANTS: frozenset[Grant] = frozenset()


@dataclass(frozen=True)
class AccessRules:
    """Grants per operation for one resource kind.

    ``delete`` of ``None`` aliases ``create``: the same grants allow both.
    ``authenticated_read`` makes the kind readable by any authenticated actor;
    ``public_read`` makes it readable by anyone, including anonymous actors.
    """

    create: frozenset[Grant] = _NO_GRANTS
    read: frozenset[Grant] = _NO_GRANTS
    update: frozenset[Grant] = _NO_GRANTS
    delete: Optional[frozenset[Grant]] = _NO_GRANTS
    authenticated_read: bool = False
    public_read: bool = False

    @property
    def delete_grants(self) -> frozenset[Grant]:
        """Grants for delete, following the create alias."""
        return self.create if self.delete is None else self.delete


ADMIN_ONLY = AccessRules()


class BaseAccess:
    """Rule-table driven access policy for a single resource kind.

    Stateless: one instance per kind is built at startup and shared across
    requests and threads.
    """

    def __init__(
        self,
        kind: ResourceKind,
        rules: AccessRules = ADMIN_ONLY,
        resolver: Optional[HierarchyResolverProtocol] = None,
    ) -> None:
        """Initialize with the kind's rules and a hierarchy resolver."""
        self.kind = kind
        self.rules = rules
        self._resolver = resolver or DefaultHierarchyResolver()

    def can_create(self, context: RoleContext, resource: Any) -> bool:
        """Whether the actor may create ``resource``."""
        return self._granted(context, resource, self.rules.create)

    def can_read(self, context: RoleContext, resource: Any) -> bool:
        """Whether the actor may read ``resource``: visible implies readable."""
        return self.visibility_filter(context).matches(self._resolver.fields(resource))

    def can_update(self, context: RoleContext, resource: Any) -> bool:
        """Whether the actor may update ``resource``."""
        return self._granted(context, resource, self.rules.update)

    def can_delete(self, context: RoleContext, resource: Any) -> bool:
        """Whether the actor may delete ``resource``."""
        return self._granted(context, resource, self.rules.delete_grants)

    def allows(self, operation: Operation, context: RoleContext, resource: Any) -> bool:
        """Dispatch to the predicate for ``operation``."""
        if operation == Operation.CREATE:
            return self.can_create(context, resource)
        if operation == Operation.READ:
            return self.can_read(context, resource)
        if operation == Operation.UPDATE:
            return self.can_update(context, resource)
        return self.can_delete(context, resource)

    def visibility_filter(self, context: RoleContext) -> Filter:
        """Filter selecting the instances of this kind the actor may enumerate."""
        if context.is_admin or self.rules.public_read:
            return Filter.match_all()
        if not context.is_authenticated:
            return Filter.match_none()
        if self.rules.authenticated_read:
            return Filter.match_all()

        org_ids: set = set()
        space_ids: set = set()
        for grant in self.rules.read:
            if grant.scope == Scope.ORGANIZATION:
                org_ids |= context.organizations_as(grant.role)
            else:
                space_ids |= context.spaces_as(grant.role)

        conditions = []
        if org_ids:
            conditions.append(field_in("organization_id", org_ids))
        if space_ids:
            conditions.append(field_in("space_id", space_ids))
        return Filter.any_of(*conditions)

    def _granted(self, context: RoleContext, resource: Any, grants: frozenset[Grant]) -> bool:
        if context.is_admin:
            return True
        if not context.is_authenticated:
            return False
        if not grants:
            return False
        hierarchy = self._resolver.resolve(resource)
        return any(context.holds(grant, hierarchy) for grant in grants)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value})"
