"""Domain access policy.

A single registered kind covering private and shared domains. Each decision is
delegated to the private or shared rule set according to the resource's
``is_shared`` discriminator; anything that is not explicitly shared is treated
as private, so a private domain whose owning organization was deleted denies.
"""

from typing import Any, Optional

from bastion.domains.access.context import RoleContext
from bastion.domains.access.filters import Filter, field_equals
from bastion.domains.access.policies._base import BaseAccess
from bastion.domains.access.policies.rules import PRIVATE_DOMAIN_RULES, SHARED_DOMAIN_RULES
from bastion.domains.access.protocols import HierarchyResolverProtocol
from bastion.domains.access.types import Operation, ResourceKind


class DomainAccess:
    """Access policy for private and shared domains."""

    kind = ResourceKind.DOMAIN

    def __init__(self, resolver: Optional[HierarchyResolverProtocol] = None) -> None:
        """Compose one ``BaseAccess`` per domain flavour."""
        self.private = BaseAccess(ResourceKind.DOMAIN, PRIVATE_DOMAIN_RULES, resolver)
        self.shared = BaseAccess(ResourceKind.DOMAIN, SHARED_DOMAIN_RULES, resolver)

    def _policy_for(self, resource: Any) -> BaseAccess:
        if getattr(resource, "is_shared", False) is True:
            return self.shared
        return self.private

    def can_create(self, context: RoleContext, resource: Any) -> bool:
        """Whether the actor may create ``resource``."""
        return self._policy_for(resource).can_create(context, resource)

    def can_read(self, context: RoleContext, resource: Any) -> bool:
        """Whether the actor may read ``resource``."""
        return self._policy_for(resource).can_read(context, resource)

    def can_update(self, context: RoleContext, resource: Any) -> bool:
        """Whether the actor may update ``resource``."""
        return self._policy_for(resource).can_update(context, resource)

    def can_delete(self, context: RoleContext, resource: Any) -> bool:
        """Whether the actor may delete ``resource``."""
        return self._policy_for(resource).can_delete(context, resource)

    def allows(self, operation: Operation, context: RoleContext, resource: Any) -> bool:
        """Dispatch to the predicate for ``operation``."""
        return self._policy_for(resource).allows(operation, context, resource)

    def visibility_filter(self, context: RoleContext) -> Filter:
        """Shared domains, plus private domains the actor manages or audits."""
        if context.is_admin:
            return Filter.match_all()

        conditions: list = [field_equals("is_shared", True)]
        private = self.private.visibility_filter(context)
        if not private.is_match_none:
            conditions.append(private)
        return Filter.any_of(*conditions)

    def __repr__(self) -> str:
        return "DomainAccess(kind=domain)"
