"""Access policy registry: in-memory, built once at startup."""

from typing import Any, Iterable, Optional

from pydantic import ConfigDict

from bastion.core.exceptions import PolicyNotRegisteredError
from bastion.core.logging import logger
from bastion.core.protocols.registry import BaseRegistryEntry, RegistryProtocol
from bastion.domains.access.hierarchy import DefaultHierarchyResolver, kind_of
from bastion.domains.access.policies import KIND_RULES, BaseAccess, DomainAccess
from bastion.domains.access.protocols import AccessPolicyProtocol, HierarchyResolverProtocol
from bastion.domains.access.types import ResourceKind

registry_logger = logger.with_prefix("PolicyRegistry: ").with_context(
    component="policy_registry"
)


class PolicyRegistryEntry(BaseRegistryEntry):
    """Registered access policy for one resource kind."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: ResourceKind
    policy: AccessPolicyProtocol


def default_policies(
    resolver: Optional[HierarchyResolverProtocol] = None,
) -> list[AccessPolicyProtocol]:
    """One policy per resource kind, sharing a single hierarchy resolver."""
    resolver = resolver or DefaultHierarchyResolver()
    policies: list[AccessPolicyProtocol] = [
        BaseAccess(kind, rules, resolver) for kind, rules in KIND_RULES.items()
    ]
    policies.append(DomainAccess(resolver))
    return policies


class PolicyRegistry(RegistryProtocol[PolicyRegistryEntry]):
    """In-memory access policy registry, built once at startup."""

    def __init__(self) -> None:
        """Initialize the policy registry."""
        self._entries: dict[str, PolicyRegistryEntry] = {}

    def get(self, short_name: str) -> PolicyRegistryEntry:
        """Get a policy entry by resource kind name.

        Args:
            short_name: The resource kind value (e.g., "app", "domain").

        Returns:
            The registered policy entry.

        Raises:
            KeyError: If no policy is registered for the kind.
        """
        return self._entries[short_name]

    def list_all(self) -> list[PolicyRegistryEntry]:
        """List all registered policy entries."""
        return list(self._entries.values())

    def policy_for(self, kind: ResourceKind) -> AccessPolicyProtocol:
        """Get the policy for a resource kind. Raises KeyError if not registered."""
        return self._entries[ResourceKind(kind).value].policy

    def policy_for_resource(self, resource: Any) -> AccessPolicyProtocol:
        """Get the policy for a resource schema instance."""
        return self.policy_for(kind_of(resource))

    def build(self, policies: Optional[Iterable[AccessPolicyProtocol]] = None) -> None:
        """Register policies and check that every resource kind is covered.

        Called once at startup. After this, all lookups are dict reads.

        Raises:
            PolicyNotRegisteredError: If any resource kind is left without a policy.
        """
        if policies is None:
            policies = default_policies()

        for policy in policies:
            entry = self._build_entry(policy)
            if entry.short_name in self._entries:
                registry_logger.warning(f"Replacing policy for '{entry.short_name}'")
            self._entries[entry.short_name] = entry

        missing = {kind.value for kind in ResourceKind} - set(self._entries)
        if missing:
            registry_logger.error(f"Missing access policies for: {', '.join(sorted(missing))}")
            raise PolicyNotRegisteredError(missing)

        registry_logger.info(f"Built registry with {len(self._entries)} access policies.")

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _build_entry(policy: AccessPolicyProtocol) -> PolicyRegistryEntry:
        kind = ResourceKind(policy.kind)
        return PolicyRegistryEntry(
            short_name=kind.value,
            name=kind.name.replace("_", " ").title(),
            description=type(policy).__doc__,
            class_name=type(policy).__name__,
            kind=kind,
            policy=policy,
        )
