"""Dependency Injection Container.

The container is a simple immutable dataclass that holds the authorization
singletons. It has no construction logic; that belongs in the factory.
"""

from dataclasses import dataclass, field, replace
from typing import Any

from bastion.core.authorization_service import AuthorizationService
from bastion.domains.access.broker import RoleContextBroker
from bastion.domains.access.registry import PolicyRegistry
from bastion.domains.quotas.protocols import MemoryQuotaPolicyProtocol, RouteQuotaPolicyProtocol


@dataclass(frozen=True)
class Container:
    """Immutable container holding the authorization engine.

    Usage:
        # Production: built once by the factory
        container = create_container(settings, membership_repo, route_counter, memory_repo)
        container.authorization_service.validate_access(ctx, Operation.READ, app)

        # Testing: construct directly with fakes
        test_container = Container(route_quota=FakeRouteQuotaPolicy(), ...)
    """

    # Access policies, one per resource kind
    policy_registry: PolicyRegistry

    # Builds a RoleContext per request from role memberships
    role_context_broker: RoleContextBroker

    # Quota policies consulted on the creation path
    route_quota: RouteQuotaPolicyProtocol
    memory_quota: MemoryQuotaPolicyProtocol

    # Facade turning decisions into exceptions; built from the fields above.
    authorization_service: AuthorizationService = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "authorization_service",
            AuthorizationService(self.policy_registry, self.route_quota),
        )

    def replace(self, **changes: Any) -> "Container":
        """Create a new container with some dependencies replaced.

        Useful for partial overrides in tests:

            modified = container.replace(route_quota=FakeRouteQuotaPolicy())

        The authorization service is rebuilt around the replacement.
        """
        return replace(self, **changes)
