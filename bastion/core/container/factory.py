"""Container Factory.

All construction logic lives here. The factory reads settings and builds
the container with environment-appropriate implementations. Broken wiring,
such as a resource kind without a policy, fails here at startup.
"""

from bastion.core.config import Settings
from bastion.core.container.container import Container
from bastion.core.logging import logger
from bastion.domains.access.broker import RoleContextBroker
from bastion.domains.access.protocols import RoleMembershipRepositoryProtocol
from bastion.domains.access.registry import PolicyRegistry
from bastion.domains.quotas.policies import (
    AlwaysAllowMemoryPolicy,
    AlwaysAllowRoutesPolicy,
    MaxMemoryPolicy,
    MaxRoutesPolicy,
)
from bastion.domains.quotas.protocols import (
    AppMemoryRepositoryProtocol,
    MemoryQuotaPolicyProtocol,
    RouteCountRepositoryProtocol,
    RouteQuotaPolicyProtocol,
)

factory_logger = logger.with_prefix("ContainerFactory: ").with_context(
    component="container_factory"
)


def create_container(
    settings: Settings,
    membership_repo: RoleMembershipRepositoryProtocol,
    route_counter: RouteCountRepositoryProtocol,
    memory_repo: AppMemoryRepositoryProtocol,
) -> Container:
    """Build container with environment-appropriate implementations.

    Args:
        settings: Application settings (from core/config)
        membership_repo: Role-membership store backing the broker
        route_counter: Route count query backing the route quota
        memory_repo: App memory query backing the memory quota

    Returns:
        Fully constructed Container ready for use

    Raises:
        PolicyNotRegisteredError: If a resource kind has no access policy.
    """
    policy_registry = PolicyRegistry()
    policy_registry.build()

    route_quota, memory_quota = _create_quota_policies(settings, route_counter, memory_repo)

    return Container(
        policy_registry=policy_registry,
        role_context_broker=RoleContextBroker(membership_repo),
        route_quota=route_quota,
        memory_quota=memory_quota,
    )


def _create_quota_policies(
    settings: Settings,
    route_counter: RouteCountRepositoryProtocol,
    memory_repo: AppMemoryRepositoryProtocol,
) -> tuple[RouteQuotaPolicyProtocol, MemoryQuotaPolicyProtocol]:
    """Create quota policies.

    Local development and deployments with enforcement switched off get the
    always-allow variants; nothing is counted.
    """
    if not settings.enforce_quotas:
        factory_logger.info("Quota enforcement disabled, using always-allow policies")
        return AlwaysAllowRoutesPolicy(), AlwaysAllowMemoryPolicy()
    return MaxRoutesPolicy(route_counter), MaxMemoryPolicy(memory_repo)
