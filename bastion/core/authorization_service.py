"""Authorization service.

Front door for callers that need a decision turned into an exception, or a
visibility filter merged into an existing query filter. All decisions come
from the policies in the registry; this module adds no rules of its own.
"""

from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from bastion.core.exceptions import NotFoundException, PermissionException
from bastion.core.logging import ContextualLogger
from bastion.core.logging import logger as default_logger
from bastion.domains.access.context import RoleContext
from bastion.domains.access.filters import Filter, merge_filters
from bastion.domains.access.hierarchy import kind_of
from bastion.domains.access.registry import PolicyRegistry
from bastion.domains.access.types import Operation, ResourceKind
from bastion.domains.quotas.protocols import RouteQuotaPolicyProtocol
from bastion.schemas.organization import Organization
from bastion.schemas.route import Route


class AuthorizationService:
    """Enforces access decisions and route quotas."""

    def __init__(
        self,
        registry: PolicyRegistry,
        route_quota: RouteQuotaPolicyProtocol,
        logger: Optional[ContextualLogger] = None,
    ) -> None:
        """Initialize with a built policy registry and the route quota policy."""
        self._registry = registry
        self._route_quota = route_quota
        self._logger = (logger or default_logger).with_prefix("Authorization: ").with_context(
            component="authorization_service"
        )

    def is_allowed(self, context: RoleContext, operation: Operation, resource: Any) -> bool:
        """Whether the actor may perform ``operation`` on ``resource``."""
        policy = self._registry.policy_for_resource(resource)
        return policy.allows(Operation(operation), context, resource)

    def validate_access(self, context: RoleContext, operation: Operation, resource: Any) -> None:
        """Raise if the actor may not perform ``operation`` on ``resource``.

        A resource the actor cannot read is reported as not found for every
        operation except create, so denials do not leak its existence.

        Raises:
            NotFoundException: The resource is not visible to the actor.
            PermissionException: The resource is visible but the operation is denied.
        """
        operation = Operation(operation)
        policy = self._registry.policy_for_resource(resource)
        if policy.allows(operation, context, resource):
            return

        kind = kind_of(resource)
        log = self._logger.with_context(
            kind=kind.value,
            operation=operation.value,
            user_id=str(context.user_id) if context.user_id else None,
        )
        if operation != Operation.CREATE and not policy.can_read(context, resource):
            log.info(f"Denied {operation.value} on invisible {kind.value}")
            raise NotFoundException(f"{kind.name.replace('_', ' ').title()} not found")

        log.info(f"Denied {operation.value} on {kind.value}")
        raise PermissionException(
            f"User is not allowed to {operation.value} this {kind.value.replace('_', ' ')}"
        )

    def visibility_filter(
        self,
        context: RoleContext,
        kind: ResourceKind,
        existing: Optional[Filter] = None,
    ) -> Filter:
        """Visibility filter for ``kind``, ANDed with the caller's own filter."""
        access = self._registry.policy_for(kind).visibility_filter(context)
        return merge_filters(access, existing)

    async def validate_route_creation(
        self,
        db: AsyncSession,
        context: RoleContext,
        route: Route,
        organization: Organization,
        requested: int = 1,
    ) -> None:
        """Check create access on the route, then the organization's route quota.

        Raises:
            PermissionException: The actor may not create the route.
            QuotaExceededError: The organization has no routes left.
        """
        self.validate_access(context, Operation.CREATE, route)
        await self._route_quota.validate_route_create(db, organization, requested)
