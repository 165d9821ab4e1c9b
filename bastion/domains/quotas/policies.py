"""Quota policies: singleton, read-only invariant checks.

One instance of each lives in the container. Organization state is read per
call; nothing is cached, so a check reflects the counts at call time only.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from bastion.core.logging import logger
from bastion.domains.quotas.exceptions import QuotaExceededError
from bastion.domains.quotas.protocols import (
    AppMemoryRepositoryProtocol,
    MemoryQuotaPolicyProtocol,
    RouteCountRepositoryProtocol,
    RouteQuotaPolicyProtocol,
)
from bastion.domains.quotas.types import (
    MEMORY_QUOTA_EXCEEDED,
    TOTAL_ROUTES_EXCEEDED,
    QuotaType,
    check_requested,
    is_valid_request,
    memory_remaining,
    routes_allowed,
)
from bastion.schemas.organization import Organization

quota_logger = logger.with_prefix("Quota: ").with_context(component="quota_policy")


class MaxRoutesPolicy(RouteQuotaPolicyProtocol):
    """Route-count quota backed by a live count query."""

    def __init__(self, route_counter: RouteCountRepositoryProtocol) -> None:
        """Initialize with the route count repository."""
        self._route_counter = route_counter

    async def allow_more_routes(
        self, db: AsyncSession, organization: Organization, requested: int = 1
    ) -> bool:
        """Check whether ``requested`` more routes fit in the quota.

        Unlimited quotas (``total_routes == -1``) skip the count query. A
        negative request never fits.
        """
        if not is_valid_request(requested):
            return False
        quota = organization.quota_definition
        if quota.unlimited_routes:
            return True

        current = await self._route_counter.count_by_organization(db, organization.id)
        return routes_allowed(quota.total_routes, current, requested)

    async def validate_route_create(
        self, db: AsyncSession, organization: Organization, requested: int = 1
    ) -> None:
        """Raise QuotaExceededError if the new routes do not fit.

        Only called for new routes; existing routes are never re-checked.

        Raises:
            ValueError: If ``requested`` is negative.
            QuotaExceededError: If the routes do not fit.
        """
        check_requested(requested)
        quota = organization.quota_definition
        if quota.unlimited_routes:
            return

        current = await self._route_counter.count_by_organization(db, organization.id)
        if routes_allowed(quota.total_routes, current, requested):
            return

        quota_logger.with_context(organization_id=str(organization.id)).info(
            f"Route quota exceeded: {current} + {requested} > {quota.total_routes}"
        )
        raise QuotaExceededError(
            quota_type=QuotaType.ROUTES.value,
            symbol=TOTAL_ROUTES_EXCEEDED,
            limit=quota.total_routes,
            current_usage=current,
            requested=requested,
        )


class MaxMemoryPolicy(MemoryQuotaPolicyProtocol):
    """Memory quota: the limit minus the memory reserved by running apps."""

    def __init__(self, memory_repo: AppMemoryRepositoryProtocol) -> None:
        """Initialize with the app memory repository."""
        self._memory_repo = memory_repo

    async def memory_remaining(self, db: AsyncSession, organization: Organization) -> int:
        """Memory left under the organization's limit, in MB."""
        in_use = await self._memory_repo.memory_in_use(db, organization.id)
        return memory_remaining(organization.quota_definition.memory_limit, in_use)

    async def allow_more_memory(
        self, db: AsyncSession, organization: Organization, requested_mb: int
    ) -> bool:
        """Check whether ``requested_mb`` more memory fits. A negative request never fits."""
        if not is_valid_request(requested_mb):
            return False
        return requested_mb <= await self.memory_remaining(db, organization)

    async def validate_memory(
        self, db: AsyncSession, organization: Organization, requested_mb: int
    ) -> None:
        """Raise QuotaExceededError if the memory does not fit."""
        check_requested(requested_mb)
        limit = organization.quota_definition.memory_limit
        remaining = await self.memory_remaining(db, organization)
        if requested_mb <= remaining:
            return

        quota_logger.with_context(organization_id=str(organization.id)).info(
            f"Memory quota exceeded: requested {requested_mb}MB, {remaining}MB remaining"
        )
        raise QuotaExceededError(
            quota_type=QuotaType.MEMORY.value,
            symbol=MEMORY_QUOTA_EXCEEDED,
            limit=limit,
            current_usage=limit - remaining,
            requested=requested_mb,
        )


class AlwaysAllowRoutesPolicy(RouteQuotaPolicyProtocol):
    """No-op route quota for local development."""

    async def allow_more_routes(
        self, db: AsyncSession, organization: Organization, requested: int = 1
    ) -> bool:
        """Allow any non-negative request; no enforcement."""
        return is_valid_request(requested)

    async def validate_route_create(
        self, db: AsyncSession, organization: Organization, requested: int = 1
    ) -> None:
        """Raises ValueError for a negative request, never QuotaExceededError."""
        check_requested(requested)


class AlwaysAllowMemoryPolicy(MemoryQuotaPolicyProtocol):
    """No-op memory quota for local development."""

    async def memory_remaining(self, db: AsyncSession, organization: Organization) -> int:
        """The full limit; usage is not tracked."""
        return organization.quota_definition.memory_limit

    async def allow_more_memory(
        self, db: AsyncSession, organization: Organization, requested_mb: int
    ) -> bool:
        """Allow any non-negative request; no enforcement."""
        return is_valid_request(requested_mb)

    async def validate_memory(
        self, db: AsyncSession, organization: Organization, requested_mb: int
    ) -> None:
        """Raises ValueError for a negative request, never QuotaExceededError."""
        check_requested(requested_mb)
