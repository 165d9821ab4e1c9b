"""Fake route quota policy for testing.

Always allows routes unless explicitly configured to deny.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from bastion.domains.quotas.exceptions import QuotaExceededError
from bastion.domains.quotas.protocols import RouteQuotaPolicyProtocol
from bastion.domains.quotas.types import TOTAL_ROUTES_EXCEEDED, QuotaType
from bastion.schemas.organization import Organization


class FakeRouteQuotaPolicy(RouteQuotaPolicyProtocol):
    """Test implementation of RouteQuotaPolicyProtocol.

    By default every check passes. Call ``deny(org_id)`` to make checks for
    that organization fail.

    Usage:
        policy = FakeRouteQuotaPolicy()
        policy.deny(org.id)

        allowed = await policy.allow_more_routes(db, org)
        assert not allowed
    """

    def __init__(self) -> None:
        """Initialize with empty deny set and call log."""
        self._denied: set[UUID] = set()
        self.calls: list[tuple[UUID, int]] = []

    def deny(self, organization_id: UUID) -> None:
        """Configure an organization to be denied."""
        self._denied.add(organization_id)

    def allow_all(self) -> None:
        """Reset to default allow-all behaviour."""
        self._denied.clear()

    async def allow_more_routes(
        self, db: AsyncSession, organization: Organization, requested: int = 1
    ) -> bool:
        """Return True unless the organization was explicitly denied."""
        self.calls.append((organization.id, requested))
        return organization.id not in self._denied

    async def validate_route_create(
        self, db: AsyncSession, organization: Organization, requested: int = 1
    ) -> None:
        """Raise QuotaExceededError for denied organizations."""
        if not await self.allow_more_routes(db, organization, requested):
            raise QuotaExceededError(
                quota_type=QuotaType.ROUTES.value,
                symbol=TOTAL_ROUTES_EXCEEDED,
                limit=organization.quota_definition.total_routes,
                current_usage=organization.quota_definition.total_routes,
                requested=requested,
            )
