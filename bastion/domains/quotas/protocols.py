"""Quota domain protocols.

RouteCountRepositoryProtocol / AppMemoryRepositoryProtocol: aggregate counts
computed by the persistence layer.
RouteQuotaPolicyProtocol / MemoryQuotaPolicyProtocol: singleton checks
consulted on the creation path.
"""

from typing import Protocol, runtime_checkable
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from bastion.schemas.organization import Organization


class RouteCountRepositoryProtocol(Protocol):
    """Counts the routes owned by an organization."""

    async def count_by_organization(self, db: AsyncSession, organization_id: UUID) -> int:
        """Number of routes across all spaces of the organization."""
        ...


class AppMemoryRepositoryProtocol(Protocol):
    """Sums app memory reservations of an organization."""

    async def memory_in_use(self, db: AsyncSession, organization_id: UUID) -> int:
        """Sum of ``memory * instances`` over the organization's apps, in MB."""
        ...


@runtime_checkable
class RouteQuotaPolicyProtocol(Protocol):
    """Route-count quota.

    Advisory at check time: two concurrent creations can both pass.
    """

    async def allow_more_routes(
        self, db: AsyncSession, organization: Organization, requested: int = 1
    ) -> bool:
        """Whether ``requested`` more routes fit. Never raises; negative requests never fit."""
        ...

    async def validate_route_create(
        self, db: AsyncSession, organization: Organization, requested: int = 1
    ) -> None:
        """Raise QuotaExceededError if the routes do not fit."""
        ...


@runtime_checkable
class MemoryQuotaPolicyProtocol(Protocol):
    """Memory quota."""

    async def memory_remaining(self, db: AsyncSession, organization: Organization) -> int:
        """Memory left under the organization's limit, in MB."""
        ...

    async def allow_more_memory(
        self, db: AsyncSession, organization: Organization, requested_mb: int
    ) -> bool:
        """Whether ``requested_mb`` more memory fits. Never raises; negative requests never fit."""
        ...

    async def validate_memory(
        self, db: AsyncSession, organization: Organization, requested_mb: int
    ) -> None:
        """Raise QuotaExceededError if the memory does not fit."""
        ...
