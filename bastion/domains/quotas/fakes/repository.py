"""Fake quota count repositories for testing."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from bastion.schemas.app import App


class FakeRouteCountRepository:
    """In-memory fake for RouteCountRepositoryProtocol."""

    def __init__(self, default_count: int = 0) -> None:
        """Initialize with configurable counts and call log."""
        self._counts: dict[UUID, int] = {}
        self._default_count = default_count
        self._calls: list[tuple] = []

    def set_count(self, organization_id: UUID, count: int) -> None:
        """Set the route count for a given organization."""
        self._counts[organization_id] = count

    def call_count(self, method: str) -> int:
        """Return the number of times a method was called."""
        return sum(1 for name, *_ in self._calls if name == method)

    async def count_by_organization(self, db: AsyncSession, organization_id: UUID) -> int:
        """Return the seeded route count for the organization."""
        self._calls.append(("count_by_organization", db, organization_id))
        return self._counts.get(organization_id, self._default_count)


class FakeAppMemoryRepository:
    """In-memory fake for AppMemoryRepositoryProtocol."""

    def __init__(self) -> None:
        """Initialize with empty store and call log."""
        self._apps: dict[UUID, list[App]] = {}
        self._calls: list[tuple] = []

    def seed(self, organization_id: UUID, app: App) -> None:
        """Add an app to the organization."""
        self._apps.setdefault(organization_id, []).append(app)

    async def memory_in_use(self, db: AsyncSession, organization_id: UUID) -> int:
        """Sum memory * instances over the seeded apps."""
        self._calls.append(("memory_in_use", db, organization_id))
        return sum(app.memory * app.instances for app in self._apps.get(organization_id, []))
