"""Quota domain exceptions."""

from typing import Optional

from bastion.core.exceptions import InvalidStateError


class QuotaExceededError(InvalidStateError):
    """Raised when a creation would exceed the organization's quota.

    ``field`` and ``symbol`` identify the failure the way the persistence
    layer reports validation errors, e.g. ``organization: total_routes_exceeded``.
    """

    def __init__(
        self,
        quota_type: str,
        symbol: str,
        limit: int,
        current_usage: int,
        requested: int,
        field: str = "organization",
        message: Optional[str] = None,
    ) -> None:
        """Initialize with quota type, limit, and current usage."""
        if message is None:
            message = (
                f"Quota exceeded for {quota_type}: {current_usage} + {requested} > {limit}"
            )
        self.quota_type = quota_type
        self.symbol = symbol
        self.limit = limit
        self.current_usage = current_usage
        self.requested = requested
        self.field = field
        super().__init__(message)
