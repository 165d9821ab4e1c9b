"""Quota domain types and pure business logic.

Constants, enums, and pure functions used by the quota policies. No IO;
everything here is deterministic.
"""

from enum import Enum

from bastion.schemas.organization import UNLIMITED


class QuotaType(str, Enum):
    """Quota dimensions enforced on resource creation."""

    ROUTES = "total_routes"
    MEMORY = "memory"


# Error symbols recorded against the organization when a quota check fails.
TOTAL_ROUTES_EXCEEDED = "total_routes_exceeded"
MEMORY_QUOTA_EXCEEDED = "memory_quota_exceeded"


def is_valid_request(requested: int) -> bool:
    """Whether a requested amount is usable. Negative amounts never fit."""
    return requested >= 0


def check_requested(requested: int) -> None:
    """Reject negative requested amounts (caller error)."""
    if requested < 0:
        raise ValueError(f"Requested amount must be >= 0, got {requested}")


def routes_allowed(total_routes: int, current: int, requested: int) -> bool:
    """Whether ``requested`` more routes fit under ``total_routes``."""
    if total_routes == UNLIMITED:
        return True
    return total_routes >= current + requested


def memory_remaining(memory_limit: int, in_use: int) -> int:
    """Memory left under the limit. Negative when the org is already over."""
    return memory_limit - in_use
