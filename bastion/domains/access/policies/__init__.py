"""Per-kind access policies."""

from bastion.domains.access.policies._base import ADMIN_ONLY, AccessRules, BaseAccess
from bastion.domains.access.policies.domain import DomainAccess
from bastion.domains.access.policies.rules import KIND_RULES

__all__ = [
    "ADMIN_ONLY",
    "AccessRules",
    "BaseAccess",
    "DomainAccess",
    "KIND_RULES",
]
