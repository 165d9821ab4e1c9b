"""Per-kind access rules.

Each entry is an authoritative fixture: the rows do not follow from a single
role hierarchy and are kept exactly as listed. Role checks are not transitive:
an organization manager gets no space-developer rights, and plain organization
membership grants nothing on space-scoped resources.
"""

from bastion.domains.access.policies._base import ADMIN_ONLY, AccessRules
from bastion.domains.access.types import (
    ORG_AUDITOR,
    ORG_BILLING_MANAGER,
    ORG_MANAGER,
    ORG_MEMBER,
    SPACE_AUDITOR,
    SPACE_DEVELOPER,
    SPACE_MANAGER,
    ResourceKind,
)

# Readers of anything that lives in a space.
_SPACE_READERS = frozenset({ORG_MANAGER, SPACE_DEVELOPER, SPACE_MANAGER, SPACE_AUDITOR})

_SPACE_DEVELOPER_WRITES = AccessRules(
    create=frozenset({SPACE_DEVELOPER}),
    read=_SPACE_READERS,
    update=frozenset({SPACE_DEVELOPER}),
    delete=frozenset({SPACE_DEVELOPER}),
)

APP_RULES = _SPACE_DEVELOPER_WRITES

ROUTE_RULES = _SPACE_DEVELOPER_WRITES

SERVICE_INSTANCE_RULES = _SPACE_DEVELOPER_WRITES

# Events are system generated; only space developers and auditors see them.
EVENT_RULES = AccessRules(read=frozenset({SPACE_DEVELOPER, SPACE_AUDITOR}))

# Catalog entries are readable by any logged-in actor.
SERVICE_RULES = AccessRules(authenticated_read=True)

# Create and delete share one predicate, evaluated on the app's space.
# No role may update a binding.
SERVICE_BINDING_RULES = AccessRules(
    create=frozenset({SPACE_DEVELOPER}),
    read=frozenset({SPACE_DEVELOPER}),
    delete=None,
)

# Tasks are reachable through their app.
TASK_RULES = AccessRules(
    create=frozenset({SPACE_DEVELOPER}),
    read=_SPACE_READERS,
    delete=None,
)

SPACE_RULES = AccessRules(
    create=frozenset({ORG_MANAGER}),
    read=_SPACE_READERS,
    update=frozenset({ORG_MANAGER, SPACE_MANAGER}),
    delete=None,
)

ORGANIZATION_RULES = AccessRules(
    read=frozenset({ORG_MANAGER, ORG_AUDITOR, ORG_BILLING_MANAGER, ORG_MEMBER}),
    update=frozenset({ORG_MANAGER}),
)

PRIVATE_DOMAIN_RULES = AccessRules(
    create=frozenset({ORG_MANAGER}),
    read=frozenset({ORG_MANAGER, ORG_AUDITOR}),
    update=frozenset({ORG_MANAGER}),
    delete=None,
)

# The only kind readable by anonymous actors.
SHARED_DOMAIN_RULES = AccessRules(public_read=True)

BILLING_EVENT_RULES = ADMIN_ONLY

KIND_RULES: dict[ResourceKind, AccessRules] = {
    ResourceKind.ORGANIZATION: ORGANIZATION_RULES,
    ResourceKind.SPACE: SPACE_RULES,
    ResourceKind.APP: APP_RULES,
    ResourceKind.EVENT: EVENT_RULES,
    ResourceKind.SERVICE: SERVICE_RULES,
    ResourceKind.SERVICE_INSTANCE: SERVICE_INSTANCE_RULES,
    ResourceKind.SERVICE_BINDING: SERVICE_BINDING_RULES,
    ResourceKind.ROUTE: ROUTE_RULES,
    ResourceKind.TASK: TASK_RULES,
    ResourceKind.BILLING_EVENT: BILLING_EVENT_RULES,
}
"""Kinds served by a plain ``BaseAccess``; ``domain`` has its own policy."""
