"""Hierarchy resolution for resources.

Turns a resource schema into the optional (space, organization) pair the
policies evaluate role grants against. A missing or destroyed parent always
resolves to ``None``; nothing here raises for a dangling reference.
"""

from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from bastion import schemas
from bastion.domains.access.types import ResourceKind


class HierarchyRef(BaseModel):
    """Resolved owning space and organization of a resource."""

    space_id: Optional[UUID] = None
    organization_id: Optional[UUID] = None

    model_config = ConfigDict(frozen=True)


EMPTY_HIERARCHY = HierarchyRef()

# Subclasses (PrivateDomain, SharedDomain) resolve through their MRO.
_RESOURCE_KINDS: dict[type, ResourceKind] = {
    schemas.Organization: ResourceKind.ORGANIZATION,
    schemas.Space: ResourceKind.SPACE,
    schemas.App: ResourceKind.APP,
    schemas.Event: ResourceKind.EVENT,
    schemas.Service: ResourceKind.SERVICE,
    schemas.ServiceInstance: ResourceKind.SERVICE_INSTANCE,
    schemas.ServiceBinding: ResourceKind.SERVICE_BINDING,
    schemas.Domain: ResourceKind.DOMAIN,
    schemas.Route: ResourceKind.ROUTE,
    schemas.Task: ResourceKind.TASK,
    schemas.BillingEvent: ResourceKind.BILLING_EVENT,
}


def kind_of(resource: Any) -> ResourceKind:
    """Return the resource kind for a schema instance.

    Raises:
        KeyError: If the resource type is not a known resource schema.
    """
    for cls in type(resource).__mro__:
        if cls in _RESOURCE_KINDS:
            return _RESOURCE_KINDS[cls]
    raise KeyError(f"Unknown resource type: {type(resource).__name__}")


def _from_space(space: Optional[schemas.SpaceRef]) -> HierarchyRef:
    if space is None or space.is_deleted:
        return EMPTY_HIERARCHY
    return HierarchyRef(space_id=space.id, organization_id=space.organization_id)


def _from_app(app: Optional[schemas.App]) -> HierarchyRef:
    if app is None:
        return EMPTY_HIERARCHY
    return _from_space(app.space)


class DefaultHierarchyResolver:
    """Resolves hierarchy references from the schema objects themselves.

    Bindings and tasks resolve through their app: a binding is authorized
    against the app's space even if its service instance lives elsewhere.
    """

    def resolve(self, resource: Any) -> HierarchyRef:
        """Resolve the owning space and organization of ``resource``."""
        if isinstance(resource, schemas.Organization):
            return HierarchyRef(organization_id=resource.id)
        if isinstance(resource, schemas.Space):
            return HierarchyRef(space_id=resource.id, organization_id=resource.organization_id)
        if isinstance(resource, (schemas.ServiceBinding, schemas.Task)):
            return _from_app(resource.app)
        if isinstance(
            resource, (schemas.App, schemas.Event, schemas.Route, schemas.ServiceInstance)
        ):
            return _from_space(resource.space)
        if isinstance(resource, schemas.Domain):
            owner = resource.owning_organization
            if owner is None or owner.is_deleted:
                return EMPTY_HIERARCHY
            return HierarchyRef(organization_id=owner.id)
        if isinstance(resource, schemas.BillingEvent):
            return HierarchyRef(organization_id=resource.organization_id)
        return EMPTY_HIERARCHY

    def fields(self, resource: Any) -> dict[str, Any]:
        """Logical field view of ``resource`` used to evaluate visibility filters."""
        hierarchy = self.resolve(resource)
        return {
            "id": getattr(resource, "id", None),
            "space_id": hierarchy.space_id,
            "organization_id": hierarchy.organization_id,
            "is_shared": getattr(resource, "is_shared", None),
        }
