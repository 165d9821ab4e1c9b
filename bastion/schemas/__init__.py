"""Resource schemas consumed by the authorization engine."""

from bastion.schemas.app import App
from bastion.schemas.billing_event import BillingEvent
from bastion.schemas.domain import Domain, PrivateDomain, SharedDomain
from bastion.schemas.event import Event
from bastion.schemas.organization import Organization, OrganizationRef, QuotaDefinition
from bastion.schemas.route import Route
from bastion.schemas.service import Service, ServiceBinding, ServiceInstance
from bastion.schemas.space import Space, SpaceRef
from bastion.schemas.task import Task

__all__ = [
    "App",
    "BillingEvent",
    "Domain",
    "Event",
    "Organization",
    "OrganizationRef",
    "PrivateDomain",
    "QuotaDefinition",
    "Route",
    "Service",
    "ServiceBinding",
    "ServiceInstance",
    "SharedDomain",
    "Space",
    "SpaceRef",
    "Task",
]
