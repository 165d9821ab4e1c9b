"""Validation domain types."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

FieldKey = Union[str, tuple[str, ...]]


class ValidationKind(str, Enum):
    """Resource kinds with a validation error translation."""

    ORGANIZATION = "organization"
    SPACE = "space"
    SERVICE_INSTANCE = "service_instance"
    USER_PROVIDED_SERVICE_INSTANCE = "user_provided_service_instance"
    SERVICE_PLAN = "service_plan"
    SERVICE_PLAN_VISIBILITY = "service_plan_visibility"
    ROUTE = "route"


class ErrorCode(str, Enum):
    """User-facing error classifications. Values are stable wire names."""

    NOT_AUTHORIZED = "NotAuthorized"

    ORGANIZATION_NAME_TAKEN = "OrganizationNameTaken"
    ORGANIZATION_INVALID = "OrganizationInvalid"

    SPACE_NAME_TAKEN = "SpaceNameTaken"
    SPACE_INVALID = "SpaceInvalid"

    SERVICE_INSTANCE_NAME_TAKEN = "ServiceInstanceNameTaken"
    SERVICE_INSTANCE_INVALID = "ServiceInstanceInvalid"
    SERVICE_INSTANCE_FREE_QUOTA_EXCEEDED = "ServiceInstanceFreeQuotaExceeded"
    SERVICE_INSTANCE_PAID_QUOTA_EXCEEDED = "ServiceInstancePaidQuotaExceeded"
    SERVICE_INSTANCE_SERVICE_PLAN_NOT_ALLOWED = "ServiceInstanceServicePlanNotAllowed"
    SERVICE_INSTANCE_NAME_TOO_LONG = "ServiceInstanceNameTooLong"
    SERVICE_INSTANCE_NAME_INVALID = "ServiceInstanceNameInvalid"

    SERVICE_PLAN_NAME_TAKEN = "ServicePlanNameTaken"
    SERVICE_PLAN_INVALID = "ServicePlanInvalid"

    SERVICE_PLAN_VISIBILITY_ALREADY_EXISTS = "ServicePlanVisibilityAlreadyExists"
    SERVICE_PLAN_VISIBILITY_INVALID = "ServicePlanVisibilityInvalid"

    ROUTE_HOST_TAKEN = "RouteHostTaken"
    ROUTE_INVALID = "RouteInvalid"
    ROUTE_TOTAL_ROUTES_EXCEEDED = "RouteTotalRoutesExceeded"


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.NOT_AUTHORIZED: "You are not authorized to perform the requested action: {}",
    ErrorCode.ORGANIZATION_NAME_TAKEN: "The organization name is taken: {}",
    ErrorCode.ORGANIZATION_INVALID: "The organization info is invalid: {}",
    ErrorCode.SPACE_NAME_TAKEN: "The app space name is taken: {}",
    ErrorCode.SPACE_INVALID: "The app space info is invalid: {}",
    ErrorCode.SERVICE_INSTANCE_NAME_TAKEN: "The service instance name is taken: {}",
    ErrorCode.SERVICE_INSTANCE_INVALID: "The service instance is invalid: {}",
    ErrorCode.SERVICE_INSTANCE_FREE_QUOTA_EXCEEDED: (
        "You have exceeded your organization's services limit."
    ),
    ErrorCode.SERVICE_INSTANCE_PAID_QUOTA_EXCEEDED: (
        "You have exceeded your organization's paid services limit."
    ),
    ErrorCode.SERVICE_INSTANCE_SERVICE_PLAN_NOT_ALLOWED: (
        "The service instance cannot be created because paid service plans are not allowed."
    ),
    ErrorCode.SERVICE_INSTANCE_NAME_TOO_LONG: (
        "You have requested an invalid service instance name. Names are limited to 50 characters."
    ),
    ErrorCode.SERVICE_INSTANCE_NAME_INVALID: "The service instance name is invalid: {}",
    ErrorCode.SERVICE_PLAN_NAME_TAKEN: "The service plan name is taken: {}",
    ErrorCode.SERVICE_PLAN_INVALID: "The service plan is invalid: {}",
    ErrorCode.SERVICE_PLAN_VISIBILITY_ALREADY_EXISTS: (
        "This combination of service plan and organization is already taken: {}"
    ),
    ErrorCode.SERVICE_PLAN_VISIBILITY_INVALID: "Service plan visibility is invalid: {}",
    ErrorCode.ROUTE_HOST_TAKEN: "The host is taken: {}",
    ErrorCode.ROUTE_INVALID: "The route is invalid: {}",
    ErrorCode.ROUTE_TOTAL_ROUTES_EXCEEDED: (
        "You have exceeded the total routes for your organization's quota."
    ),
}


@dataclass(frozen=True)
class ValidationFailure:
    """Validation errors reported by the persistence layer.

    ``errors`` maps a field, or a tuple of fields for compound constraints,
    to the error symbols raised on it:

        ValidationFailure({("space_id", "name"): ["unique"]})
    """

    errors: dict[FieldKey, list[str]] = field(default_factory=dict)

    def on(self, key: FieldKey) -> Optional[list[str]]:
        """Errors on a field or field tuple, or ``None`` when there are none."""
        return self.errors.get(key) or None

    def has(self, key: FieldKey, symbol: str) -> bool:
        """Whether ``symbol`` was raised on ``key``."""
        return symbol in (self.on(key) or [])

    def full_messages(self) -> list[str]:
        """Readable ``"field symbol"`` messages, compound keys joined with "and"."""
        messages = []
        for key, symbols in self.errors.items():
            name = " and ".join(key) if isinstance(key, tuple) else key
            messages.extend(f"{name} {symbol}" for symbol in symbols)
        return messages
