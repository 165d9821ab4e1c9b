"""Unit tests for validation error translation.

Table-driven: (kind, errors, attributes) -> ErrorCode.
"""

from dataclasses import dataclass, field
from typing import Any

import pytest

from bastion.domains.quotas.exceptions import QuotaExceededError
from bastion.domains.validation.exceptions import TranslatedValidationError
from bastion.domains.validation.translators import (
    TRANSLATORS,
    failure_from_quota_error,
    translate_validation_failure,
)
from bastion.domains.validation.types import (
    ErrorCode,
    ValidationFailure,
    ValidationKind,
)


@dataclass
class TranslateCase:
    desc: str
    kind: ValidationKind
    errors: dict
    expect: ErrorCode
    attributes: dict[str, Any] = field(default_factory=dict)
    expect_in_message: str = ""


K = ValidationKind

CASES = [
    # organization
    TranslateCase(
        "org: quota definition not authorized",
        K.ORGANIZATION,
        {"quota_definition_id": ["not_authorized"]},
        ErrorCode.NOT_AUTHORIZED,
        {"quota_definition_id": "qd-1"},
        "qd-1",
    ),
    TranslateCase(
        "org: name taken",
        K.ORGANIZATION,
        {"name": ["unique"]},
        ErrorCode.ORGANIZATION_NAME_TAKEN,
        {"name": "acme"},
        "acme",
    ),
    TranslateCase(
        "org: not_authorized wins over unique name",
        K.ORGANIZATION,
        {"name": ["unique"], "quota_definition_id": ["not_authorized"]},
        ErrorCode.NOT_AUTHORIZED,
    ),
    TranslateCase(
        "org: other",
        K.ORGANIZATION,
        {"name": ["presence"]},
        ErrorCode.ORGANIZATION_INVALID,
        expect_in_message="name presence",
    ),
    # space
    TranslateCase(
        "space: name taken in org",
        K.SPACE,
        {("organization_id", "name"): ["unique"]},
        ErrorCode.SPACE_NAME_TAKEN,
        {"name": "dev"},
        "dev",
    ),
    TranslateCase("space: other", K.SPACE, {"name": ["presence"]}, ErrorCode.SPACE_INVALID),
    # managed service instance
    TranslateCase(
        "si: name taken in space",
        K.SERVICE_INSTANCE,
        {("space_id", "name"): ["unique"]},
        ErrorCode.SERVICE_INSTANCE_NAME_TAKEN,
        {"name": "db"},
        "db",
    ),
    TranslateCase(
        "si: free quota",
        K.SERVICE_INSTANCE,
        {"org": ["free_quota_exceeded"]},
        ErrorCode.SERVICE_INSTANCE_FREE_QUOTA_EXCEEDED,
    ),
    TranslateCase(
        "si: trial quota counts as free",
        K.SERVICE_INSTANCE,
        {"org": ["trial_quota_exceeded"]},
        ErrorCode.SERVICE_INSTANCE_FREE_QUOTA_EXCEEDED,
    ),
    TranslateCase(
        "si: paid quota",
        K.SERVICE_INSTANCE,
        {"org": ["paid_quota_exceeded"]},
        ErrorCode.SERVICE_INSTANCE_PAID_QUOTA_EXCEEDED,
    ),
    TranslateCase(
        "si: other org error",
        K.SERVICE_INSTANCE,
        {"org": ["presence"]},
        ErrorCode.SERVICE_INSTANCE_INVALID,
    ),
    TranslateCase(
        "si: service plan not allowed",
        K.SERVICE_INSTANCE,
        {"service_plan": ["paid_services_not_allowed"]},
        ErrorCode.SERVICE_INSTANCE_SERVICE_PLAN_NOT_ALLOWED,
    ),
    TranslateCase(
        "si: name too long",
        K.SERVICE_INSTANCE,
        {"name": ["max_length"]},
        ErrorCode.SERVICE_INSTANCE_NAME_TOO_LONG,
    ),
    TranslateCase(
        "si: name invalid",
        K.SERVICE_INSTANCE,
        {"name": ["format"]},
        ErrorCode.SERVICE_INSTANCE_NAME_INVALID,
        {"name": "bad name"},
        "bad name",
    ),
    TranslateCase(
        "si: unique name wins over quota",
        K.SERVICE_INSTANCE,
        {("space_id", "name"): ["unique"], "org": ["paid_quota_exceeded"]},
        ErrorCode.SERVICE_INSTANCE_NAME_TAKEN,
    ),
    TranslateCase(
        "si: other",
        K.SERVICE_INSTANCE,
        {"space": ["presence"]},
        ErrorCode.SERVICE_INSTANCE_INVALID,
    ),
    # user-provided service instance
    TranslateCase(
        "upsi: name taken",
        K.USER_PROVIDED_SERVICE_INSTANCE,
        {("space_id", "name"): ["unique"]},
        ErrorCode.SERVICE_INSTANCE_NAME_TAKEN,
    ),
    TranslateCase(
        "upsi: quota errors are not special",
        K.USER_PROVIDED_SERVICE_INSTANCE,
        {"org": ["paid_quota_exceeded"]},
        ErrorCode.SERVICE_INSTANCE_INVALID,
    ),
    # service plan
    TranslateCase(
        "plan: name taken for service",
        K.SERVICE_PLAN,
        {("service_id", "name"): ["unique"]},
        ErrorCode.SERVICE_PLAN_NAME_TAKEN,
        {"service_id": "svc", "name": "small"},
        "svc-small",
    ),
    TranslateCase(
        "plan: other", K.SERVICE_PLAN, {"free": ["presence"]}, ErrorCode.SERVICE_PLAN_INVALID
    ),
    # service plan visibility
    TranslateCase(
        "visibility: already exists",
        K.SERVICE_PLAN_VISIBILITY,
        {("organization_id", "service_plan_id"): ["unique"]},
        ErrorCode.SERVICE_PLAN_VISIBILITY_ALREADY_EXISTS,
        expect_in_message="organization_id and service_plan_id unique",
    ),
    TranslateCase(
        "visibility: other",
        K.SERVICE_PLAN_VISIBILITY,
        {"service_plan": ["presence"]},
        ErrorCode.SERVICE_PLAN_VISIBILITY_INVALID,
    ),
    # route
    TranslateCase(
        "route: total routes exceeded",
        K.ROUTE,
        {"organization": ["total_routes_exceeded"]},
        ErrorCode.ROUTE_TOTAL_ROUTES_EXCEEDED,
    ),
    TranslateCase(
        "route: host taken",
        K.ROUTE,
        {("host", "domain_id"): ["unique"]},
        ErrorCode.ROUTE_HOST_TAKEN,
        {"host": "www"},
        "www",
    ),
    TranslateCase("route: other", K.ROUTE, {"host": ["format"]}, ErrorCode.ROUTE_INVALID),
]


@pytest.mark.parametrize("case", CASES, ids=lambda c: c.desc)
def test_translate(case: TranslateCase):
    error = translate_validation_failure(case.kind, ValidationFailure(case.errors), case.attributes)

    assert isinstance(error, TranslatedValidationError)
    assert error.code == case.expect
    assert error.kind == case.kind.value
    assert case.expect_in_message in error.message


def test_every_kind_has_a_translator():
    assert set(TRANSLATORS) == set(ValidationKind)


def test_accepts_kind_strings():
    error = translate_validation_failure("route", ValidationFailure({"host": ["format"]}), {})
    assert error.code == ErrorCode.ROUTE_INVALID


def test_unknown_kind_raises_key_error():
    with pytest.raises(KeyError):
        translate_validation_failure("app", ValidationFailure(), {})


def test_duplicate_name_and_quota_stay_distinguishable():
    taken = translate_validation_failure(
        K.ROUTE, ValidationFailure({("host", "domain_id"): ["unique"]}), {"host": "www"}
    )
    exceeded = translate_validation_failure(
        K.ROUTE, ValidationFailure({"organization": ["total_routes_exceeded"]}), {}
    )
    assert taken.code != exceeded.code


def test_route_quota_error_translates_through_failure():
    quota_error = QuotaExceededError(
        quota_type="total_routes",
        symbol="total_routes_exceeded",
        limit=0,
        current_usage=0,
        requested=1,
    )
    failure = failure_from_quota_error(quota_error)

    assert failure.on("organization") == ["total_routes_exceeded"]
    error = translate_validation_failure(K.ROUTE, failure, {})
    assert error.code == ErrorCode.ROUTE_TOTAL_ROUTES_EXCEEDED


class TestValidationFailure:
    def test_on_returns_none_without_errors(self):
        failure = ValidationFailure({"name": []})
        assert failure.on("name") is None
        assert failure.on("missing") is None

    def test_compound_keys(self):
        failure = ValidationFailure({("space_id", "name"): ["unique"]})
        assert failure.has(("space_id", "name"), "unique") is True
        assert failure.has("name", "unique") is False
        assert failure.full_messages() == ["space_id and name unique"]
