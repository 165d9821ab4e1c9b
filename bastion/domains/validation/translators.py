"""Per-kind validation error translators.

Each translator maps a ``ValidationFailure`` plus the request attributes onto
a ``TranslatedValidationError``. Checks run in a fixed order and the first
match wins; anything unrecognised falls through to the kind's "invalid" code
carrying the full error messages.
"""

from typing import Any, Callable, Mapping, Union

from bastion.core.logging import logger
from bastion.domains.quotas.exceptions import QuotaExceededError
from bastion.domains.validation.exceptions import TranslatedValidationError
from bastion.domains.validation.types import ErrorCode, ValidationFailure, ValidationKind

Translator = Callable[[ValidationFailure, Mapping[str, Any]], TranslatedValidationError]

translation_logger = logger.with_prefix("ValidationTranslator: ").with_context(
    component="validation_translator"
)


def _error(code: ErrorCode, detail: Any = None) -> TranslatedValidationError:
    return TranslatedValidationError(code, detail)


def translate_organization(
    failure: ValidationFailure, attributes: Mapping[str, Any]
) -> TranslatedValidationError:
    """Organization create/update failures."""
    if failure.has("quota_definition_id", "not_authorized"):
        return _error(ErrorCode.NOT_AUTHORIZED, attributes.get("quota_definition_id"))
    if failure.has("name", "unique"):
        return _error(ErrorCode.ORGANIZATION_NAME_TAKEN, attributes.get("name"))
    return _error(ErrorCode.ORGANIZATION_INVALID, failure.full_messages())


def translate_space(
    failure: ValidationFailure, attributes: Mapping[str, Any]
) -> TranslatedValidationError:
    """Space create/update failures."""
    if failure.has(("organization_id", "name"), "unique"):
        return _error(ErrorCode.SPACE_NAME_TAKEN, attributes.get("name"))
    return _error(ErrorCode.SPACE_INVALID, failure.full_messages())


def translate_service_instance(
    failure: ValidationFailure, attributes: Mapping[str, Any]
) -> TranslatedValidationError:
    """Managed service instance failures."""
    if failure.has(("space_id", "name"), "unique"):
        return _error(ErrorCode.SERVICE_INSTANCE_NAME_TAKEN, attributes.get("name"))

    quota_errors = failure.on("org")
    if quota_errors:
        if "free_quota_exceeded" in quota_errors or "trial_quota_exceeded" in quota_errors:
            return _error(ErrorCode.SERVICE_INSTANCE_FREE_QUOTA_EXCEEDED)
        if "paid_quota_exceeded" in quota_errors:
            return _error(ErrorCode.SERVICE_INSTANCE_PAID_QUOTA_EXCEEDED)
        return _error(ErrorCode.SERVICE_INSTANCE_INVALID, failure.full_messages())

    if failure.on("service_plan"):
        return _error(ErrorCode.SERVICE_INSTANCE_SERVICE_PLAN_NOT_ALLOWED)

    name_errors = failure.on("name")
    if name_errors:
        if "max_length" in name_errors:
            return _error(ErrorCode.SERVICE_INSTANCE_NAME_TOO_LONG)
        return _error(ErrorCode.SERVICE_INSTANCE_NAME_INVALID, attributes.get("name"))

    return _error(ErrorCode.SERVICE_INSTANCE_INVALID, failure.full_messages())


def translate_user_provided_service_instance(
    failure: ValidationFailure, attributes: Mapping[str, Any]
) -> TranslatedValidationError:
    """User-provided service instance failures."""
    if failure.has(("space_id", "name"), "unique"):
        return _error(ErrorCode.SERVICE_INSTANCE_NAME_TAKEN, attributes.get("name"))
    return _error(ErrorCode.SERVICE_INSTANCE_INVALID, failure.full_messages())


def translate_service_plan(
    failure: ValidationFailure, attributes: Mapping[str, Any]
) -> TranslatedValidationError:
    """Service plan failures."""
    if failure.has(("service_id", "name"), "unique"):
        return _error(
            ErrorCode.SERVICE_PLAN_NAME_TAKEN,
            f"{attributes.get('service_id')}-{attributes.get('name')}",
        )
    return _error(ErrorCode.SERVICE_PLAN_INVALID, failure.full_messages())


def translate_service_plan_visibility(
    failure: ValidationFailure, attributes: Mapping[str, Any]
) -> TranslatedValidationError:
    """Service plan visibility failures."""
    if failure.has(("organization_id", "service_plan_id"), "unique"):
        return _error(ErrorCode.SERVICE_PLAN_VISIBILITY_ALREADY_EXISTS, failure.full_messages())
    return _error(ErrorCode.SERVICE_PLAN_VISIBILITY_INVALID, failure.full_messages())


def translate_route(
    failure: ValidationFailure, attributes: Mapping[str, Any]
) -> TranslatedValidationError:
    """Route failures, including the route quota."""
    if failure.has("organization", "total_routes_exceeded"):
        return _error(ErrorCode.ROUTE_TOTAL_ROUTES_EXCEEDED)
    if failure.has(("host", "domain_id"), "unique"):
        return _error(ErrorCode.ROUTE_HOST_TAKEN, attributes.get("host"))
    return _error(ErrorCode.ROUTE_INVALID, failure.full_messages())


TRANSLATORS: dict[ValidationKind, Translator] = {
    ValidationKind.ORGANIZATION: translate_organization,
    ValidationKind.SPACE: translate_space,
    ValidationKind.SERVICE_INSTANCE: translate_service_instance,
    ValidationKind.USER_PROVIDED_SERVICE_INSTANCE: translate_user_provided_service_instance,
    ValidationKind.SERVICE_PLAN: translate_service_plan,
    ValidationKind.SERVICE_PLAN_VISIBILITY: translate_service_plan_visibility,
    ValidationKind.ROUTE: translate_route,
}


def translate_validation_failure(
    kind: Union[ValidationKind, str],
    failure: ValidationFailure,
    attributes: Mapping[str, Any],
) -> TranslatedValidationError:
    """Translate a validation failure for ``kind``.

    Raises:
        KeyError: If no translator exists for the kind (a wiring error).
    """
    try:
        translator = TRANSLATORS[ValidationKind(kind)]
    except ValueError as e:
        raise KeyError(f"No validation translator for kind '{kind}'") from e

    error = translator(failure, attributes)
    error.kind = ValidationKind(kind).value
    translation_logger.with_context(kind=error.kind).debug(
        f"Translated {failure.full_messages()} to {error.code.value}"
    )
    return error


def failure_from_quota_error(error: QuotaExceededError) -> ValidationFailure:
    """Express a quota error the way the persistence layer reports it."""
    return ValidationFailure({error.field: [error.symbol]})
