"""Conversion of arbitrary raised values into the error taxonomy.

Every helper here is total: it accepts any value, including non-exceptions,
and never raises.
"""

from __future__ import annotations

from collections.abc import Sequence
from http import HTTPStatus
from typing import Any

from fastapi import status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.exc import NoResultFound
from starlette.exceptions import HTTPException as StarletteHTTPException

from proofing.core.errors.base import GENERIC_CLIENT_MESSAGE
from proofing.core.errors.base import MAX_ERROR_STATUS
from proofing.core.errors.base import MIN_ERROR_STATUS
from proofing.core.errors.base import BaseError
from proofing.core.errors.conflict import ConflictError
from proofing.core.errors.not_found import NotFoundError
from proofing.core.errors.validation import ValidationError
from proofing.core.errors.validation import format_issue_path

REQUEST_LOCATION_PREFIXES = frozenset({"body", "query", "path", "header", "cookie"})


def is_base_error(error: object) -> bool:
    return isinstance(error, BaseError)


def is_validation_error(error: object) -> bool:
    return isinstance(error, ValidationError)


def _safe_str(value: object) -> str:
    try:
        return str(value)
    except Exception:  # noqa: BLE001
        return f"<unprintable {type(value).__name__}>"


def _format_location(location: Sequence[Any] | Any) -> str:
    if not isinstance(location, (tuple, list)):
        return str(location)

    filtered = [part for part in location if part not in REQUEST_LOCATION_PREFIXES]
    if filtered:
        return format_issue_path(filtered)

    if not location:
        return "request"

    return str(location[0])


def _request_validation_error(exc: RequestValidationError) -> ValidationError:
    fields: dict[str, list[str]] = {}
    for issue in exc.errors():
        field = _format_location(issue.get("loc", ()))
        fields.setdefault(field, []).append(str(issue.get("msg", "Invalid value")))
    return ValidationError(fields or {"request": ["Invalid request"]})


def _http_exception_error(exc: StarletteHTTPException) -> BaseError | None:
    if not MIN_ERROR_STATUS <= exc.status_code <= MAX_ERROR_STATUS:
        return None

    if isinstance(exc.detail, str) and exc.detail:
        message = exc.detail
    else:
        try:
            message = HTTPStatus(exc.status_code).phrase
        except ValueError:
            message = "Request failed"

    is_operational = exc.status_code < status.HTTP_500_INTERNAL_SERVER_ERROR
    return BaseError(message, exc.status_code, is_operational)


def _unexpected_error(exc: BaseException) -> BaseError:
    message = _safe_str(exc) or GENERIC_CLIENT_MESSAGE
    wrapped = BaseError(
        message,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        False,
        {"original_error": type(exc).__name__},
    )
    wrapped.__cause__ = exc
    return wrapped


def to_base_error(error: object) -> BaseError:
    """Map any raised value to exactly one taxonomy error.

    Taxonomy errors are returned unchanged. Recognized library errors
    (pydantic and FastAPI validation, Starlette HTTP errors, SQLAlchemy
    lookup and integrity errors) become their operational counterparts.
    Anything else becomes a non-operational 500.
    """
    if isinstance(error, BaseError):
        return error

    if isinstance(error, PydanticValidationError):
        converted: BaseError = ValidationError.from_issues(error.errors())
    elif isinstance(error, RequestValidationError):
        converted = _request_validation_error(error)
    elif isinstance(error, NoResultFound):
        converted = NotFoundError("Record")
    elif isinstance(error, IntegrityError):
        converted = ConflictError(context={"original_error": type(error).__name__})
    elif isinstance(error, StarletteHTTPException):
        converted = _http_exception_error(error) or _unexpected_error(error)
    elif isinstance(error, BaseException):
        return _unexpected_error(error)
    else:
        return BaseError(
            GENERIC_CLIENT_MESSAGE,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            False,
            {"original_error": _safe_str(error)},
        )

    converted.__cause__ = error
    return converted


def get_error_status_code(error: object) -> int:
    return to_base_error(error).status_code


def serialize_error_for_logging(error: object) -> dict[str, Any]:
    """Log record for any raised value, stack trace included."""
    return to_base_error(error).serialize_for_log()


def serialize_error_for_client(error: object, include_details: bool = False) -> dict[str, Any]:
    """Client-safe body for any raised value."""
    return to_base_error(error).serialize_for_client(include_details)


def should_log_error(error: object) -> bool:
    """Only non-operational errors are logged by default."""
    return not to_base_error(error).is_operational


def get_client_error_message(error: object, include_details: bool = False) -> str:
    return to_base_error(error).get_client_message(include_details)
