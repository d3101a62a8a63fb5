"""Logging helpers that write taxonomy errors as structured log records."""

from __future__ import annotations

from collections.abc import Callable
import logging
from typing import Any

from fastapi import status
from pydantic_core import to_jsonable_python

from proofing.core.errors.utils import should_log_error
from proofing.core.errors.utils import to_base_error
from proofing.schemas.error import ErrorLogRecord


def log_error_at_level(logger: logging.Logger, level: int, error: object, **context: Any) -> None:
    """Log ``error`` at ``level`` with its serialized record attached as ``extra``."""
    base_error = to_base_error(error)
    record = ErrorLogRecord.model_validate(base_error.serialize_for_log())
    logger.log(
        level,
        "%s: %s",
        base_error.name,
        base_error.message,
        exc_info=base_error if level >= logging.ERROR else None,
        extra={
            "error_record": to_jsonable_python(record, by_alias=True, exclude_none=True, fallback=str),
            "request_context": context,
        },
    )


def log_error(logger: logging.Logger, error: object, **context: Any) -> None:
    """Log ``error`` at a level derived from its classification.

    Errors that do not need logging (operational ones) go to DEBUG. The rest
    are logged at ERROR for server failures and WARNING for client failures.
    """
    if not should_log_error(error):
        log_error_at_level(logger, logging.DEBUG, error, **context)
        return

    if to_base_error(error).status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        log_error_at_level(logger, logging.ERROR, error, **context)
    else:
        log_error_at_level(logger, logging.WARNING, error, **context)


def create_error_logger(logger: logging.Logger, **default_context: Any) -> Callable[..., None]:
    """Return a ``log_error`` shortcut bound to ``logger`` and default context."""

    def _log(error: object, **context: Any) -> None:
        log_error(logger, error, **{**default_context, **context})

    return _log
