"""Logging configuration and per-request log correlation."""

from __future__ import annotations

from contextvars import ContextVar
from contextvars import Token
import logging
import sys
import uuid

REQUEST_ID_HEADER = "X-Request-ID"
NO_REQUEST_ID = "-"

LOG_FORMAT = "%(asctime)s %(levelname)s [%(request_id)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

_request_id: ContextVar[str | None] = ContextVar("proofing_request_id", default=None)


def new_request_id() -> str:
    return uuid.uuid4().hex


def bind_request_id(request_id: str) -> Token[str | None]:
    """Make ``request_id`` the active ID for log records in this context."""
    return _request_id.set(request_id)


def reset_request_id(token: Token[str | None]) -> None:
    _request_id.reset(token)


def current_request_id() -> str | None:
    return _request_id.get()


class RequestIdFilter(logging.Filter):
    """Stamps each record with the active request ID, or ``-`` outside a request."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "request_id", None):
            record.request_id = current_request_id() or NO_REQUEST_ID
        return True


def configure_logging(level: str = "INFO") -> None:
    """Send proofing logs to stdout, tagged with the request ID.

    An already configured root logger keeps its handlers; they only gain the
    request ID filter.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
    )

    for handler in logging.getLogger().handlers:
        if not any(isinstance(existing, RequestIdFilter) for existing in handler.filters):
            handler.addFilter(RequestIdFilter())

    logging.getLogger("proofing").setLevel(numeric_level)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
