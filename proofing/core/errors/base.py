"""Base application error with HTTP status mapping and serialization."""

from __future__ import annotations

from datetime import datetime
from datetime import timezone
import traceback
from typing import Any

from fastapi import status

GENERIC_CLIENT_MESSAGE = "An unexpected error occurred"

MIN_ERROR_STATUS = status.HTTP_400_BAD_REQUEST
MAX_ERROR_STATUS = 599


class BaseError(Exception):
    """Root of the application error taxonomy.

    Operational errors are expected, user-triggerable conditions (bad input,
    missing resources, conflicts) and keep their message when shown to a
    client. Non-operational errors stand for defects and unknown failures; a
    client only ever sees ``GENERIC_CLIENT_MESSAGE`` for them.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        is_operational: bool = True,
        context: dict[str, Any] | None = None,
    ) -> None:
        if not MIN_ERROR_STATUS <= status_code <= MAX_ERROR_STATUS:
            raise ValueError(f"Error status code must be within 400-599, got {status_code}")
        super().__init__(message)
        self.name = type(self).__name__
        self.message = message
        self.status_code = status_code
        self.is_operational = is_operational
        self.context = dict(context) if context is not None else None
        self.timestamp = datetime.now(timezone.utc)

    def add_context(self, **values: Any) -> BaseError:
        """Attach diagnostic metadata and return the same error."""
        if self.context is None:
            self.context = {}
        self.context.update(values)
        return self

    @property
    def has_context(self) -> bool:
        return bool(self.context)

    @property
    def stack(self) -> str:
        """Formatted traceback, including chained causes."""
        return "".join(traceback.format_exception(type(self), self, self.__traceback__))

    def iso_timestamp(self) -> str:
        return self.timestamp.isoformat(timespec="milliseconds").replace("+00:00", "Z")

    def get_client_message(self, include_details: bool = False) -> str:
        """Return a message that is safe to show to API clients."""
        if not self.is_operational:
            return GENERIC_CLIENT_MESSAGE

        if include_details and self.context:
            rendered = ", ".join(f"{key}: {value}" for key, value in self.context.items())
            return f"{self.message} ({rendered})"

        return self.message

    def serialize_for_log(self) -> dict[str, Any]:
        """Full error record for server-side logs, stack included."""
        record: dict[str, Any] = {
            "name": self.name,
            "message": self.message,
            "statusCode": self.status_code,
            "timestamp": self.iso_timestamp(),
        }
        if self.context:
            record["context"] = self.context
        record["stack"] = self.stack
        return record

    def serialize_for_client(self, include_details: bool = False) -> dict[str, Any]:
        """Client-facing error body; never carries a stack trace."""
        body: dict[str, Any] = {
            "name": self.name,
            "message": self.get_client_message(include_details),
            "statusCode": self.status_code,
        }
        if include_details and self.context:
            body["context"] = self.context
        return body

    def __repr__(self) -> str:
        return f"{self.name}(status_code={self.status_code}, message={self.message!r})"
