"""Validation error carrying field-level messages."""

from __future__ import annotations

from collections.abc import Iterable
from collections.abc import Mapping
from typing import Any

from fastapi import status

from proofing.core.errors.base import BaseError

DEFAULT_VALIDATION_MESSAGE = "Validation failed"


def format_issue_path(location: Iterable[Any]) -> str:
    """Join an issue location into a dotted field path."""
    return ".".join(str(part) for part in location)


def format_issues(issues: Iterable[Mapping[str, Any]]) -> dict[str, list[str]]:
    """Group pydantic-style issues into ``{field_path: [message, ...]}``.

    Messages for the same path keep the order the engine reported them in.
    """
    formatted: dict[str, list[str]] = {}
    for issue in issues:
        path = format_issue_path(issue.get("loc", ()))
        formatted.setdefault(path, []).append(str(issue.get("msg", "Invalid value")))
    return formatted


class ValidationError(BaseError):
    """Raised when input fails a schema check."""

    def __init__(
        self,
        errors: Mapping[str, Iterable[str]],
        message: str = DEFAULT_VALIDATION_MESSAGE,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, status.HTTP_422_UNPROCESSABLE_ENTITY, True, context)
        self.errors = {field: list(messages) for field, messages in errors.items()}

    @classmethod
    def from_issues(
        cls,
        issues: Iterable[Mapping[str, Any]],
        message: str = DEFAULT_VALIDATION_MESSAGE,
    ) -> ValidationError:
        """Build from pydantic-style issues; an empty issue list still yields one entry."""
        return cls(format_issues(issues) or {"": [message]}, message)

    def get_field_error(self, field: str) -> str | None:
        """First message reported for ``field``, if any."""
        messages = self.errors.get(field)
        return messages[0] if messages else None

    def has_field_error(self, field: str) -> bool:
        return bool(self.errors.get(field))

    def get_all_errors(self) -> list[str]:
        return [message for messages in self.errors.values() for message in messages]

    def serialize_for_log(self) -> dict[str, Any]:
        record = super().serialize_for_log()
        record["errors"] = self.errors
        return record

    def serialize_for_client(self, include_details: bool = False) -> dict[str, Any]:
        body = super().serialize_for_client(include_details)
        body["errors"] = self.errors
        return body
