"""Missing-resource error."""

from __future__ import annotations

from typing import Any

from fastapi import status

from proofing.core.errors.base import BaseError


class NotFoundError(BaseError):
    """A requested resource does not exist."""

    def __init__(
        self,
        resource: str,
        identifier: str | int | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        if identifier is None or identifier == "":
            message = f"{resource} not found"
            details: dict[str, Any] = {"resource": resource}
        else:
            message = f"{resource} with identifier '{identifier}' not found"
            details = {"resource": resource, "identifier": identifier}

        if context:
            details.update(context)

        super().__init__(message, status.HTTP_404_NOT_FOUND, True, details)
        self.resource = resource
        self.identifier = identifier if identifier != "" else None
