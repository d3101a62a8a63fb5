"""State conflict error."""

from __future__ import annotations

from typing import Any

from fastapi import status

from proofing.core.errors.base import BaseError


class ConflictError(BaseError):
    """The request conflicts with the current state, e.g. a duplicate record."""

    def __init__(
        self,
        message: str = "The request conflicts with the current state",
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, status.HTTP_409_CONFLICT, True, context)
