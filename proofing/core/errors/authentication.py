"""Authentication and authorization errors."""

from __future__ import annotations

from typing import Any

from fastapi import status

from proofing.core.errors.base import BaseError


class AuthenticationError(BaseError):
    """Credentials are missing or invalid, or the session has expired."""

    def __init__(self, message: str = "Authentication failed", context: dict[str, Any] | None = None) -> None:
        super().__init__(message, status.HTTP_401_UNAUTHORIZED, True, context)


class AuthorizationError(BaseError):
    """The caller is authenticated but may not perform the action."""

    def __init__(
        self,
        message: str = "You do not have permission to perform this action",
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, status.HTTP_403_FORBIDDEN, True, context)


class TokenError(BaseError):
    """An API or client access token is invalid or expired."""

    def __init__(self, message: str = "Invalid or expired token", context: dict[str, Any] | None = None) -> None:
        super().__init__(message, status.HTTP_401_UNAUTHORIZED, True, context)
