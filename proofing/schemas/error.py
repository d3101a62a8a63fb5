"""Error body and log record schemas shared across API handlers."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class ClientError(BaseModel):
    """Error body returned to API clients."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    message: str
    status_code: int = Field(alias="statusCode", ge=400, le=599)
    errors: dict[str, list[str]] | None = None
    context: dict[str, Any] | None = None


class ErrorLogRecord(ClientError):
    """Server-side error record; always carries the stack trace."""

    timestamp: str
    stack: str
