"""Shared schema building blocks: identifiers, email, pagination, date ranges."""

from __future__ import annotations

from datetime import datetime
from datetime import timezone
from enum import Enum
import re
from typing import Annotated

from pydantic import AfterValidator
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import model_validator
from pydantic import validate_email
from pydantic_core import PydanticCustomError

CUID2_PATTERN = re.compile(r"^[a-z][0-9a-z]{7,31}$")
CUID_PATTERN = re.compile(r"^c[^\s-]{8,}$", re.IGNORECASE)


def _check_cuid2(value: str) -> str:
    if not CUID2_PATTERN.match(value):
        raise PydanticCustomError("cuid2", "Invalid cuid2")
    return value


def _check_cuid(value: str) -> str:
    if not CUID_PATTERN.match(value):
        raise PydanticCustomError("cuid", "Invalid cuid")
    return value


def _check_email(value: str) -> str:
    try:
        validate_email(value)
    except PydanticCustomError as exc:
        raise PydanticCustomError("email", "Invalid email address") from exc
    return value


def _as_utc(value: datetime) -> datetime:
    # naive datetimes are treated as UTC so mixed inputs stay comparable
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def non_empty(message: str) -> AfterValidator:
    """Reject empty strings with ``message`` instead of pydantic's default."""

    def _check(value: str) -> str:
        if not value:
            raise PydanticCustomError("string_too_short", message)
        return value

    return AfterValidator(_check)


Cuid2 = Annotated[str, AfterValidator(_check_cuid2)]
Cuid = Annotated[str, AfterValidator(_check_cuid)]
Email = Annotated[str, AfterValidator(_check_email)]


class SortOrder(str, Enum):
    """Sort direction for list endpoints."""

    ASC = "asc"
    DESC = "desc"


class PaginationParams(BaseModel):
    """Page-based pagination query parameters."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)


class DateRange(BaseModel):
    """Optional inclusive date range filter."""

    model_config = ConfigDict(populate_by_name=True)

    start: datetime | None = Field(default=None, alias="from")
    end: datetime | None = Field(default=None, alias="to")

    @model_validator(mode="after")
    def _check_order(self) -> DateRange:
        if self.start is not None and self.end is not None and _as_utc(self.start) > _as_utc(self.end):
            raise PydanticCustomError("date_range", "Start date must be before or equal to end date")
        return self
