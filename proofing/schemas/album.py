"""Album payload and query schemas."""

from __future__ import annotations

from enum import Enum
from typing import Annotated

from pydantic import BaseModel
from pydantic import Field

from proofing.schemas.common import Cuid2
from proofing.schemas.common import non_empty


class AlbumStatus(str, Enum):
    """Album lifecycle states."""

    DRAFT = "DRAFT"
    OPEN = "OPEN"
    CLOSED = "CLOSED"
    ARCHIVED = "ARCHIVED"


class CreateAlbum(BaseModel):
    """Payload to create an album."""

    title: Annotated[str, Field(max_length=255), non_empty("Title is required")]
    description: Annotated[str, Field(max_length=2000)] | None = None
    status: AlbumStatus = AlbumStatus.DRAFT


class UpdateAlbum(BaseModel):
    """Payload to update mutable album fields."""

    title: Annotated[str, Field(min_length=1, max_length=255)] | None = None
    description: Annotated[str, Field(max_length=2000)] | None = None
    status: AlbumStatus | None = None


class AlbumId(BaseModel):
    id: Cuid2


class AlbumQuery(BaseModel):
    """Filters for album listings."""

    status: AlbumStatus | None = None
    photographer_id: Cuid2 | None = None
    search: Annotated[str, Field(max_length=255)] | None = None
