"""Client invitation, access token and photo selection schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator
from pydantic import BaseModel
from pydantic import Field
from pydantic_core import PydanticCustomError

from proofing.schemas.common import Cuid2
from proofing.schemas.common import Email
from proofing.schemas.common import non_empty

ACCESS_TOKEN_MIN_LENGTH = 32

Notes = Annotated[str, Field(max_length=1000)]


class CreateAlbumClient(BaseModel):
    """Invite a client to proof an album."""

    client_name: Annotated[str, Field(max_length=255), non_empty("Client name is required")]
    client_email: Email
    expires_at: datetime | None = None


class UpdateAlbumClient(BaseModel):
    client_name: Annotated[str, Field(min_length=1, max_length=255)] | None = None
    client_email: Email | None = None
    expires_at: datetime | None = None


def _check_access_token(value: str) -> str:
    if len(value) < ACCESS_TOKEN_MIN_LENGTH:
        raise PydanticCustomError("access_token", "Invalid access token format")
    return value


AccessToken = Annotated[str, AfterValidator(_check_access_token)]


class AccessTokenParams(BaseModel):
    token: AccessToken


class CreatePhotoSelection(BaseModel):
    photo_id: Cuid2
    notes: Notes | None = None


class UpdatePhotoSelection(BaseModel):
    notes: Notes | None = None


def _check_photo_ids(value: list[str]) -> list[str]:
    if not value:
        raise PydanticCustomError("too_short", "At least one photo ID is required")
    return value


class BatchPhotoSelection(BaseModel):
    """Select several photos at once with shared notes."""

    photo_ids: Annotated[list[Cuid2], AfterValidator(_check_photo_ids)]
    notes: Notes | None = None


class ClientId(BaseModel):
    client_id: Cuid2
