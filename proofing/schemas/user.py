"""Photographer account schemas: registration, login, profile, password."""

from __future__ import annotations

import re
from typing import Annotated

from pydantic import AfterValidator
from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationInfo
from pydantic import field_validator
from pydantic_core import PydanticCustomError

from proofing.schemas.common import Email
from proofing.schemas.common import non_empty

PASSWORD_MIN_LENGTH = 8

PASSWORD_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"[A-Z]"), "Password must contain at least one uppercase letter"),
    (re.compile(r"[a-z]"), "Password must contain at least one lowercase letter"),
    (re.compile(r"[0-9]"), "Password must contain at least one number"),
)


def _check_password(value: str) -> str:
    if len(value) < PASSWORD_MIN_LENGTH:
        raise PydanticCustomError("password_too_short", "Password must be at least 8 characters")
    for pattern, message in PASSWORD_RULES:
        if not pattern.search(value):
            raise PydanticCustomError("password_strength", message)
    return value


Password = Annotated[str, AfterValidator(_check_password)]


class RegisterUser(BaseModel):
    email: Email
    password: Password
    name: Annotated[str, Field(max_length=255), non_empty("Name is required")] | None = None


class LoginUser(BaseModel):
    email: Email
    password: Annotated[str, non_empty("Password is required")]


class UpdateUserProfile(BaseModel):
    name: Annotated[str, Field(min_length=1, max_length=255)] | None = None
    email: Email | None = None


class ChangePassword(BaseModel):
    """Password change; the confirmation must repeat the new password."""

    current_password: Annotated[str, non_empty("Current password is required")]
    new_password: Password
    confirm_password: Annotated[str, non_empty("Password confirmation is required")]

    @field_validator("confirm_password")
    @classmethod
    def _matches_new_password(cls, value: str, info: ValidationInfo) -> str:
        new_password = info.data.get("new_password")
        if new_password is not None and value != new_password:
            raise PydanticCustomError("password_mismatch", "Passwords do not match")
        return value
