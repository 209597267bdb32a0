"""Pydantic schemas for user registration, login and profile endpoints."""

from datetime import datetime
from uuid import UUID

from pydantic import EmailStr, Field, field_validator

from remarkbook.schemas.base import CamelModel


def _normalize_email(value):
    if isinstance(value, str):
        return value.strip().lower()
    return value


def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


class UserRegister(CamelModel):
    """Request model for user registration."""

    first_name: str = Field(..., min_length=1, max_length=100, description="First name")
    last_name: str = Field(..., min_length=1, max_length=100, description="Last name")
    email: EmailStr = Field(..., description="Email address (stored lowercase)")
    password: str = Field(..., min_length=6, description="Password (min 6 characters)")

    @field_validator("first_name", "last_name", mode="before")
    @classmethod
    def strip_names(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value):
        return _normalize_email(value)


class LoginRequest(CamelModel):
    """Request model for login.

    Both fields are optional at the schema level so a missing one is answered
    with the dedicated "Please provide email and password" error.
    """

    email: str | None = None
    password: str | None = None

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value):
        return _normalize_email(value)


class UserUpdate(CamelModel):
    """Profile changes. Blank strings mean "leave unchanged"."""

    first_name: str | None = Field(None, max_length=100)
    last_name: str | None = Field(None, max_length=100)
    email: EmailStr | None = None
    password: str | None = Field(None, min_length=6)

    @field_validator("first_name", "last_name", mode="before")
    @classmethod
    def strip_names(cls, value):
        value = _blank_to_none(value)
        return value.strip() if isinstance(value, str) else value

    @field_validator("password", mode="before")
    @classmethod
    def blank_password_is_unchanged(cls, value):
        return _blank_to_none(value)

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value):
        return _normalize_email(_blank_to_none(value))


class UserResponse(CamelModel):
    """Public profile. Never carries the password or its hash."""

    id: UUID
    first_name: str
    last_name: str
    email: str
    profile_image: str | None = None
    profile_image_public_id: str | None = None
    created_at: datetime
    updated_at: datetime


class AuthenticatedUser(UserResponse):
    """Public profile plus a freshly issued access token."""

    token: str


class ProfileResult(CamelModel):
    success: bool = True
    data: UserResponse


class AuthResult(CamelModel):
    success: bool = True
    data: AuthenticatedUser


class ProfileMessageResult(ProfileResult):
    message: str


class AuthMessageResult(AuthResult):
    message: str
