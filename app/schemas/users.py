"""Schemas for user profile read and update."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, field_validator

from app.schemas.base import CamelModel


class UserProfile(CamelModel):
    """User record without the password hash."""

    id: str
    name: str
    username: str
    email: str
    role: str
    profile_image: str | None = None
    phone: str | None = None
    created_at: datetime | None = None


class ProfileUpdate(CamelModel):
    """Partial profile update; fields left as None are not changed."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    username: str | None = Field(default=None, min_length=1, max_length=255)
    email: EmailStr | None = None
    phone: str | None = Field(default=None, max_length=64)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str | None) -> str | None:
        return v.strip().lower() if v is not None else None


class ProfileUpdateResponse(BaseModel):
    message: str
    user: UserProfile
