"""Request/response schemas for registration, login and token claims."""

from typing import Literal

from pydantic import BaseModel, EmailStr, Field, field_validator

from app.schemas.base import CamelModel

Role = Literal["user", "admin"]


class RegisterRequest(CamelModel):
    """New account details. role defaults to 'user' when omitted."""

    name: str = Field(..., min_length=1, max_length=255)
    username: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)
    role: Role | None = None

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()


class LoginRequest(CamelModel):
    """Credentials for login."""

    email: str = Field(..., min_length=1, max_length=320)
    password: str = Field(..., min_length=1, max_length=128)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()


class RegisteredUser(CamelModel):
    id: str
    name: str
    username: str
    email: str
    role: str


class RegisterResponse(BaseModel):
    message: str
    user: RegisteredUser


class UserSummary(CamelModel):
    """Password-free user summary returned with a login token."""

    id: str
    username: str
    email: str
    role: str


class LoginResponse(BaseModel):
    message: str
    token: str = Field(..., description="JWT access token; send as Authorization: Bearer <token>")
    user: UserSummary


class TokenClaims(BaseModel):
    """Identity decoded from a verified token."""

    id: str
    role: str
