"""Auth Schemas — registration, login and the public user projection.

Invariants:
    - UserPublic never carries the password hash
    - RegisterRequest.password fits in bcrypt's 72-byte input
"""

from datetime import datetime

from pydantic import Field, field_validator

from blog.infrastructure.security import BCRYPT_MAX_BYTES
from blog.schemas.base import CamelModel

_EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+$"


class RegisterRequest(CamelModel):
    """Registration body; loose shape checks only."""
    name: str = Field(min_length=1, max_length=100)
    email: str = Field(max_length=255, pattern=_EMAIL_PATTERN)
    password: str = Field(min_length=1)

    @field_validator("name", "email", mode="before")
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("password")
    @classmethod
    def check_password_length(cls, v: str) -> str:
        if len(v.encode("utf-8")) > BCRYPT_MAX_BYTES:
            raise ValueError(
                f"password must be at most {BCRYPT_MAX_BYTES} bytes",
            )
        return v


class LoginRequest(CamelModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class UserPublic(CamelModel):
    """Public-safe user projection."""
    id: int
    name: str
    email: str
    created_at: datetime


class LoginResponse(CamelModel):
    token: str
    user: UserPublic
