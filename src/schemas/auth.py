"""User and authentication schemas."""

from datetime import datetime

from pydantic import EmailStr, Field

from src.schemas.base import CamelModel, PatchModel, UrlStr


class UserRegister(CamelModel):
    """User registration request."""

    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=8, max_length=128)
    profile_image: UrlStr | None = None


class UserLogin(CamelModel):
    """User login request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=8, max_length=128)


class UserUpdate(PatchModel):
    """Partial update of the current user."""

    nullable_fields = frozenset({"profile_image", "phone_number"})

    first_name: str | None = Field(None, min_length=1, max_length=50)
    last_name: str | None = Field(None, min_length=1, max_length=50)
    email: EmailStr | None = None
    profile_image: UrlStr | None = None
    phone_number: str | None = Field(None, max_length=30)
    password: str | None = Field(None, min_length=8, max_length=128)


class UserResponse(CamelModel):
    """User information response. Never carries the password hash."""

    id: int
    first_name: str
    last_name: str
    email: str
    profile_image: str | None
    phone_number: str | None
    email_verified: bool
    created_at: datetime


class UserEnvelope(CamelModel):
    user: UserResponse


class AuthResponse(CamelModel):
    """Authentication response with token and user info."""

    user: UserResponse
    token: str
    token_type: str = "bearer"  # noqa: S105
