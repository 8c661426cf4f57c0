"""Schemas for authentication and profile endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field

from wareland.schemas.catalog import Seller


class RegisterRequest(BaseModel):
    """Request body for POST /api/auth/register.

    Fields are loosely typed on purpose: rules are checked by
    wareland.services.validation so every violation is reported at once.
    """

    username: str | None = None
    name: str | None = None
    email: str | None = None
    phone_number: str | None = Field(alias="phoneNumber", default=None)
    password: str | None = None
    role: str | None = None

    model_config = {"populate_by_name": True}


class LoginRequest(BaseModel):
    """Request body for POST /api/auth/login."""

    username: str
    password: str


class TokenResponse(BaseModel):
    """Issued bearer token."""

    token: str
    token_type: str = Field(alias="tokenType", default="Bearer")
    expires_at: datetime = Field(alias="expiresAt")

    model_config = {"populate_by_name": True}


class UpdateProfileRequest(BaseModel):
    """Request body for PUT /api/users/me. Every field is optional."""

    name: str | None = None
    email: str | None = None
    phone_number: str | None = Field(alias="phoneNumber", default=None)
    old_password: str | None = Field(alias="oldPassword", default=None)
    new_password: str | None = Field(alias="newPassword", default=None)

    model_config = {"populate_by_name": True}


# The profile returned to the account owner has the same shape as the
# seller record embedded in catalog entries.
UserProfile = Seller
