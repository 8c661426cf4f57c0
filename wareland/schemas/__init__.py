"""Pydantic schemas for API request/response validation."""

from wareland.schemas.common import ApiResponse, Violation
from wareland.schemas.catalog import CatalogEntry, SearchCriteria, Seller
from wareland.schemas.auth import (
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    UpdateProfileRequest,
    UserProfile,
)

__all__ = [
    "ApiResponse",
    "Violation",
    "CatalogEntry",
    "SearchCriteria",
    "Seller",
    "LoginRequest",
    "RegisterRequest",
    "TokenResponse",
    "UpdateProfileRequest",
    "UserProfile",
]
