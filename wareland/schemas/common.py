"""Common schemas used across the API."""

from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Uniform response envelope.

    Format: { "success": bool, "message": str | null, "data": T | null }
    """

    success: bool
    message: str | None = None
    data: T | None = None

    @classmethod
    def ok(cls, data: T | None = None, message: str | None = None) -> "ApiResponse[T]":
        """Success envelope, with an optional human-readable message."""
        return cls(success=True, message=message, data=data)

    @classmethod
    def error(cls, message: str, data: T | None = None) -> "ApiResponse[T]":
        """Failure envelope."""
        return cls(success=False, message=message, data=data)


class Violation(BaseModel):
    """A single failed validation rule on a request field."""

    field: str
    rule: str
    message: str
