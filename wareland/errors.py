"""Business exceptions.

Routes and services raise these; the handler registered in wareland.main
renders them as a failure envelope with the matching HTTP status.
"""

from wareland.schemas.common import Violation


class BusinessException(Exception):
    """Base class for every business-logic error."""

    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BadRequestException(BusinessException):
    """The client sent a request that cannot be served."""

    status_code = 400


class ValidationFailedException(BadRequestException):
    """One or more request fields broke a validation rule."""

    def __init__(self, violations: list[Violation], message: str = "Validasi gagal") -> None:
        super().__init__(message)
        self.violations = violations


class InvalidCredentialException(BusinessException):
    """Username/password (or old password) did not match."""

    status_code = 401


class AuthenticationRequiredException(BusinessException):
    """A protected route was called without an authenticated identity."""

    status_code = 401


class ResourceNotFoundException(BusinessException):
    """The requested resource does not exist."""

    status_code = 404
