"""Authentication endpoints.

POST /api/auth/register - create an account (open)
POST /api/auth/login    - exchange username/password for a bearer token (open)
POST /api/auth/logout   - revoke the presented bearer token (authenticated)
"""

from fastapi import APIRouter, Depends

from wareland.dependencies import get_security_context, get_user_service
from wareland.errors import ValidationFailedException
from wareland.schemas import ApiResponse, LoginRequest, RegisterRequest, TokenResponse, UserProfile
from wareland.services.auth_filter import SecurityContext
from wareland.services.users import UserService
from wareland.services.validation import validate_registration

# Open to anonymous callers
router = APIRouter()

# Mounted behind require_identity
session_router = APIRouter()


@router.post("/register", response_model=ApiResponse[UserProfile], status_code=201)
async def register(
    request: RegisterRequest,
    users: UserService = Depends(get_user_service),
) -> ApiResponse[UserProfile]:
    """Create a buyer or seller account."""
    violations = validate_registration(request)
    if violations:
        raise ValidationFailedException(violations)
    profile = await users.register(request)
    return ApiResponse[UserProfile].ok(profile, message="Registrasi berhasil")


@router.post("/login", response_model=ApiResponse[TokenResponse])
async def login(
    request: LoginRequest,
    users: UserService = Depends(get_user_service),
) -> ApiResponse[TokenResponse]:
    """Exchange username and password for a bearer token."""
    token = await users.login(request.username, request.password)
    return ApiResponse[TokenResponse].ok(token, message="Login berhasil")


@session_router.post("/logout", response_model=ApiResponse[None])
async def logout(
    ctx: SecurityContext = Depends(get_security_context),
    users: UserService = Depends(get_user_service),
) -> ApiResponse[None]:
    """Revoke the bearer token used for this request."""
    await users.logout(ctx)
    return ApiResponse[None].ok(message="Logout berhasil")
