"""Own-profile endpoints (authenticated).

GET /api/users/me - profile of the token subject
PUT /api/users/me - update name/email/phone, optionally change password
"""

from fastapi import APIRouter, Depends

from wareland.dependencies import get_security_context, get_user_service
from wareland.errors import ValidationFailedException
from wareland.schemas import ApiResponse, UpdateProfileRequest, UserProfile
from wareland.services.auth_filter import SecurityContext
from wareland.services.users import UserService
from wareland.services.validation import validate_profile_update

router = APIRouter()


@router.get("/me", response_model=ApiResponse[UserProfile])
async def get_my_profile(
    ctx: SecurityContext = Depends(get_security_context),
    users: UserService = Depends(get_user_service),
) -> ApiResponse[UserProfile]:
    """Return the profile of the authenticated user."""
    return ApiResponse[UserProfile].ok(await users.get_profile(ctx))


@router.put("/me", response_model=ApiResponse[UserProfile])
async def update_my_profile(
    request: UpdateProfileRequest,
    ctx: SecurityContext = Depends(get_security_context),
    users: UserService = Depends(get_user_service),
) -> ApiResponse[UserProfile]:
    """Update the authenticated user's profile and optionally their password."""
    violations = validate_profile_update(request)
    if violations:
        raise ValidationFailedException(violations)
    profile = await users.update_profile(ctx, request)
    return ApiResponse[UserProfile].ok(profile, message="Profil diperbarui")
