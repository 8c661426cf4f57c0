"""Account service: registration, login/logout and own-profile management.

Input is assumed to have passed wareland.services.validation already; this
layer only enforces rules that need the store (uniqueness, password checks).
"""

import logging

from wareland.errors import (
    BadRequestException,
    InvalidCredentialException,
    ResourceNotFoundException,
)
from wareland.models import User, UserRole
from wareland.schemas import RegisterRequest, TokenResponse, UpdateProfileRequest, UserProfile
from wareland.services.auth_filter import SecurityContext
from wareland.services.catalog_mapper import to_seller
from wareland.services.passwords import hash_password, verify_password
from wareland.services.tokens import TokenProvider
from wareland.stores.revoked_tokens import RevokedTokenStore
from wareland.stores.users import UserStore

logger = logging.getLogger("uvicorn.error")


class UserService:
    """Account operations. Dependencies are passed in explicitly."""

    def __init__(
        self,
        users: UserStore,
        revoked_tokens: RevokedTokenStore,
        token_provider: TokenProvider,
    ) -> None:
        self._users = users
        self._revoked = revoked_tokens
        self._tokens = token_provider

    async def register(self, req: RegisterRequest) -> UserProfile:
        username = req.username.strip()
        email = req.email.strip()

        if await self._users.find_by_username(username) is not None:
            raise BadRequestException("Username sudah digunakan")
        if await self._users.find_by_email(email) is not None:
            raise BadRequestException("Email sudah digunakan")

        user = User(
            username=username,
            name=req.name.strip(),
            email=email,
            phone_number=req.phone_number,
            password_hash=hash_password(req.password),
            role=(req.role or UserRole.BUYER.value).upper(),
        )
        user = await self._users.add(user)
        logger.info("Registered user %s (id=%s, role=%s)", user.username, user.id, user.role)
        return to_seller(user)

    async def login(self, username: str, password: str) -> TokenResponse:
        user = await self._users.find_by_username(username)
        if user is None or not verify_password(password, user.password_hash):
            logger.info("Failed login for username=%r", username)
            raise InvalidCredentialException("Username atau password salah")

        token = self._tokens.issue(user.username)
        logger.info("User %s logged in", user.username)
        return TokenResponse(token=token, expires_at=self._tokens.expires_at(token))

    async def logout(self, ctx: SecurityContext) -> None:
        """Revoke the token that authenticated this request."""
        if ctx.token is None:
            return
        await self._revoked.revoke(ctx.token, self._tokens.expires_at(ctx.token))
        logger.info("User %s logged out", ctx.identity.subject if ctx.identity else "?")

    async def get_profile(self, ctx: SecurityContext) -> UserProfile:
        return to_seller(await self._current_user(ctx))

    async def update_profile(self, ctx: SecurityContext, req: UpdateProfileRequest) -> UserProfile:
        user = await self._current_user(ctx)

        if req.new_password is not None and req.new_password.strip():
            if not verify_password(req.old_password or "", user.password_hash):
                raise InvalidCredentialException("Password lama salah")
            user.password_hash = hash_password(req.new_password)

        if req.email is not None and req.email.strip() and req.email.strip() != user.email:
            email = req.email.strip()
            other = await self._users.find_by_email(email)
            if other is not None and other.id != user.id:
                raise BadRequestException("Email sudah digunakan")
            user.email = email

        if req.name is not None:
            user.name = req.name.strip()
        if req.phone_number is not None:
            user.phone_number = req.phone_number.strip() or None

        user = await self._users.save(user)
        return to_seller(user)

    async def _current_user(self, ctx: SecurityContext) -> User:
        if ctx.identity is None:
            raise ResourceNotFoundException("Pengguna tidak ditemukan")
        user = await self._users.find_by_username(ctx.identity.subject)
        if user is None:
            raise ResourceNotFoundException("Pengguna tidak ditemukan")
        return user
