"""Per-request bearer token filter.

Decision flow for each inbound request:
1. CORS preflight (OPTIONS) -> skipped, anonymous
2. No "Authorization: Bearer <token>" header -> anonymous
3. Token revoked, or failing signature/expiry checks -> anonymous
4. Otherwise -> authenticated identity for the token subject

The filter never rejects a request by itself. Whether a route needs an
identity is decided where routers are mounted (see wareland.routes).
"""

from dataclasses import dataclass, field
import logging

from wareland.services.tokens import TokenProvider
from wareland.stores.revoked_tokens import RevokedTokenStore

logger = logging.getLogger("uvicorn.error")

BEARER_PREFIX = "Bearer "


@dataclass(frozen=True)
class Identity:
    """Authenticated principal. No roles/authorities are granted from the token."""

    subject: str
    authorities: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class SecurityContext:
    """Request-scoped security state, passed explicitly to whoever needs it."""

    identity: Identity | None = None
    token: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.identity is not None


ANONYMOUS = SecurityContext()


def extract_bearer_token(authorization: str | None) -> str | None:
    """Raw token from an Authorization header value, or None if not a bearer header."""
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return None
    return authorization[len(BEARER_PREFIX):]


class AuthFilter:
    """Resolves the SecurityContext of a request from its Authorization header."""

    def __init__(self, token_provider: TokenProvider, revoked_tokens: RevokedTokenStore) -> None:
        self._tokens = token_provider
        self._revoked = revoked_tokens

    async def authenticate(self, method: str, authorization: str | None) -> SecurityContext:
        if method.upper() == "OPTIONS":
            return ANONYMOUS

        token = extract_bearer_token(authorization)
        if token is None:
            return ANONYMOUS

        if await self._revoked.is_revoked(token):
            logger.debug("Bearer token is revoked; continuing as anonymous")
            return ANONYMOUS
        if not self._tokens.validate(token):
            return ANONYMOUS

        subject = self._tokens.subject_of(token)
        return SecurityContext(identity=Identity(subject=subject), token=token)
