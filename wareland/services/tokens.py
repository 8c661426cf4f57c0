"""JWT token provider.

Tokens carry {sub, iat, exp, jti} and are signed with HS256 over a process-wide
secret. Validation collapses every failure (bad format, bad signature,
expired) into False; callers never learn which check failed.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
import logging
from uuid import uuid4

import jwt

logger = logging.getLogger("uvicorn.error")

ALGORITHM = "HS256"


@dataclass(frozen=True)
class TokenClaims:
    subject: str
    issued_at: datetime
    expires_at: datetime


class TokenProvider:
    """Issues and validates signed, time-bounded bearer tokens."""

    def __init__(self, secret: str, ttl: timedelta = timedelta(days=7)) -> None:
        if not secret:
            raise ValueError("JWT secret must not be empty")
        self._secret = secret
        self._ttl = ttl

    def issue(self, subject: str) -> str:
        """Create a token for subject, valid from now until now + ttl."""
        now = datetime.now(timezone.utc)
        payload = {
            "sub": subject,
            "iat": now,
            "exp": now + self._ttl,
            "jti": uuid4().hex,
        }
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def validate(self, token: str) -> bool:
        """True when the signature checks out and the token has not expired."""
        try:
            self._decode(token)
            return True
        except jwt.PyJWTError as e:
            logger.debug("Token rejected: %s", type(e).__name__)
            return False

    def claims(self, token: str) -> TokenClaims:
        """Decode a valid token. Raises jwt.PyJWTError when it is not valid."""
        payload = self._decode(token)
        return TokenClaims(
            subject=payload["sub"],
            issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )

    def subject_of(self, token: str) -> str:
        """Subject claim of a token that already passed validate()."""
        return self.claims(token).subject

    def expires_at(self, token: str) -> datetime:
        return self.claims(token).expires_at

    def _decode(self, token: str) -> dict:
        return jwt.decode(
            token,
            self._secret,
            algorithms=[ALGORITHM],
            options={"require": ["sub", "iat", "exp"]},
        )
