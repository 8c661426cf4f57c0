"""Revoked token repository.

Tokens are stored with their own expiry so the table can be pruned: once a
token has expired it fails validation anyway and its row is dead weight.
"""

from datetime import datetime
from typing import Protocol

from sqlalchemy import delete, exists, select
from sqlalchemy.dialects.postgresql import insert

from wareland.models import RevokedToken
from wareland.stores.postgres import get_session


class RevokedTokenStore(Protocol):
    """Set of tokens invalidated before their natural expiry."""

    async def is_revoked(self, token: str) -> bool: ...

    async def revoke(self, token: str, expires_at: datetime) -> None: ...

    async def prune_expired(self, now: datetime) -> int: ...


class SqlRevokedTokenStore:
    """RevokedTokenStore backed by PostgreSQL."""

    async def is_revoked(self, token: str) -> bool:
        async with get_session() as session:
            result = await session.execute(select(exists().where(RevokedToken.token == token)))
            return bool(result.scalar())

    async def revoke(self, token: str, expires_at: datetime) -> None:
        """Record a token as revoked. Revoking twice is a no-op."""
        async with get_session() as session:
            await session.execute(
                insert(RevokedToken)
                .values(token=token, expires_at=expires_at)
                .on_conflict_do_nothing(index_elements=["token"])
            )

    async def prune_expired(self, now: datetime) -> int:
        """Delete rows whose token has expired. Returns the number of rows removed."""
        async with get_session() as session:
            result = await session.execute(
                delete(RevokedToken).where(RevokedToken.expires_at <= now)
            )
            return result.rowcount or 0
