"""User repository."""

from typing import Protocol

from sqlalchemy import func, select

from wareland.models import User
from wareland.stores.postgres import get_session


class UserStore(Protocol):
    """Persistence interface for user accounts."""

    async def find_by_username(self, username: str) -> User | None: ...

    async def find_by_email(self, email: str) -> User | None: ...

    async def add(self, user: User) -> User: ...

    async def save(self, user: User) -> User: ...


class SqlUserStore:
    """UserStore backed by PostgreSQL. Email lookups are case-insensitive."""

    async def find_by_username(self, username: str) -> User | None:
        async with get_session() as session:
            result = await session.execute(select(User).where(User.username == username))
            return result.scalar_one_or_none()

    async def find_by_email(self, email: str) -> User | None:
        async with get_session() as session:
            result = await session.execute(
                select(User).where(func.lower(User.email) == email.lower())
            )
            return result.scalar_one_or_none()

    async def add(self, user: User) -> User:
        async with get_session() as session:
            session.add(user)
            await session.flush()
            # Load server-side defaults (id, timestamps) before the session closes
            await session.refresh(user)
            return user

    async def save(self, user: User) -> User:
        async with get_session() as session:
            merged = await session.merge(user)
            await session.flush()
            await session.refresh(merged)
            return merged
