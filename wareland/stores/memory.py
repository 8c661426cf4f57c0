"""In-process stores.

Used for local demos (STORE_BACKEND=memory) and tests. They hold plain ORM
instances that are never attached to a session and apply the same catalog
filter semantics as the SQL store through CatalogFilter.matches.
"""

from datetime import datetime, timezone
from itertools import count

from wareland.models import Property, User
from wareland.services.catalog_filter import CatalogFilter, build_keyword_filter


def _now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryPropertyStore:
    """PropertyStore over a list, in id order."""

    def __init__(self, properties: list[Property] | None = None) -> None:
        self._properties: dict[int, Property] = {}
        self._ids = count(1)
        for prop in properties or []:
            self.add(prop)

    def add(self, prop: Property) -> Property:
        if prop.id is None:
            prop.id = next(self._ids)
        else:
            self._ids = count(max(prop.id, *self._properties.keys(), 0) + 1)
        self._properties[prop.id] = prop
        return prop

    async def find_all(self) -> list[Property]:
        return [self._properties[k] for k in sorted(self._properties)]

    async def find_by_id(self, property_id: int) -> Property | None:
        return self._properties.get(property_id)

    async def query(self, catalog_filter: CatalogFilter) -> list[Property]:
        return [p for p in await self.find_all() if catalog_filter.matches(p)]

    async def search_by_keyword(self, keyword: str | None) -> list[Property]:
        catalog_filter = build_keyword_filter(keyword)
        if catalog_filter is None:
            return []
        return await self.query(catalog_filter)


class InMemoryUserStore:
    """UserStore over a dict keyed by id."""

    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._ids = count(1)

    async def find_by_username(self, username: str) -> User | None:
        return next((u for u in self._users.values() if u.username == username), None)

    async def find_by_email(self, email: str) -> User | None:
        email = email.lower()
        return next((u for u in self._users.values() if u.email.lower() == email), None)

    async def add(self, user: User) -> User:
        user.id = next(self._ids)
        user.created_at = user.updated_at = _now()
        self._users[user.id] = user
        return user

    async def save(self, user: User) -> User:
        user.updated_at = _now()
        self._users[user.id] = user
        return user


class InMemoryRevokedTokenStore:
    """RevokedTokenStore over a dict of token -> expiry."""

    def __init__(self) -> None:
        self._tokens: dict[str, datetime] = {}

    def __len__(self) -> int:
        return len(self._tokens)

    async def is_revoked(self, token: str) -> bool:
        return token in self._tokens

    async def revoke(self, token: str, expires_at: datetime) -> None:
        self._tokens.setdefault(token, expires_at)

    async def prune_expired(self, now: datetime) -> int:
        expired = [t for t, exp in self._tokens.items() if exp <= now]
        for token in expired:
            del self._tokens[token]
        return len(expired)
