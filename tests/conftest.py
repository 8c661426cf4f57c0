"""Shared fixtures: an app wired to in-memory stores, and record factories."""

from datetime import datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient

from wareland.main import create_app
from wareland.models import Property, User, UserRole
from wareland.settings import Settings
from wareland.stores.memory import InMemoryPropertyStore, InMemoryRevokedTokenStore, InMemoryUserStore

TEST_SECRET = "test-secret-key-that-is-long-enough-for-hs256"


def make_user(user_id: int = 1, username: str = "budi", **overrides) -> User:
    fields = {
        "id": user_id,
        "username": username,
        "name": "Budi Santoso",
        "email": f"{username}@example.com",
        "phone_number": "+62811000001",
        "password_hash": "not-a-real-hash",
        "role": UserRole.SELLER.value,
        "created_at": datetime(2025, 1, 1, tzinfo=timezone.utc),
        "updated_at": datetime(2025, 1, 2, tzinfo=timezone.utc),
    }
    fields.update(overrides)
    return User(**fields)


def make_property(
    property_id: int,
    address: str,
    price: float,
    description: str | None = None,
    owner: User | None = None,
) -> Property:
    return Property(id=property_id, address=address, price=price, description=description, owner=owner)


@pytest.fixture
def settings() -> Settings:
    return Settings(store_backend="memory", JWT_SECRET=TEST_SECRET)


@pytest.fixture
def property_store() -> InMemoryPropertyStore:
    seller = make_user()
    return InMemoryPropertyStore(
        [
            make_property(1, "Jl. Jakarta 1", 300, "Rumah dekat stasiun", owner=seller),
            make_property(2, "Bandung", 200, "Villa di pegunungan"),
        ]
    )


@pytest.fixture
def user_store() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture
def revoked_store() -> InMemoryRevokedTokenStore:
    return InMemoryRevokedTokenStore()


@pytest.fixture
def app(settings, property_store, user_store, revoked_store):
    return create_app(
        settings,
        property_store=property_store,
        user_store=user_store,
        revoked_token_store=revoked_store,
    )


@pytest.fixture
async def client(app):
    """Create test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
