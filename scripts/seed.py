#!/usr/bin/env python3
"""Seed database with demo data.

Creates:
- Seller accounts (password: "Wareland@123")
- Property listings owned by those sellers

The script is idempotent: existing users (by username) and properties
(by address) are left untouched.

Usage:
    python -m scripts.seed
"""

import asyncio
import os
import sys

# Add parent to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from wareland.models import Property, User, UserRole
from wareland.services.passwords import hash_password
from wareland.stores.postgres import close_db, create_tables, get_session, init_db

load_dotenv()

DEMO_PASSWORD = "Wareland@123"

SELLERS = [
    {
        "username": "budi",
        "name": "Budi Santoso",
        "email": "budi@example.com",
        "phone_number": "+62811000001",
    },
    {
        "username": "sari",
        "name": "Sari Wulandari",
        "email": "sari@example.com",
        "phone_number": "+62811000002",
    },
]

PROPERTIES = [
    {
        "owner": "budi",
        "address": "Jl. Sudirman No. 10, Jakarta Pusat",
        "price": 2_500_000_000,
        "description": "Rumah dua lantai dekat stasiun MRT, 4 kamar tidur.",
    },
    {
        "owner": "budi",
        "address": "Jl. Kemang Raya 45, Jakarta Selatan",
        "price": 4_100_000_000,
        "description": "Townhouse dengan kolam renang pribadi.",
    },
    {
        "owner": "sari",
        "address": "Jl. Dago 120, Bandung",
        "price": 1_350_000_000,
        "description": "Rumah asri dengan pemandangan kota, cocok untuk keluarga.",
    },
    {
        "owner": "sari",
        "address": "Jl. Malioboro 8, Yogyakarta",
        "price": 900_000_000,
        "description": "Ruko strategis di pusat kota.",
    },
]


async def seed_sellers(session: AsyncSession) -> dict[str, int]:
    """Seed seller accounts. Returns username -> user id."""
    user_map: dict[str, int] = {}
    password_hash = hash_password(DEMO_PASSWORD)

    for s in SELLERS:
        result = await session.execute(select(User).where(User.username == s["username"]))
        existing = result.scalar_one_or_none()
        if existing:
            user_map[s["username"]] = existing.id
            print(f"  skip  {s['username']} (exists)")
            continue

        user = User(
            username=s["username"],
            name=s["name"],
            email=s["email"],
            phone_number=s["phone_number"],
            password_hash=password_hash,
            role=UserRole.SELLER.value,
        )
        session.add(user)
        await session.flush()
        user_map[s["username"]] = user.id
        print(f"  added {s['username']}")

    return user_map


async def seed_properties(session: AsyncSession, user_map: dict[str, int]) -> None:
    """Seed property listings."""
    for p in PROPERTIES:
        result = await session.execute(select(Property).where(Property.address == p["address"]))
        if result.scalar_one_or_none():
            print(f"  skip  {p['address']} (exists)")
            continue

        session.add(
            Property(
                address=p["address"],
                price=p["price"],
                description=p["description"],
                owner_id=user_map.get(p["owner"]),
            )
        )
        print(f"  added {p['address']}")


async def seed_database() -> None:
    await init_db()
    try:
        await create_tables()
        async with get_session() as session:
            print("Sellers:")
            user_map = await seed_sellers(session)
            print("Properties:")
            await seed_properties(session, user_map)
    finally:
        await close_db()


if __name__ == "__main__":
    asyncio.run(seed_database())
