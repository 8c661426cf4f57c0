"""Property repository.

The catalog reads properties through the PropertyStore protocol; SqlPropertyStore
is the PostgreSQL implementation. Owners are eager-loaded so mapped entries can
embed the seller after the session is closed.
"""

from collections.abc import Sequence
from typing import Protocol

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from wareland.models import Property
from wareland.services.catalog_filter import CatalogFilter, build_keyword_filter, catalog_query
from wareland.stores.postgres import get_session


class PropertyStore(Protocol):
    """Read interface over property rows."""

    async def find_all(self) -> Sequence[Property]: ...

    async def find_by_id(self, property_id: int) -> Property | None: ...

    async def query(self, catalog_filter: CatalogFilter) -> Sequence[Property]: ...

    async def search_by_keyword(self, keyword: str | None) -> Sequence[Property]: ...


class SqlPropertyStore:
    """PropertyStore backed by PostgreSQL."""

    async def find_all(self) -> list[Property]:
        async with get_session() as session:
            result = await session.execute(
                select(Property).options(selectinload(Property.owner)).order_by(Property.id.asc())
            )
            return list(result.scalars().all())

    async def find_by_id(self, property_id: int) -> Property | None:
        async with get_session() as session:
            result = await session.execute(
                select(Property)
                .options(selectinload(Property.owner))
                .where(Property.id == property_id)
            )
            return result.scalar_one_or_none()

    async def query(self, catalog_filter: CatalogFilter) -> list[Property]:
        async with get_session() as session:
            result = await session.execute(
                catalog_query(catalog_filter).options(selectinload(Property.owner))
            )
            return list(result.scalars().all())

    async def search_by_keyword(self, keyword: str | None) -> list[Property]:
        """Keyword-only search. A blank keyword returns no rows at all."""
        catalog_filter = build_keyword_filter(keyword)
        if catalog_filter is None:
            return []
        return await self.query(catalog_filter)
