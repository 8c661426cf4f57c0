"""Catalog service.

Read-only view over property listings:
- list_all: every property
- search: full-criteria filter (keyword + price bounds)
- get_detail: single property by id

An empty store or a missing id is a normal outcome, never an error.
"""

import logging

from wareland.schemas import CatalogEntry, SearchCriteria
from wareland.services.catalog_filter import build_catalog_filter
from wareland.services.catalog_mapper import to_catalog_entry
from wareland.stores.properties import PropertyStore

logger = logging.getLogger("uvicorn.error")


class CatalogService:
    """Orchestrates filter building, store queries and mapping."""

    def __init__(self, store: PropertyStore) -> None:
        if store is None:
            raise ValueError("CatalogService requires a property store")
        self._store = store

    async def list_all(self) -> list[CatalogEntry]:
        props = await self._store.find_all()
        return [to_catalog_entry(p) for p in props]

    async def search(self, criteria: SearchCriteria | None) -> list[CatalogEntry]:
        """Search with the full-criteria filter. None criteria lists everything."""
        catalog_filter = build_catalog_filter(criteria)
        props = await self._store.query(catalog_filter)
        logger.debug(
            "Catalog search keyword=%r min=%s max=%s -> %d result(s)",
            catalog_filter.keyword,
            catalog_filter.min_price,
            catalog_filter.max_price,
            len(props),
        )
        return [to_catalog_entry(p) for p in props]

    async def get_detail(self, property_id: int) -> CatalogEntry | None:
        prop = await self._store.find_by_id(property_id)
        return to_catalog_entry(prop)
