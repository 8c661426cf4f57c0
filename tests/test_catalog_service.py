"""Tests for the catalog service against the in-memory property store."""

import pytest
from pydantic import ValidationError

from conftest import make_property
from wareland.schemas import SearchCriteria
from wareland.services.catalog import CatalogService
from wareland.stores.memory import InMemoryPropertyStore


@pytest.fixture
def service() -> CatalogService:
    store = InMemoryPropertyStore(
        [
            make_property(1, "Jl. Jakarta 1", 300, "Rumah minimalis"),
            make_property(2, "Bandung", 200, "Villa sejuk"),
            make_property(3, "Surabaya", 450, "Dekat pusat kota JAKARTA style"),
            make_property(4, "Medan", 800, None),
        ]
    )
    return CatalogService(store)


def _ids(entries) -> list[int]:
    return [e.id for e in entries]


@pytest.mark.asyncio
async def test_list_all(service: CatalogService):
    assert _ids(await service.list_all()) == [1, 2, 3, 4]


@pytest.mark.asyncio
async def test_list_all_empty_store_is_not_an_error():
    assert await CatalogService(InMemoryPropertyStore()).list_all() == []


@pytest.mark.asyncio
async def test_search_without_criteria_equals_list_all(service: CatalogService):
    everything = _ids(await service.list_all())
    assert _ids(await service.search(None)) == everything
    assert _ids(await service.search(SearchCriteria())) == everything
    assert _ids(await service.search(SearchCriteria(keyword="  "))) == everything


@pytest.mark.asyncio
async def test_search_keyword_address_or_description(service: CatalogService):
    assert _ids(await service.search(SearchCriteria(keyword="jakarta"))) == [1, 3]


@pytest.mark.asyncio
async def test_search_keyword_and_price_range(service: CatalogService):
    store = InMemoryPropertyStore(
        [
            make_property(1, "Jl. Jakarta 1", 300),
            make_property(2, "Bandung", 200),
        ]
    )
    result = await CatalogService(store).search(
        SearchCriteria(keyword="jakarta", min_price=100, max_price=500)
    )
    assert _ids(result) == [1]


@pytest.mark.asyncio
async def test_search_inverted_range_is_empty(service: CatalogService):
    assert await service.search(SearchCriteria(min_price=500, max_price=100)) == []


@pytest.mark.asyncio
async def test_get_detail(service: CatalogService):
    entry = await service.get_detail(2)
    assert entry is not None
    assert entry.address == "Bandung"


@pytest.mark.asyncio
async def test_get_detail_missing_returns_none(service: CatalogService):
    assert await service.get_detail(999) is None


@pytest.mark.asyncio
async def test_keyword_only_search_blank_returns_nothing():
    store = InMemoryPropertyStore([make_property(1, "Bandung", 200)])
    assert await store.search_by_keyword("   ") == []
    assert [p.id for p in await store.search_by_keyword("BANDUNG")] == [1]


def test_requires_store():
    with pytest.raises(ValueError):
        CatalogService(None)


def test_criteria_rejects_non_finite_prices():
    with pytest.raises(ValidationError):
        SearchCriteria(min_price=float("nan"))
    with pytest.raises(ValidationError):
        SearchCriteria(maxPrice=float("inf"))
