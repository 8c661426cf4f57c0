"""Public catalog endpoints.

GET /api/catalog/properties              - every listing
GET /api/catalog/properties/search       - keyword / price range search
GET /api/catalog/properties/{propertyId} - single listing

Routers are thin: bind parameters, call the catalog service, wrap the result.
Empty results and unknown ids are successful responses with an explanatory
message, not HTTP errors.
"""

from fastapi import APIRouter, Depends, Path, Query

from wareland.dependencies import get_catalog_service
from wareland.schemas import ApiResponse, CatalogEntry, SearchCriteria
from wareland.services.catalog import CatalogService

router = APIRouter()

NOT_AVAILABLE_MESSAGE = "Properti tidak tersedia"


def _list_envelope(data: list[CatalogEntry]) -> ApiResponse[list[CatalogEntry]]:
    if not data:
        return ApiResponse[list[CatalogEntry]].ok(data, message=NOT_AVAILABLE_MESSAGE)
    return ApiResponse[list[CatalogEntry]].ok(data)


@router.get("/properties", response_model=ApiResponse[list[CatalogEntry]])
async def get_all_properties(
    catalog: CatalogService = Depends(get_catalog_service),
) -> ApiResponse[list[CatalogEntry]]:
    """List every property in the catalog."""
    return _list_envelope(await catalog.list_all())


@router.get("/properties/search", response_model=ApiResponse[list[CatalogEntry]])
async def search_properties(
    keyword: str | None = Query(
        default=None,
        description="Case-insensitive match on address or description",
        examples=["jakarta"],
    ),
    min_price: float | None = Query(
        default=None, alias="minPrice", allow_inf_nan=False, description="Inclusive lower bound"
    ),
    max_price: float | None = Query(
        default=None, alias="maxPrice", allow_inf_nan=False, description="Inclusive upper bound"
    ),
    catalog: CatalogService = Depends(get_catalog_service),
) -> ApiResponse[list[CatalogEntry]]:
    """Search the catalog. Every parameter is optional; none at all lists everything."""
    criteria = SearchCriteria(keyword=keyword, min_price=min_price, max_price=max_price)
    return _list_envelope(await catalog.search(criteria))


@router.get("/properties/{property_id}", response_model=ApiResponse[CatalogEntry])
async def get_property_detail(
    property_id: int = Path(description="Property ID"),
    catalog: CatalogService = Depends(get_catalog_service),
) -> ApiResponse[CatalogEntry]:
    """Get a single property. An unknown id returns data=null with a message."""
    detail = await catalog.get_detail(property_id)
    if detail is None:
        return ApiResponse[CatalogEntry].ok(None, message=NOT_AVAILABLE_MESSAGE)
    return ApiResponse[CatalogEntry].ok(detail)
