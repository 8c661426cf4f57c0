"""Schemas for the public catalog endpoints (/api/catalog)."""

from datetime import datetime

from pydantic import BaseModel, Field


class Seller(BaseModel):
    """Public profile of the user who listed a property."""

    user_id: int = Field(alias="userId")
    username: str
    name: str
    email: str
    phone_number: str | None = Field(alias="phoneNumber", default=None)
    role: str
    created_at: datetime | None = Field(alias="createdAt", default=None)
    updated_at: datetime | None = Field(alias="updatedAt", default=None)

    model_config = {"populate_by_name": True}


class CatalogEntry(BaseModel):
    """A property as exposed by the public catalog."""

    id: int
    address: str
    price: float
    description: str | None = None
    seller: Seller | None = None

    model_config = {"populate_by_name": True}


class SearchCriteria(BaseModel):
    """Optional catalog search parameters. No field constrains another."""

    keyword: str | None = None
    min_price: float | None = Field(alias="minPrice", default=None, allow_inf_nan=False)
    max_price: float | None = Field(alias="maxPrice", default=None, allow_inf_nan=False)

    model_config = {"populate_by_name": True}
