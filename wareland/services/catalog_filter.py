"""Catalog filter builder.

Turns optional search criteria into a single normalized filter:
- keyword: case-insensitive substring match on address OR description
- min_price / max_price: inclusive price bounds

A blank or whitespace-only keyword is treated as absent. Absent fields add no
condition, so empty criteria select every property.

The same CatalogFilter renders a SQLAlchemy WHERE clause (PostgreSQL store)
and an in-process predicate (memory store), so both backends agree.
"""

from dataclasses import dataclass

from sqlalchemy import ColumnElement, and_, func, or_, select, true
from sqlalchemy.sql import Select

from wareland.models import Property
from wareland.schemas import SearchCriteria


@dataclass(frozen=True)
class CatalogFilter:
    """Normalized search filter. keyword is already trimmed and lowercased."""

    keyword: str | None = None
    min_price: float | None = None
    max_price: float | None = None

    def clause(self) -> ColumnElement[bool]:
        """Render the filter as a SQL boolean expression over Property."""
        conditions: list[ColumnElement[bool]] = [true()]

        if self.keyword is not None:
            # autoescape: "%" and "_" in user input match literally
            conditions.append(
                or_(
                    func.lower(Property.address).contains(self.keyword, autoescape=True),
                    func.lower(Property.description).contains(self.keyword, autoescape=True),
                )
            )
        if self.min_price is not None:
            conditions.append(Property.price >= self.min_price)
        if self.max_price is not None:
            conditions.append(Property.price <= self.max_price)

        return and_(*conditions)

    def matches(self, prop: Property) -> bool:
        """Evaluate the filter against an in-memory property."""
        if self.keyword is not None:
            address = (prop.address or "").lower()
            description = (prop.description or "").lower()
            if self.keyword not in address and self.keyword not in description:
                return False
        if self.min_price is not None and prop.price < self.min_price:
            return False
        if self.max_price is not None and prop.price > self.max_price:
            return False
        return True


def normalize_keyword(keyword: str | None) -> str | None:
    """Trim and lowercase a keyword. Blank input becomes None."""
    if keyword is None:
        return None
    k = keyword.strip().lower()
    return k or None


def build_catalog_filter(criteria: SearchCriteria | None) -> CatalogFilter:
    """Build the full-criteria filter. None criteria selects everything."""
    if criteria is None:
        return CatalogFilter()
    return CatalogFilter(
        keyword=normalize_keyword(criteria.keyword),
        min_price=criteria.min_price,
        max_price=criteria.max_price,
    )


def build_keyword_filter(keyword: str | None) -> CatalogFilter | None:
    """Build the keyword-only filter.

    Unlike build_catalog_filter, a blank keyword does not mean "select all":
    it returns None and callers return an empty result.
    """
    k = normalize_keyword(keyword)
    if k is None:
        return None
    return CatalogFilter(keyword=k)


def catalog_query(catalog_filter: CatalogFilter) -> Select[tuple[Property]]:
    """SELECT statement for properties matching the filter, ordered by id."""
    return select(Property).where(catalog_filter.clause()).order_by(Property.id.asc())
