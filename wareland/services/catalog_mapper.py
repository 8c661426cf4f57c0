"""Property -> CatalogEntry mapping.

Straight field copy, no validation or formatting. None maps to None.
"""

from wareland.models import Property, User
from wareland.schemas import CatalogEntry, Seller


def to_seller(user: User | None) -> Seller | None:
    """Map a user record to its public seller profile."""
    if user is None:
        return None
    return Seller(
        user_id=user.id,
        username=user.username,
        name=user.name,
        email=user.email,
        phone_number=user.phone_number,
        role=user.role,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


def to_catalog_entry(prop: Property | None) -> CatalogEntry | None:
    """Map a property (and its owner) to the public catalog shape."""
    if prop is None:
        return None
    return CatalogEntry(
        id=prop.id if prop.id is not None else 0,
        address=prop.address,
        price=prop.price,
        description=prop.description,
        seller=to_seller(prop.owner),
    )
