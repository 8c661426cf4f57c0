"""SQLAlchemy ORM models.

Models represent database tables:
- users: Accounts (buyers and sellers)
- properties: Listings shown in the public catalog
- revoked_tokens: Bearer tokens invalidated by logout
"""

from wareland.models.user import User, UserRole
from wareland.models.property import Property
from wareland.models.revoked_token import RevokedToken

__all__ = ["User", "UserRole", "Property", "RevokedToken"]
