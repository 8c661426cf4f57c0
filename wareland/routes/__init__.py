"""API routes.

Access policy is declared here, per mounted router, not inside handlers:
- /api/catalog/*, /api/auth/register, /api/auth/login: open
- everything else: requires an authenticated identity
"""

from fastapi import APIRouter, Depends

from wareland.dependencies import require_identity
from wareland.routes import auth, catalog, users

api_router = APIRouter()

# Public catalog
api_router.include_router(catalog.router, prefix="/api/catalog", tags=["catalog"])

# Auth entry points
api_router.include_router(auth.router, prefix="/api/auth", tags=["auth"])

# Authenticated endpoints
protected = [Depends(require_identity)]
api_router.include_router(auth.session_router, prefix="/api/auth", tags=["auth"], dependencies=protected)
api_router.include_router(users.router, prefix="/api/users", tags=["users"], dependencies=protected)
