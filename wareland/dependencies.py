"""FastAPI dependencies.

Services are built once in create_app() and kept on app.state.services;
these helpers hand them to routes. The SecurityContext is put on
request.state by the auth middleware and passed to services explicitly.
"""

from dataclasses import dataclass

from fastapi import Depends, Request

from wareland.errors import AuthenticationRequiredException
from wareland.services.auth_filter import ANONYMOUS, AuthFilter, SecurityContext
from wareland.services.catalog import CatalogService
from wareland.services.users import UserService


@dataclass
class AppServices:
    """Everything a request may need, wired by create_app()."""

    catalog: CatalogService
    users: UserService
    auth_filter: AuthFilter


def get_services(request: Request) -> AppServices:
    return request.app.state.services


def get_catalog_service(services: AppServices = Depends(get_services)) -> CatalogService:
    return services.catalog


def get_user_service(services: AppServices = Depends(get_services)) -> UserService:
    return services.users


def get_security_context(request: Request) -> SecurityContext:
    return getattr(request.state, "security", ANONYMOUS)


def require_identity(ctx: SecurityContext = Depends(get_security_context)) -> SecurityContext:
    """Router-level guard: the request must carry an authenticated identity."""
    if not ctx.is_authenticated:
        raise AuthenticationRequiredException("Autentikasi diperlukan")
    return ctx
