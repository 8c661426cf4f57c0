"""FastAPI application entry point.

WareLand API - public property catalog and account authentication.
"""

from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator
from datetime import timedelta
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from wareland.dependencies import AppServices
from wareland.errors import BusinessException, ValidationFailedException
from wareland.routes import api_router
from wareland.schemas import ApiResponse, Violation
from wareland.services.auth_filter import AuthFilter
from wareland.services.catalog import CatalogService
from wareland.services.tokens import TokenProvider
from wareland.services.users import UserService
from wareland.settings import Settings, get_settings
from wareland.stores.memory import InMemoryPropertyStore, InMemoryRevokedTokenStore, InMemoryUserStore
from wareland.stores.postgres import close_db, init_db, ping_db
from wareland.stores.properties import PropertyStore, SqlPropertyStore
from wareland.stores.revoked_tokens import RevokedTokenStore, SqlRevokedTokenStore
from wareland.stores.users import SqlUserStore, UserStore

logger = logging.getLogger("uvicorn.error")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Opens the Postgres pool when the app runs on the SQL stores.
    """
    settings: Settings = app.state.settings
    uses_postgres = settings.store_backend == "postgres"

    if uses_postgres:
        try:
            await init_db()
            await ping_db()
            logger.info("Postgres connected")
        except Exception:
            logger.exception("Postgres init failed")
    else:
        logger.info("Using in-memory stores")

    yield

    if uses_postgres:
        await close_db()


def build_services(
    settings: Settings,
    *,
    property_store: PropertyStore | None = None,
    user_store: UserStore | None = None,
    revoked_token_store: RevokedTokenStore | None = None,
) -> AppServices:
    """Wire stores into services. Stores not passed in follow settings.store_backend."""
    memory = settings.store_backend == "memory"
    if property_store is None:
        property_store = InMemoryPropertyStore() if memory else SqlPropertyStore()
    if user_store is None:
        user_store = InMemoryUserStore() if memory else SqlUserStore()
    if revoked_token_store is None:
        revoked_token_store = InMemoryRevokedTokenStore() if memory else SqlRevokedTokenStore()

    token_provider = TokenProvider(
        secret=settings.jwt_secret,
        ttl=timedelta(seconds=settings.jwt_ttl_seconds),
    )
    return AppServices(
        catalog=CatalogService(property_store),
        users=UserService(user_store, revoked_token_store, token_provider),
        auth_filter=AuthFilter(token_provider, revoked_token_store),
    )


def create_app(
    settings: Settings | None = None,
    *,
    property_store: PropertyStore | None = None,
    user_store: UserStore | None = None,
    revoked_token_store: RevokedTokenStore | None = None,
) -> FastAPI:
    """Create and configure FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Public property catalog and account API",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    app.state.settings = settings
    app.state.services = build_services(
        settings,
        property_store=property_store,
        user_store=user_store,
        revoked_token_store=revoked_token_store,
    )

    # Bearer token filter: attaches a SecurityContext to every request
    @app.middleware("http")
    async def authenticate(request: Request, call_next):
        auth_filter: AuthFilter = request.app.state.services.auth_filter
        request.state.security = await auth_filter.authenticate(
            request.method,
            request.headers.get("Authorization"),
        )
        return await call_next(request)

    # CORS middleware (added last so it wraps the auth filter)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type"],
        expose_headers=["Authorization"],
        max_age=3600,
    )

    @app.exception_handler(BusinessException)
    async def business_exception_handler(request: Request, exc: BusinessException) -> JSONResponse:
        """Render business errors as a failure envelope."""
        data = None
        if isinstance(exc, ValidationFailedException):
            data = [v.model_dump() for v in exc.violations]
        return JSONResponse(
            status_code=exc.status_code,
            content=ApiResponse.error(exc.message, data=data).model_dump(),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Unparseable query/path/body values become a 400 envelope with violations."""
        violations = [
            Violation(
                field=".".join(str(part) for part in err.get("loc", ())[1:]) or "request",
                rule=err.get("type", "invalid"),
                message=err.get("msg", "Invalid value"),
            ).model_dump()
            for err in exc.errors()
        ]
        return JSONResponse(
            status_code=400,
            content=ApiResponse.error("Request tidak valid", data=violations).model_dump(),
        )

    # Exception handler for structured error format
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Global exception handler returning the failure envelope."""
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=ApiResponse.error(str(exc) if settings.debug else "Internal server error").model_dump(),
        )

    # Health check endpoint
    @app.get("/health", tags=["health"])
    async def health_check() -> dict[str, bool]:
        """Health check endpoint."""
        return {"ok": True}

    app.include_router(api_router)

    return app


# Application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "wareland.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
