"""FastAPI application with session middleware, error handlers and routers."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.sessions import SessionMiddleware

from dynaswitch.api.routes import admin, health, pages, records
from dynaswitch.core.config import AppSettings
from dynaswitch.core.exceptions import ConfigurationError, DynaSwitchError
from dynaswitch.credentials.client_factory import ClientFactory
from dynaswitch.credentials.registry import CredentialRegistry
from dynaswitch.credentials.session import SESSION_USER_KEY, SessionResolver
from dynaswitch.observability.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log the configured identifiers once the server starts."""
    registry: CredentialRegistry = app.state.registry
    if not len(registry):
        logger.warning("no_users_configured",
                       hint="APP_USERS is empty; user switching will not function correctly.")
    else:
        logger.info("app_started", users=list(registry.list()))
    yield


def create_app(
    settings: AppSettings | None = None,
    registry: CredentialRegistry | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    The credential registry is built here, once, from ``settings`` unless
    one is passed in.
    """
    if settings is None:
        settings = AppSettings()
    setup_logging(
        level=settings.log_level,
        format="json" if settings.is_production else settings.log_format,
    )

    if not settings.secret:
        raise ConfigurationError("APP_SECRET must be set to sign session cookies.")
    if registry is None:
        registry = CredentialRegistry.from_settings(settings)

    app = FastAPI(
        title="DynaSwitch",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.registry = registry
    app.state.session_resolver = SessionResolver(registry)
    app.state.client_factory = ClientFactory(registry, endpoint_url=settings.dynamodb.endpoint_url)

    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.secret,
        https_only=settings.is_production,
        same_site="lax",
    )

    _register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(pages.router)
    app.include_router(admin.router)
    app.include_router(records.router)

    logger.info("app_created", environment=settings.environment,
                table_name=settings.dynamodb.table_name, users=len(registry))
    return app


def _session_user(request: Request) -> str | None:
    if "session" not in request.scope:
        return None
    return request.session.get(SESSION_USER_KEY)


def _register_exception_handlers(app: FastAPI) -> None:

    @app.exception_handler(DynaSwitchError)
    async def dynaswitch_error_handler(request: Request, exc: DynaSwitchError) -> JSONResponse:
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            "request_failed",
            error_type=type(exc).__name__,
            message=exc.message,
            error=exc.detail,
            identifier=_session_user(request),
            method=request.method,
            path=request.url.path,
        )
        content: dict[str, str] = {"message": exc.message}
        if exc.detail:
            content["error"] = exc.detail
        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning("invalid_request_body", path=request.url.path, errors=str(exc.errors()))
        return JSONResponse(
            status_code=400,
            content={"message": "Invalid request body.", "error": str(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "unexpected_error",
            error=str(exc),
            error_type=type(exc).__name__,
            identifier=_session_user(request),
            path=request.url.path,
        )
        return JSONResponse(status_code=500, content={"message": "An unexpected error occurred."})
