"""
Main entrypoint for the Site Admin API.

This module assembles the FastAPI application: logging, the external
collaborator clients, the origin guard, the error envelope and the
versioned routers.  ``create_app`` builds and configures the app,
which is then instantiated at module import time as ``app``::

    uvicorn site_admin_api.app.main:app --reload

Collaborators (data store, identity provider, e-mail notifier, content
generator) are created once per process and stored on ``app.state``.
Passing them to ``create_app`` replaces the real clients, which is how
the test suite runs the API against in-memory fakes.

Every error leaves the API as ``{"error": "<message>"}``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.db import DataStore
from .core.identity import IdentityProvider
from .core.logging_config import setup_logging
from .services.ai_service import ContentGenerator
from .services.notification_service import EmailNotifier

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    *,
    data_store: Optional[DataStore] = None,
    identity_provider: Optional[IdentityProvider] = None,
    notifier: Optional[EmailNotifier] = None,
    content_generator: Optional[ContentGenerator] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use; defaults to the environment-derived
        ``settings`` singleton.
    data_store, identity_provider, notifier, content_generator
        Pre-built collaborators.  Any that are omitted are constructed
        from ``settings`` and closed when the application shuts down.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    if not settings.supabase_url or not settings.supabase_service_key:
        logger.warning("Missing Supabase environment variables! Queries will fail.")

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    owned = []
    if data_store is None:
        data_store = DataStore(
            settings.supabase_url, settings.supabase_service_key, timeout=settings.http_timeout
        )
        owned.append(data_store)
    if identity_provider is None:
        identity_provider = IdentityProvider(
            settings.supabase_url,
            settings.supabase_service_key,
            settings.supabase_anon_key,
            timeout=settings.http_timeout,
        )
        owned.append(identity_provider)
    if content_generator is None:
        content_generator = ContentGenerator(settings.gemini_api_key, settings.gemini_model)
        owned.append(content_generator)

    app.state.settings = settings
    app.state.data_store = data_store
    app.state.identity_provider = identity_provider
    app.state.notifier = notifier or EmailNotifier(settings)
    app.state.content_generator = content_generator

    allowed_origins = settings.allowed_origins_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Added after CORS so it wraps it: foreign origins never reach a route.
    @app.middleware("http")
    async def reject_foreign_origins(request: Request, call_next):
        origin = request.headers.get("origin")
        if origin and origin not in allowed_origins:
            logger.warning("Rejected request from origin %s", origin)
            return JSONResponse(status_code=403, content={"error": "Not allowed by CORS"})
        return await call_next(request)

    register_exception_handlers(app)

    app.include_router(v1_router, prefix="/api/v1")

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        for client in owned:
            await client.aclose()

    return app


def register_exception_handlers(app: FastAPI) -> None:
    """Render every error as ``{"error": message}``."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()
        if errors:
            first = errors[0]
            field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
            message = f"Invalid {field}: {first.get('msg')}" if field else str(first.get("msg"))
        else:
            message = "Invalid request"
        return JSONResponse(status_code=400, content={"error": message})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
