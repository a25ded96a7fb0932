"""
Main entrypoint for the Vidly API.

This module assembles the FastAPI application: it configures logging,
checks mandatory settings, installs the error handlers and mounts the
versioned routers under ``/api``.  The app is instantiated at import
time as ``app`` so it can be served with::

    uvicorn vidly_api.app.main:app --reload
"""

from fastapi import FastAPI
from fastapi.middleware.gzip import GZipMiddleware

from .api.v1.router import router as v1_router
from .core.config import check_settings, settings
from .core.db import close_client, get_database, init_db
from .core.errors import register_exception_handlers
from .core.logging_config import install_excepthook, setup_logging


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Raises
    ------
    RuntimeError
        If the JWT private key is not configured.
    """
    setup_logging(settings.log_level, settings.log_file or None)
    install_excepthook()
    check_settings(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    if settings.is_production:
        app.add_middleware(GZipMiddleware, minimum_size=1000)

    register_exception_handlers(app)
    app.include_router(v1_router, prefix="/api")

    @app.on_event("startup")
    async def startup_event() -> None:
        init_db(get_database())

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        close_client()

    return app


app = create_app()
