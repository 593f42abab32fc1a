"""
Main entrypoint for the Library Stats API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  ``create_app`` builds the app, which is
then instantiated at module import time as ``app`` so it can be served
with uvicorn, e.g.::

    uvicorn library_stats_api.app.main:app --reload

The application title and version come from ``Settings`` in
``core.config``.
"""

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.logging_config import setup_logging


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that router imports and requests can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.include_router(v1_router, prefix="/api/v1")
    return app


app = create_app()
