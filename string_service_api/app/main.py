"""
Main entrypoint for the String Service API.

This module assembles the FastAPI application, sets up logging and
includes the string router.  ``create_app`` builds and configures the
app, which is then instantiated at module import time as ``app`` so
that it can be served directly, e.g.::

    uvicorn string_service_api.app.main:app --port 8080
"""

import logging
from typing import Dict, Optional

from fastapi import FastAPI

from .api.router import build_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .services.string_service import LoggingStringService, StringOperations, StringService


def build_service(settings: Settings) -> StringOperations:
    """Create the service instance shared by every request."""
    svc: StringOperations = StringService()
    if settings.service_logging:
        svc = LoggingStringService(svc, logging.getLogger("string_service_api.service"))
    return svc


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to build the app with.  Defaults to the module level
        settings read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the router and
    # service can safely log messages.
    setup_logging(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.include_router(build_router(build_service(settings), settings))

    @app.get("/health", tags=["health"])
    async def health() -> Dict[str, str]:
        return {"status": "ok"}

    logging.getLogger(__name__).info("%s %s ready", settings.project_name, settings.api_version)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
