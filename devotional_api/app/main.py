"""
Main entrypoint for the Devotional API.

This module assembles the FastAPI application: it sets up logging,
builds the SQLite store client and the devotional service, registers
error handlers and includes the routers.  ``create_app`` accepts an
explicit ``Settings`` so tests can build isolated applications; the
module-level ``app`` uses the environment-derived settings and can be
served directly::

    uvicorn devotional_api.app.main:app --reload
"""

from typing import Optional

from fastapi import FastAPI

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.db import Database
from .core.errors import register_error_handlers
from .core.logging_config import setup_logging
from .services.devotional_service import DevotionalService


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use; defaults to the settings read from the
        environment at import time.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so startup can log.
    setup_logging(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    db = Database.from_settings(settings)
    app.state.devotional_service = DevotionalService(db)

    register_error_handlers(app)
    app.include_router(router)

    @app.on_event("startup")
    async def startup_event() -> None:
        # Create the database file and table on first start.
        db.init_schema()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
