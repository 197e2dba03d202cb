"""
Main entrypoint for the Zoo API.

This module assembles the FastAPI application, sets up logging, creates
the in-memory store and includes versioned routers.  The ``create_app``
function builds and configures the app, which is then instantiated at
module import time as ``app``.  Run it with uvicorn, e.g.::

    uvicorn zoo_api.app.main:app --reload

Interactive API documentation is served at ``/docs``.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .core.config import settings
from .core.logging_config import setup_logging
from .core.store import ZooStore, seed_demo_data
from .api.v1.router import router as v1_router


def create_app(store: Optional[ZooStore] = None, seed: Optional[bool] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[ZooStore]
        Store shared by all requests of this application.  A new empty
        store is created when omitted.
    seed : Optional[bool]
        Whether to load the demo data on startup.  Defaults to
        ``settings.seed_demo_data``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.store = store if store is not None else ZooStore(settings.event_log_limit)

    app.include_router(v1_router, prefix="/api/v1")

    should_seed = settings.seed_demo_data if seed is None else seed

    @app.on_event("startup")
    async def startup_event() -> None:
        if should_seed:
            seed_demo_data(app.state.store)
        logging.getLogger(__name__).info("%s %s started", settings.project_name, settings.api_version)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
