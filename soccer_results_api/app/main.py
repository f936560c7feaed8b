"""
Main entrypoint for the Soccer Results API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Importing the app here makes it easy to run with uvicorn
or another ASGI server, e.g.::

    uvicorn soccer_results_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.v1.endpoints import matches
from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.db import get_database_path
from .core.errors import register_error_handlers
from .core.logging_config import setup_logging
from .services.match_service import MatchService
from .stores.base import MatchStore
from .stores.sqlite import SqliteMatchStore


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Stores that keep data on disk create their schema before the
    # first request is served.
    init_schema = getattr(app.state.match_store, "init_schema", None)
    if init_schema is not None:
        init_schema()
    yield


def create_app(settings: Optional[Settings] = None, store: Optional[MatchStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    The store, the service and the routes are wired together here and
    nowhere else: the service is built around ``store`` and kept on
    ``app.state`` where the endpoints pick it up.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module level settings
        read from the environment.
    store : Optional[MatchStore]
        Storage backend.  Defaults to a ``SqliteMatchStore`` on the
        configured database file.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings

    # Initialise logging before anything else so that the code below
    # can safely log messages.
    setup_logging(
        settings.log_level,
        settings.log_file,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
    )

    if store is None:
        store = SqliteMatchStore(get_database_path(settings.database_url))

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.match_store = store
    app.state.match_service = MatchService(store)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[matches.DELETE_OUTCOME_HEADER],
    )
    register_error_handlers(app)

    app.include_router(v1_router, prefix="/api/v1")
    # Clients of the previous service call ``/api/matches`` directly.
    # Serve the same router there, hidden from the OpenAPI document.
    app.include_router(matches.router, prefix="/api/matches", tags=["matches"], include_in_schema=False)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
