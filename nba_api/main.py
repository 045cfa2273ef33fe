"""NBA API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map NbaApiError → empty response with its status code
    - The document store is opened once in the lifespan and closed on shutdown
    - Startup pings the database: fail fast by default, degraded mode if configured

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - create_app(store=...) lets tests inject a store; the lifespan then leaves it alone
    - No /docs, /redoc or /openapi.json: only the three probe prefixes are served
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from nba_api.api.error_handlers import register_error_handlers
from nba_api.api.routes import players, runtime, server_status
from nba_api.config import Settings, get_settings
from nba_api.core.errors import DatabaseError
from nba_api.core.repository_protocols import DocumentStore
from nba_api.infrastructure.database import MongoStore
from nba_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)

    owns_store = app.state.store is None
    if owns_store:
        app.state.store = MongoStore.from_settings(settings)
        await _check_connection(app.state.store, settings)

    logger.info("NBA API started", extra={"database": settings.mongo_database})
    try:
        yield
    finally:
        logger.info("NBA API shutting down")
        if owns_store:
            await app.state.store.close()
            app.state.store = None


async def _check_connection(store: DocumentStore, settings: Settings) -> None:
    """Ping once. Re-raise when fail-fast, otherwise keep serving degraded."""
    try:
        await store.ping()
    except DatabaseError as e:
        logger.critical(
            f"MongoDB unreachable at startup: {e.message}",
            extra={**e.log_extra(), "database": settings.mongo_database},
        )
        if settings.mongo_fail_fast:
            await store.close()
            raise
        logger.warning(
            "mongo_fail_fast disabled: starting without a database, "
            "/mongo and /data will answer 500",
        )


def create_app(
    settings: Settings | None = None, store: DocumentStore | None = None,
) -> FastAPI:
    """Build the application. `store` bypasses the MongoDB connection (tests)."""
    app = FastAPI(
        title="NBA API", version="1.0.0", lifespan=lifespan,
        docs_url=None, redoc_url=None, openapi_url=None,
    )
    app.state.settings = settings or get_settings()
    app.state.store = store

    app.include_router(runtime.router)
    app.include_router(server_status.router)
    app.include_router(players.router)

    register_error_handlers(app)
    return app


app = create_app()
