"""Error Handlers — global exception handlers for the NBA API.

Invariants:
    - NbaApiError → exc.http_status with an empty body
    - Exception (catch-all) → 500 with an empty body, never leaks internal details
    - Every handled error is logged with the request path

Design Decisions:
    - Empty bodies: probe clients only read the status code on failure
"""

import logging

from fastapi import FastAPI, Request, Response, status

from nba_api.core.errors import NbaApiError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_nba_api_error_handler(app)
    _register_generic_error_handler(app)


def _register_nba_api_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(NbaApiError)
    async def nba_api_error_handler(request: Request, exc: NbaApiError):
        """Handle all NBA API domain/infrastructure errors."""
        logger.error(
            f"NbaApiError: {exc.message}",
            extra={**exc.log_extra(), "path": request.url.path},
        )
        return Response(status_code=exc.http_status)


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path},
        )
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
