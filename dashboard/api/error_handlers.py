"""Error Handlers — global exception handlers for the dashboard API.

Invariants:
    - PersistenceError (strict persistence only) → 503 in the invoice form's
      {errors, message} shape, so the form shows one failure message
    - Other DashboardErrors → their structured {"error": {...}} envelope
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Request bodies are read as raw forms and validated by the services, so
      there is no RequestValidationError layer; rejected forms are ErrorState,
      rendered by the routes as 422 and never seen here
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from dashboard.core.errors import DashboardError, ErrorSeverity, PersistenceError
from dashboard.core.outcomes import ErrorState

logger = logging.getLogger(__name__)


def persistence_failure_message(operation: str) -> str:
    return f"Database Error: Failed to {operation} invoice"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_persistence_error_handler(app)
    _register_dashboard_error_handler(app)
    _register_generic_error_handler(app)


def _register_persistence_error_handler(app: FastAPI) -> None:

    @app.exception_handler(PersistenceError)
    async def persistence_error_handler(request: Request, exc: PersistenceError):
        """Invoice write failed under strict persistence; nothing was revalidated."""
        logger.error(
            f"PersistenceError: {exc.message}",
            extra={
                "error_code": exc.code, "operation": exc.operation,
                "invoice_id": exc.context.invoice_id, "path": request.url.path,
            },
        )
        state = ErrorState(message=persistence_failure_message(exc.operation))
        return JSONResponse(status_code=exc.http_status, content=state.to_response())


def _register_dashboard_error_handler(app: FastAPI) -> None:

    @app.exception_handler(DashboardError)
    async def dashboard_error_handler(request: Request, exc: DashboardError):
        """Auth and database errors raised outside the form flow."""
        log = logger.warning if exc.http_status < 500 else logger.error
        log(
            f"DashboardError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )
