"""Error Handlers — global exception handlers for the dashboard API.

Invariants:
    - DashboardError → its to_response() envelope at the error's http_status
    - Exception (catch-all) → generic 500, never leaks internal details

Design Decisions:
    - Form actions return their failures as values; these handlers only see
      gateway errors that actions deliberately let through (sign-in)
    - Form bodies are read with request.form(), so FastAPI request validation
      never runs and its default handler is left in place
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from dashboard.core.errors import DashboardError, ErrorCategory, ErrorSeverity

logger = logging.getLogger(__name__)

INTERNAL_ERROR_RESPONSE = {
    "error": {
        "code": "INTERNAL_ERROR",
        "message": "An unexpected error occurred",
        "category": ErrorCategory.INTERNAL.value,
        "severity": ErrorSeverity.CRITICAL.value,
    },
}


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DashboardError, dashboard_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


async def dashboard_error_handler(
    request: Request, exc: DashboardError,
) -> JSONResponse:
    logger.error(
        f"{type(exc).__name__} on {request.url.path}: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def unhandled_error_handler(
    request: Request, exc: Exception,
) -> JSONResponse:
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=True,
        extra={"path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=INTERNAL_ERROR_RESPONSE,
    )
