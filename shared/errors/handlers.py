"""FastAPI exception handlers mapping service errors to responses."""

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from .exceptions import ServiceError

logger = structlog.get_logger(__name__)


async def service_error_handler(request: Request, exc: ServiceError) -> PlainTextResponse:
    """Return the error message verbatim with the error's status code."""
    log = logger.warning if exc.status_code < 500 else logger.error
    log(
        "service_error",
        path=request.url.path,
        method=request.method,
        status_code=exc.status_code,
        error_type=type(exc).__name__,
        error=exc.message,
    )
    return PlainTextResponse(exc.message, status_code=exc.status_code)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceError, service_error_handler)
