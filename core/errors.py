"""
Global exception handling.

Anything that escapes a route is logged with its traceback server-side and
answered with the generic contact failure body, so no internals reach the
caller.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from core.config import settings
from schemas.contact import ContactErrorResponse

logger = logging.getLogger(__name__)


def internal_error_response() -> JSONResponse:
    body = ContactErrorResponse(message=settings.CONTACT_FAILURE_MESSAGE)
    return JSONResponse(
        status_code=500,
        content=body.model_dump(exclude_none=True),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers on the FastAPI app."""

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception on %s %s",
            request.method,
            request.url.path,
            exc_info=exc,
        )
        return internal_error_response()
