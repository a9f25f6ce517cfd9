"""Error types and the handlers that turn them into API responses.

Every failure the API can hit (missing store configuration, a store/query
error, a malformed request body, anything unexpected) is answered the same
way: HTTP 500 with a JSON body ``{"error": "<message>"}``.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.base import RequestResponseEndpoint

logger = logging.getLogger(__name__)


class FieldbookError(Exception):
    """Base class for application errors."""


class StoreNotConfiguredError(FieldbookError):
    """Raised when no store connection string is configured."""


def error_response(message: str) -> JSONResponse:
    """Build the uniform error response."""
    return JSONResponse(status_code=500, content={"error": message})


def store_error_message(exc: SQLAlchemyError) -> str:
    """Extract the driver's message from a SQLAlchemy error when there is one."""
    orig = getattr(exc, "orig", None)
    if orig is not None:
        return str(orig).strip()
    return str(exc)


def validation_error_message(exc: RequestValidationError) -> str:
    """Summarize the first request validation problem."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = str(first.get("msg", "Invalid request"))
    return f"{location}: {message}" if location else message


def register_error_handlers(app: FastAPI) -> None:
    """Register the exception handlers on the application.

    Unexpected errors are caught by an HTTP middleware rather than an
    Exception handler, so register this before CORSMiddleware to keep
    error responses inside the CORS layer.
    """

    @app.exception_handler(FieldbookError)
    async def fieldbook_error_handler(request: Request, exc: FieldbookError) -> JSONResponse:
        logger.warning(f"{request.method} {request.url.path} failed: {exc}")
        return error_response(str(exc))

    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        message = store_error_message(exc)
        logger.warning(f"{request.method} {request.url.path} store error: {message}")
        return error_response(message)

    @app.exception_handler(RequestValidationError)
    async def request_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = validation_error_message(exc)
        logger.warning(f"{request.method} {request.url.path} bad request: {message}")
        return error_response(message)

    @app.middleware("http")
    async def unhandled_error_middleware(
        request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error(f"{request.method} {request.url.path} unhandled error", exc_info=exc)
            return error_response(str(exc) or exc.__class__.__name__)
