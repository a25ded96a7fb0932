"""
Error taxonomy and HTTP error handlers.

Services raise the exceptions defined here; route handlers either
translate them into ``HTTPException`` themselves or let them bubble up
to the handlers installed by ``register_exception_handlers``.  Anything
that is not part of the taxonomy is logged and answered with a plain
500 so internal details never leak to clients.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)

GENERIC_FAILURE = "Something failed."


class VidlyError(Exception):
    """Base class for errors with a fixed HTTP status."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class ValidationFailedError(VidlyError):
    """Request data is missing or malformed."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(VidlyError):
    """The requested document does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class AlreadyProcessedError(VidlyError):
    """A rental was already returned and cannot be settled again."""

    status_code = status.HTTP_400_BAD_REQUEST


class StoreFailure(VidlyError):
    """The underlying store rejected or failed a write."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def _first_validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request."
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message


def register_exception_handlers(app: FastAPI) -> None:
    """Install the application's exception handlers on ``app``."""

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": _first_validation_message(exc)},
        )

    @app.exception_handler(VidlyError)
    async def vidly_exception_handler(request: Request, exc: VidlyError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc, exc_info=exc)
            return JSONResponse(status_code=exc.status_code, content={"detail": GENERIC_FAILURE})
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

    @app.exception_handler(PyMongoError)
    async def store_exception_handler(request: Request, exc: PyMongoError) -> JSONResponse:
        logger.error("Database error on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": GENERIC_FAILURE},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": GENERIC_FAILURE},
        )
