"""
Error taxonomy and its translation into HTTP responses.

Services raise subclasses of ``DevotionalAPIError``; the handlers
registered by ``register_error_handlers`` turn them into a JSON body of
the form ``{"error": "<message>"}`` with the matching status code.  A
failure in one request never affects the next one.
"""

import logging
from typing import Iterable, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class DevotionalAPIError(Exception):
    """Base error carrying the HTTP status and a client-safe message."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class PayloadValidationError(DevotionalAPIError):
    """A required field is missing, empty or of the wrong type.

    The individual ``reasons`` are appended to the client-facing message.
    """

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, reasons: Optional[Iterable[str]] = None) -> None:
        self.reasons = list(reasons or [])
        if self.reasons:
            message = f"{message} {'; '.join(self.reasons)}"
        super().__init__(message)


class DevotionalNotFound(DevotionalAPIError):
    """No live devotional matches the requested id."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = "Devotional not found.") -> None:
        super().__init__(message)


class StoreError(DevotionalAPIError):
    """A statement failed inside the SQLite store."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(DevotionalAPIError)
    async def devotional_error_handler(request: Request, exc: DevotionalAPIError) -> JSONResponse:
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Malformed JSON bodies and bad path/query parameters land here.
        return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request.")

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error.")
