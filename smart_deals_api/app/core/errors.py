"""
Error types and their HTTP translation.

Client‑facing failures are raised as ``ApiError`` subclasses from the
service and endpoint layers and rendered as ``{"message": ...}`` with
the status code carried by the exception.  Store failures
(``PyMongoError``) from any route are logged and rendered as a 500
response so that no handler leaks an unhandled driver exception.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base class for errors reported to the caller with a message."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class MissingQueryParameter(ApiError):
    """A required query string parameter was absent or empty."""


class InvalidIdentifier(ApiError):
    """A path identifier could not be parsed into an ``ObjectId``."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid identifier: {value}")
        self.value = value


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def store_error_handler(request: Request, exc: PyMongoError) -> JSONResponse:
    logger.error(
        "Store operation failed for %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Server Error", "error": str(exc)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the handlers above to ``app``."""
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(PyMongoError, store_error_handler)
