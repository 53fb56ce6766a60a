"""Error responses rendered as ``{"error": ...}`` bodies."""

import logging
from typing import Any

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from referent.api.models import ErrorResponse

logger = logging.getLogger(__name__)

INVALID_REQUEST_MESSAGE = "Некорректный запрос"


class UpstreamHTTPException(HTTPException):
    """HTTP error carrying the parsed body of a failed upstream call."""

    def __init__(self, status_code: int, detail: str, details: dict[str, Any] | None) -> None:
        """Initialise UpstreamHTTPException.

        :param status_code: Status returned to the caller.
        :param detail: Human-readable message.
        :param details: Upstream error body.
        """
        super().__init__(status_code=status_code, detail=detail)
        self.details = details


def _error_response(
    status_code: int,
    message: str,
    details: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    body = ErrorResponse(error=message, details=details).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=body, headers=headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors as ``{"error": detail}``.

    :param request: The failed request.
    :param exc: The raised HTTP exception.
    :returns: JSON error response.
    """
    details = getattr(exc, "details", None)
    return _error_response(exc.status_code, str(exc.detail), details, exc.headers)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render malformed request bodies as 400 errors.

    :param request: The failed request.
    :param exc: The validation error.
    :returns: JSON error response.
    """
    logger.warning(f"Invalid request to {request.url.path}: {exc.errors()}")
    return _error_response(status.HTTP_400_BAD_REQUEST, INVALID_REQUEST_MESSAGE)


def register_error_handlers(application: FastAPI) -> None:
    """Install the error handlers on an application.

    :param application: The FastAPI application.
    """
    application.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    application.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
