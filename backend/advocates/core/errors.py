"""Error handling and consistent error response format."""

import logging
from typing import Any

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from advocates.core.app_exceptions import AppError

logger = logging.getLogger(__name__)


def get_request_id(request: Request) -> str:
    """Request id assigned by RequestIDMiddleware, or "unknown" outside it."""
    return getattr(request.state, "request_id", "unknown")


class ErrorResponse(BaseModel):
    """Error envelope.

    Format: {error, details?}. The request id travels in the X-Request-ID
    header rather than the body.
    """

    error: str
    details: Any | None = None


def error_response(status_code: int, message: str, details: Any | None = None) -> JSONResponse:
    """Build a JSON error response in the standard envelope."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message, details=details).model_dump(exclude_none=True),
    )


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Handle application errors (QueryExecutionError and friends)."""
    logger.error(
        "Request failed with application error",
        extra={
            "request_id": get_request_id(request),
            "path": request.url.path,
            "error_type": type(exc).__name__,
            "operation": getattr(exc, "operation", None),
            "cause": repr(exc.__cause__) if exc.__cause__ else None,
        },
    )
    return error_response(exc.status_code, exc.message)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle request validation errors (422)."""
    details: list[dict[str, Any]] = []
    for error in exc.errors():
        details.append(
            {
                "field": ".".join(str(loc) for loc in error.get("loc", [])),
                "issue": error.get("msg", "Validation error"),
                "type": error.get("type", "validation_error"),
            }
        )

    return error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "Invalid request parameters",
        details=details,
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handle HTTP exceptions."""
    if isinstance(exc.detail, str):
        message = exc.detail
    else:
        message = str(exc.detail)
    return error_response(exc.status_code, message)


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unhandled exceptions (500). Never exposes internal detail."""
    logger.error(
        "Unhandled exception",
        extra={"request_id": get_request_id(request), "path": request.url.path},
        exc_info=exc,
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
