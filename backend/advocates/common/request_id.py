"""Request ID middleware with listing-aware request logs."""

import logging
import time
import uuid
from typing import Any, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from advocates.core.errors import general_exception_handler

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

LISTING_SCALAR_PARAMS = ("search", "page", "limit", "sortField", "sortDirection")
LISTING_MULTI_PARAMS = ("degrees", "specialties")


def listing_context(request: Request) -> dict[str, Any]:
    """Listing parameters present on the request, repeated filters kept as lists."""
    params = request.query_params
    context: dict[str, Any] = {
        name: params[name] for name in LISTING_SCALAR_PARAMS if name in params
    }
    for name in LISTING_MULTI_PARAMS:
        values = params.getlist(name)
        if values:
            context[name] = values
    return context


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Assigns or echoes X-Request-ID and logs each request with its latency.

    Unhandled errors are rendered here as the generic 500 so that the response
    still carries the request id.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id
        base = {"request_id": request_id, "method": request.method, "path": request.url.path}

        started = time.perf_counter()
        logger.info("Request started", extra={**base, "listing": listing_context(request)})

        try:
            response = await call_next(request)
        except Exception as e:
            response = await general_exception_handler(request, e)

        response.headers[REQUEST_ID_HEADER] = request_id
        logger.info(
            "Request completed",
            extra={
                **base,
                "status_code": response.status_code,
                "latency_ms": round((time.perf_counter() - started) * 1000, 1),
            },
        )
        return response
