"""
Request Middleware for tracking.

Provides:
- Request ID generation and tracking
- Request timing
"""

import time
import uuid
import logging
from typing import Callable
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Middleware to add request context (ID, timing) to all requests.

    Adds headers:
    - X-Request-ID: Unique identifier for request tracing
    - X-Response-Time: Processing time in milliseconds
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get("X-Request-ID")
        if not request_id:
            request_id = new_request_id()

        # Route handlers and exception handlers read it from here
        request.state.request_id = request_id

        start_time = time.perf_counter()
        response = await call_next(request)
        process_time = (time.perf_counter() - start_time) * 1000  # ms

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Response-Time"] = f"{process_time:.2f}ms"

        # Path only: the read-style draft route carries user text in the query
        logger.info(
            f"[{request_id}] {request.method} {request.url.path} "
            f"- {response.status_code} ({process_time:.2f}ms)"
        )

        return response


def new_request_id() -> str:
    return f"req_{uuid.uuid4().hex[:16]}"


def get_request_id(request: Request) -> str:
    """Get request ID from request state, minting and storing one if absent."""
    request_id = getattr(request.state, "request_id", None)
    if not request_id:
        request_id = new_request_id()
        request.state.request_id = request_id
    return request_id
