"""Request logging middleware with PII filtering.

This module provides structured logging for all API requests with:
- Unique request IDs for tracing
- Request duration tracking
- User context (when authenticated)
- PII filtering so emails, tokens and card-like numbers never reach the logs
"""

import logging
import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.logging import filter_pii

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log all HTTP requests with PII filtering."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id
        start_time = time.perf_counter()
        path = filter_pii(str(request.url.path))

        logger.info(
            "Request started",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": path,
                "client_ip": request.client.host if request.client else None,
            },
        )

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                "Request failed",
                extra={
                    "request_id": request_id,
                    "user_id": _current_user_id(request),
                    "method": request.method,
                    "path": path,
                    "duration_ms": _elapsed_ms(start_time),
                    "error_type": type(exc).__name__,
                },
            )
            raise

        response.headers["X-Request-ID"] = request_id

        # The user is attached by the auth dependency, so it's only known afterwards
        logger.info(
            "Request completed",
            extra={
                "request_id": request_id,
                "user_id": _current_user_id(request),
                "method": request.method,
                "path": path,
                "status_code": response.status_code,
                "duration_ms": _elapsed_ms(start_time),
            },
        )

        return response


def _elapsed_ms(start_time: float) -> int:
    return int((time.perf_counter() - start_time) * 1000)


def _current_user_id(request: Request) -> int | None:
    user = getattr(request.state, "user", None)
    return getattr(user, "id", None)

