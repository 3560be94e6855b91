"""Global error handling.

This module provides consistent error responses across all API endpoints.
All exceptions are converted to a standardized JSON format with
appropriate HTTP status codes.
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from app.config import settings
from app.core.errors import error_body
from app.core.exceptions import FinanceTrackerError

logger = logging.getLogger(__name__)


async def handle_finance_tracker_error(
    request: Request, exc: FinanceTrackerError
) -> JSONResponse:
    """Handle domain exceptions raised by services and the ownership guard.

    Args:
        request: The incoming request
        exc: The domain exception

    Returns:
        JSONResponse with error details from catalog
    """
    extra = {"error_code": exc.error_code, "path": request.url.path, "method": request.method}
    if settings.debug:
        extra["details"] = exc.details

    if exc.http_status >= 500:
        logger.error(f"Request failed: {exc.error_code}", extra=extra)
    else:
        logger.info(f"Request rejected: {exc.error_code}", extra=extra)

    return JSONResponse(status_code=exc.http_status, content=error_body(exc.error_code))


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle Pydantic validation errors.

    Args:
        request: The incoming request
        exc: The validation error

    Returns:
        JSONResponse with validation error details
    """
    errors = exc.errors()
    error_messages = []

    for error in errors:
        field = ".".join(str(x) for x in error.get("loc", []))
        msg = error.get("msg", "Invalid value")
        error_messages.append(f"{field}: {msg}")

    extra = {"path": request.url.path, "method": request.method}
    if settings.debug:
        extra["errors"] = errors
    logger.warning(f"Validation error on {request.url.path}", extra=extra)

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("VAL_001", message=" | ".join(error_messages)),
    )


async def handle_integrity_error(
    request: Request, exc: IntegrityError
) -> JSONResponse:
    """Handle database integrity errors.

    Args:
        request: The incoming request
        exc: The integrity error

    Returns:
        JSONResponse with error details
    """
    # Do not log str(exc): it can include SQL + bound parameters.
    extra = {"path": request.url.path, "method": request.method}
    if settings.debug:
        logger.exception(f"Database integrity error on {request.url.path}", extra=extra)
    else:
        logger.error(f"Database integrity error on {request.url.path}", extra=extra)

    error_msg = str(exc).lower()
    if "unique" in error_msg or "duplicate" in error_msg:
        return JSONResponse(status_code=status.HTTP_409_CONFLICT, content=error_body("DB_002"))

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=error_body("DB_001")
    )


async def handle_generic_error(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions.

    Args:
        request: The incoming request
        exc: The unexpected exception

    Returns:
        JSONResponse with generic error message
    """
    extra = {
        "error_type": type(exc).__name__,
        "path": request.url.path,
        "method": request.method,
    }
    # In non-debug: do not log str(exc) or traceback (may include sensitive data).
    if settings.debug:
        logger.exception(f"Unexpected error on {request.url.path}", extra=extra)
    else:
        logger.error(f"Unexpected error on {request.url.path}", extra=extra)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=error_body("SYS_001")
    )
