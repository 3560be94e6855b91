from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import IntegrityError

from app.api.middleware.error_handler import (
    handle_finance_tracker_error,
    handle_generic_error,
    handle_integrity_error,
    handle_validation_error,
)
from app.api.middleware.logging import RequestLoggingMiddleware
from app.api.v1 import router as v1_router
from app.api.v1.health import router as health_router
from app.config import settings
from app.core.exceptions import FinanceTrackerError
from app.core.logging import setup_logging
from app.db.session import async_engine


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level)
    yield
    await async_engine.dispose()


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.app_name,
        description="Personal finance tracker: categories, income and expenses",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(RequestLoggingMiddleware)

    # Register exception handlers (order matters - most specific first)
    app.add_exception_handler(FinanceTrackerError, handle_finance_tracker_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(IntegrityError, handle_integrity_error)
    app.add_exception_handler(Exception, handle_generic_error)

    app.include_router(health_router)
    app.include_router(v1_router)

    return app


app = create_app()
