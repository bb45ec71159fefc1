"""
FastAPI Application Factory.
Creates and configures the FastAPI application with routers, middleware, error mapping and DI.

Error mapping (body: {"timestamp", "status", "errors": [{"message"}]}):
- NotificationError        → 422 (every accumulated validation error)
- NotFoundError            → 404
- ValueError / bad request → 400
- InternalError            → 500
- pydantic ValidationError → 500 (an outgoing model rejected stored data)
- other DomainError        → 422
- anything else            → 500
"""

import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.middleware.base import BaseHTTPMiddleware

from backstage import __version__
from backstage.config.logging_config import (
    NO_CORRELATION_ID,
    correlation_id_var,
    setup_logging,
)
from backstage.config.settings import Config
from backstage.domain.exceptions import (
    DomainError,
    InternalError,
    NotFoundError,
    NotificationError,
)
from backstage.domain.validation.error import Error
from backstage.observability.metrics import (
    MetricsErrorType,
    increment_error,
    observe_request_latency,
)
from backstage.presentation.api import metrics_router, work_orders_router
from backstage.setup.ioc.container import create_container

# Setup logging
setup_logging(Config.LOG_LEVEL, Config.LOG_PATH)

logger = logging.getLogger(__name__)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set correlation ID from request headers."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID", NO_CORRELATION_ID)

        # Set in contextvars (propagates to async tasks and logging)
        correlation_id_var.set(correlation_id)

        response = await call_next(request)
        response.headers["X-Correlation-ID"] = correlation_id

        return response


class RequestLatencyMiddleware(BaseHTTPMiddleware):
    """Records http_server_request_duration_seconds per route template."""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)

        # Templates keep label cardinality bounded (/work-orders/{work_order_id})
        route = request.scope.get("route")
        route_path = getattr(route, "path", "unmatched")
        observe_request_latency(
            request.method,
            route_path,
            response.status_code,
            time.perf_counter() - start,
        )
        return response


def error_response(status_code: int, errors: list[Error]) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "status": status_code,
            "errors": [{"message": error.message} for error in errors],
        },
    )


def errors_of(exc: DomainError) -> list[Error]:
    return list(exc.errors) or [Error(exc.message)]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager.

    - Startup: container already created and wired in create_fastapi_app
    - Shutdown: close the DI container (closes the Redis client)
    """
    logger.info("FastAPI application started. DI container initialized.")
    yield
    await app.state.dishka_container.close()
    logger.info("FastAPI application shutdown. DI container closed.")


def create_fastapi_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        container: DI container to use; defaults to the Redis-backed one

    Returns:
        FastAPI application instance
    """
    app = FastAPI(
        title="Backstage Work Orders API",
        description="Kitchen work-order service: receive, track and broadcast order preparation",
        version=__version__,
        lifespan=lifespan,
    )

    # Setup Dishka BEFORE app starts (must add middleware before startup)
    setup_dishka(container or create_container(), app)

    app.add_middleware(RequestLatencyMiddleware)
    app.add_middleware(CorrelationIdMiddleware)

    @app.exception_handler(NotificationError)
    async def notification_error_handler(request: Request, exc: NotificationError):
        errors = errors_of(exc)
        logger.warning(f"Validation failed: {[error.message for error in errors]}")
        increment_error(MetricsErrorType.VALIDATION)
        return error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, errors)

    @app.exception_handler(NotFoundError)
    async def not_found_error_handler(request: Request, exc: NotFoundError):
        logger.info(exc.message)
        increment_error(MetricsErrorType.NOT_FOUND)
        return error_response(status.HTTP_404_NOT_FOUND, errors_of(exc))

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        logger.warning(f"Invalid argument: {exc}")
        increment_error(MetricsErrorType.INVALID_ARGUMENT)
        return error_response(status.HTTP_400_BAD_REQUEST, [Error(str(exc))])

    @app.exception_handler(ValidationError)
    async def response_validation_error_handler(
        request: Request, exc: ValidationError
    ):
        logger.error(f"Could not build response model: {exc}")
        increment_error(MetricsErrorType.INTERNAL)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            [Error("Internal server error")],
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(
        request: Request, exc: RequestValidationError
    ):
        errors = [
            Error(f"{'.'.join(str(part) for part in e['loc'])}: {e['msg']}")
            for e in exc.errors()
        ]
        logger.warning(f"Malformed request: {[error.message for error in errors]}")
        increment_error(MetricsErrorType.INVALID_ARGUMENT)
        return error_response(status.HTTP_400_BAD_REQUEST, errors)

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        errors = errors_of(exc)
        logger.warning(f"Domain error: {[error.message for error in errors]}")
        increment_error(MetricsErrorType.VALIDATION)
        return error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, errors)

    @app.exception_handler(InternalError)
    async def internal_error_handler(request: Request, exc: InternalError):
        logger.error(f"Internal error: {exc.message}", exc_info=exc)
        increment_error(MetricsErrorType.INTERNAL)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            [Error("Internal server error")],
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled {type(exc).__name__}: {exc}")
        increment_error(MetricsErrorType.INTERNAL)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            [Error("Internal server error")],
        )

    # Health check routes
    @app.get("/", tags=["health"])
    async def root():
        return {"message": "FastAPI server is running."}

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    # Register routers
    app.include_router(work_orders_router)  # /work-orders
    app.include_router(metrics_router)  # GET /metrics

    return app


# Create the app instance
app = create_fastapi_app()
