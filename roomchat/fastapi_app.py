"""
FastAPI Application Factory.
Creates and configures the FastAPI application with all routers, middleware, and DI.

Endpoints:
- rooms (create, get-or-create, list, detail, exists, messages)
- messages (send)
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from roomchat import __version__
from roomchat.config.logging_config import (
    NO_CORRELATION_ID,
    correlation_id_var,
    setup_logging,
)
from roomchat.config.settings import Config
from roomchat.domain.exceptions import (
    AccessDeniedError,
    DomainValidationError,
    EntityNotFoundError,
    RoomAlreadyExistsError,
    StorageError,
    StorageTimeoutError,
    UnauthenticatedError,
)
from roomchat.presentation.api import messages_router, rooms_router
from roomchat.setup.ioc import create_container

logger = logging.getLogger(__name__)

# Domain exception → HTTP status. Subclasses are listed before their bases.
DOMAIN_ERROR_STATUS: dict[type[Exception], int] = {
    DomainValidationError: 400,
    UnauthenticatedError: 401,
    AccessDeniedError: 403,
    EntityNotFoundError: 404,
    RoomAlreadyExistsError: 409,
    StorageTimeoutError: 504,
    StorageError: 503,
}


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set correlation ID from request headers."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID", NO_CORRELATION_ID)

        # Set in contextvars (propagates to async tasks and logging)
        correlation_id_var.set(correlation_id)

        response = await call_next(request)
        response.headers["X-Correlation-ID"] = correlation_id
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup: container already attached by setup_dishka.
    Shutdown: close the DI container (disconnects Prisma).
    """
    logger.info("FastAPI application started. DI container initialized.")
    yield
    await app.state.dishka_container.close()
    logger.info("FastAPI application shutdown. DI container closed.")


def _error_response(status_code: int, message: str, kind: str, **extra) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": message, "kind": kind, **extra},
    )


def create_fastapi_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        container: DI container to use. Defaults to the Prisma-backed one.

    Returns:
        FastAPI application instance
    """
    setup_logging(Config.LOG_LEVEL, Config.LOG_PATH or None)

    app = FastAPI(
        title="Room Chat API",
        description="Rooms, memberships and messages for the travel marketplace",
        version=__version__,
        lifespan=lifespan,
    )

    # Setup Dishka BEFORE app starts (must add middleware before startup)
    setup_dishka(container or create_container(), app)

    # Correlation ID middleware (must be added before CORS)
    app.add_middleware(CorrelationIdMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=Config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Validation error handler - shows detailed Pydantic errors
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = jsonable_encoder(exc.errors())
        logger.info(f"[VALIDATION ERROR] {request.method} {request.url.path}: {errors}")
        return _error_response(
            400, "Validation error", DomainValidationError.kind, details=errors
        )

    async def domain_exception_handler(request: Request, exc: Exception):
        status_code = next(
            code for cls, code in DOMAIN_ERROR_STATUS.items() if isinstance(exc, cls)
        )
        if status_code >= 500:
            logger.error(f"[STORAGE ERROR] {request.method} {request.url.path}: {exc}")
        return _error_response(status_code, str(exc), exc.kind)

    for exc_class in DOMAIN_ERROR_STATUS:
        app.add_exception_handler(exc_class, domain_exception_handler)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return _error_response(exc.status_code, str(exc.detail), "http_error")

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"[GLOBAL ERROR] {type(exc).__name__}: {exc}")
        return _error_response(500, "Internal server error", "internal_error")

    # Health check routes
    @app.get("/", tags=["health"])
    async def root():
        return {"message": "FastAPI server is running."}

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    # Register routers
    app.include_router(rooms_router)  # /rooms...
    app.include_router(messages_router)  # POST /messages

    return app
