"""
Hotel Listing Backend — FastAPI Application Factory
=====================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn hotel_listing.main:app).

Application Architecture:
    ┌─────────────────────────────────────────────────────────┐
    │                      FastAPI App                        │
    │                                                         │
    │  Middleware: Request ID → Log → Versions → GZip → CORS  │
    │                                                         │
    │  Routes:                                                │
    │  ┌────────────┐ ┌──────────────┐ ┌─────────┐ ┌───────┐  │
    │  │ /api/hotel │ │ /api/country │ │ account │ │health │  │
    │  └────────────┘ └──────────────┘ └─────────┘ └───────┘  │
    │                                                         │
    │  Exception Handlers:                                    │
    │  Validation→400 │ Auth→401/403 │ NotFound→404 │ DB→500  │
    └─────────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, validate settings
    Shutdown: dispose the database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from hotel_listing import __version__
from hotel_listing.config import settings
from hotel_listing.database import dispose_engine
from hotel_listing.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DatabaseError,
    NotFoundError,
    UnsupportedApiVersionError,
    ValidationError,
)
from hotel_listing.middleware.api_version import ApiVersionHeadersMiddleware
from hotel_listing.middleware.logging import RequestLoggingMiddleware
from hotel_listing.middleware.request_id import RequestIDMiddleware, request_id_var
from hotel_listing.routes import account, countries, health, hotels

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: 2024-01-15T12:00:00 [INFO] hotel_listing.services.hotel_service: message
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Third-party loggers that are noisy at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("=" * 60)
    logger.info("Hotel Listing API %s starting up...", __version__)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        # Development defaults still work; flag them loudly
        logger.warning("Configuration warning: %s", str(e))

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("API docs: http://%s:%d/docs", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Hotel Listing API shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def error_response(
    status_code: int,
    error: str,
    message: str,
    headers: Optional[dict] = None,
) -> JSONResponse:
    """Builds the error envelope shared by every handler."""
    return JSONResponse(
        status_code=status_code,
        content={
            "error": error,
            "message": message,
            "requestId": request_id_var.get(""),
        },
        headers=headers,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and the error envelope.

    Handler hierarchy:
        RequestValidationError      → 400 (FastAPI's 422 replaced)
        ValidationError             → 400
        UnsupportedApiVersionError  → 400
        AuthenticationError         → 401
        AuthorizationError          → 403
        NotFoundError               → 404
        DatabaseError               → 500
        Exception (fallback)        → 500

    Responses never include field-level errors, stack traces or SQL; those
    are logged server-side with the request ID.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        """Malformed or missing body fields, or a bad path/query type."""
        logger.error(
            "[%s] Invalid %s attempt on %s: %s",
            request_id_var.get(""),
            request.method,
            request.url.path,
            exc.errors(),
        )
        return error_response(400, "validation_error", "The request is invalid")

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s | %s", request_id_var.get(""), exc.message, exc.context)
        return error_response(400, "validation_error", exc.message)

    @app.exception_handler(UnsupportedApiVersionError)
    async def handle_unsupported_version(request: Request, exc: UnsupportedApiVersionError):
        return error_response(400, "unsupported_api_version", exc.message)

    @app.exception_handler(AuthenticationError)
    async def handle_authentication_error(request: Request, exc: AuthenticationError):
        logger.warning("[%s] Authentication failed: %s", request_id_var.get(""), exc.context)
        return error_response(
            401,
            "unauthorized",
            exc.message,
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(AuthorizationError)
    async def handle_authorization_error(request: Request, exc: AuthorizationError):
        return error_response(403, "forbidden", exc.message)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return error_response(404, "not_found", exc.message)

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        logger.error(
            "[%s] Database error: %s | Context: %s",
            request_id_var.get(""),
            exc.message,
            exc.context,
        )
        return error_response(
            500,
            "server_error",
            "An internal error occurred. Please try again later.",
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            "[%s] Unexpected error: %s",
            request_id_var.get(""),
            str(exc),
            exc_info=True,
        )
        return error_response(
            500,
            "internal_server_error",
            "An unexpected error occurred. Please try again or contact support.",
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Hotel Listing API",
        description=(
            "Hotels and the countries they are listed under. Reads are public; "
            "writes require an Administrator bearer token. Select the API version "
            "with the `api-version` header or query parameter."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → API version headers → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[
            "X-Request-ID",
            "X-Total-Count",
            "Location",
            "api-supported-versions",
            "api-deprecated-versions",
        ],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(ApiVersionHeadersMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(hotels.router)
    app.include_router(countries.router)
    app.include_router(account.router)
    app.include_router(health.router)

    return app


app = create_app()
