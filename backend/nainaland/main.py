"""
Nainaland Backend — FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes middleware registration, route mounting, storage setup
       and lifecycle management in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       around a MemStorage (a fresh seeded one unless the caller passes its own).
Who:   uvicorn (`uvicorn nainaland.main:app`), `python -m nainaland`, and tests.

Application Architecture:
    ┌─────────────────────────────────────────────────────────┐
    │                      FastAPI App                        │
    │                                                         │
    │  Middleware Chain:                                      │
    │  ┌──────────────┐ ┌──────────┐ ┌─────────────────┐      │
    │  │   Req ID     │→│ RateLimit│→│  Logging        │      │
    │  └──────────────┘ └──────────┘ └─────────────────┘      │
    │                                                         │
    │  Routes:                                                │
    │  /api/auth  /api/properties  /api/blogs                 │
    │  /api/messages  /api/testimonials  /health              │
    │                                                         │
    │  Exception Handlers:                                    │
    │  ┌───────────────────────────────────────────────────┐  │
    │  │ Validation→400 │ Auth→401 │ NotFound→404 │ *→500  │  │
    │  └───────────────────────────────────────────────────┘  │
    │                                                         │
    │  app.state.storage: MemStorage                          │
    └─────────────────────────────────────────────────────────┘

Lifecycle:
    Construction:
    1. Build (or accept) the store
    2. Seed the admin account and, if enabled, the sample catalog

    Startup:
    1. Initialize logging
    2. Warn about development credentials still in use

    Shutdown:
    1. Clear the store
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
from starlette.exceptions import HTTPException as StarletteHTTPException

from nainaland import __version__
from nainaland.config import settings
from nainaland.exceptions import (
    AuthenticationError,
    NainalandError,
    NotFoundError,
    ValidationError,
)
from nainaland.middleware.logging import RequestLoggingMiddleware
from nainaland.middleware.rate_limit import RateLimitMiddleware
from nainaland.middleware.request_id import RequestIDMiddleware, request_id_var
from nainaland.routes import auth, blogs, health, messages, properties, testimonials
from nainaland.seed import seed_admin, seed_sample_data
from nainaland.storage import MemStorage

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once at startup, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Our access log replaces uvicorn's
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: logging and a configuration check.
    Shutdown: drop every record held by the app's store.
    """
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("=" * 60)
    logger.info("Nainaland Backend starting up...")

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        # Development defaults are allowed; they are just loud about it
        logger.warning("Configuration warning: %s", str(e))

    logger.info("Records loaded: %s", app.state.storage.counts())
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("API docs: http://%s:%d/docs", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Nainaland Backend shutting down...")
    app.state.storage.clear()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _request_id(request: Request) -> str:
    # The catch-all handler runs outside RequestIDMiddleware's context, but
    # request.state is shared through the ASGI scope
    return request_id_var.get("") or getattr(request.state, "request_id", "")


def _error_response(
    request: Request,
    status_code: int,
    error: str,
    message: str,
    details=None,
    headers=None,
) -> JSONResponse:
    content = {"error": error, "message": message, "request_id": _request_id(request)}
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        ValidationError         → 400 Bad Request
        RequestValidationError  → 400 Bad Request (schema failures)
        AuthenticationError     → 401 Unauthorized
        NotFoundError           → 404 Not Found
        HTTPException           → its own status (unknown route, wrong method)
        NainalandError (base)   → 500 Internal Server Error
        Exception (fallback)    → 500 Internal Server Error

    Handlers never put stack traces or internal context in the response.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", _request_id(request), exc.message)
        return _error_response(request, 400, "validation_error", exc.message, exc.context)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        """Body, query or path failed schema validation."""
        details = [
            {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
            for err in exc.errors()
        ]
        logger.warning("[%s] Request validation failed: %s", _request_id(request), details)
        return _error_response(request, 400, "validation_error", "Invalid request data", details)

    @app.exception_handler(AuthenticationError)
    async def handle_authentication_error(request: Request, exc: AuthenticationError):
        logger.info("[%s] Authentication failed: %s", _request_id(request), exc.message)
        return _error_response(
            request, 401, "unauthorized", exc.message,
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error_response(request, 404, "not_found", exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        error = "not_found" if exc.status_code == 404 else "http_error"
        return _error_response(
            request, exc.status_code, error, str(exc.detail),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(NainalandError)
    async def handle_app_error(request: Request, exc: NainalandError):
        logger.error("[%s] Application error: %s | Context: %s", _request_id(request), exc.message, exc.context)
        return _error_response(
            request, 500, "server_error",
            "An internal error occurred. Please try again later.",
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all: full stack trace in the log, generic message to the client."""
        logger.error("[%s] Unexpected error: %s", _request_id(request), str(exc), exc_info=True)
        return _error_response(
            request, 500, "internal_server_error",
            "An unexpected error occurred. Please try again or contact support.",
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def build_storage() -> MemStorage:
    """A fresh store holding the admin account and, if enabled, the sample catalog."""
    storage = MemStorage()
    seed_admin(storage, settings.admin_username, settings.admin_password)
    if settings.seed_sample_data:
        seed_sample_data(storage)
    return storage


def create_app(storage: Optional[MemStorage] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        storage: Store to serve from. Tests pass their own; when omitted a
                 fresh seeded one is built.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="Nainaland Deals API",
        description=(
            "Backend for the Nainaland Deals land marketing site: property catalog, "
            "blog, testimonials, contact messages and admin management."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.storage = storage if storage is not None else build_storage()

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition:
    # RequestID → RateLimit → Logging → GZip → CORS → routes
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "Retry-After"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RateLimitMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(auth.router)
    app.include_router(properties.router)
    app.include_router(blogs.router)
    app.include_router(messages.router)
    app.include_router(testimonials.router)
    app.include_router(health.router)

    return app


# uvicorn expects `nainaland.main:app` to be importable
app = create_app()
