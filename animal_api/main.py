"""
Animal API: FastAPI Application Factory
=======================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       owning its own record store.
Who:   Called by uvicorn (uvicorn animal_api.main:app) and by the tests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────────┐ ┌──────────────┐                  │
    │  │   Req ID     │→│   Logging    │                  │
    │  └──────────────┘ └──────────────┘                  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────────────────┐ ┌─────────────────┐   │
    │  │ /v1/animals[/{id}]       │ │ GET /health     │   │
    │  └──────────────────────────┘ └─────────────────┘   │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ Validation→400 │ NotFound→404 │ Conflict→409 │   │
    │  │ StoreError→500 │ Exception→500               │   │
    │  └──────────────────────────────────────────────┘   │
    │                                                     │
    │  app.state.store: AnimalStore (one per app)         │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Seed the store with lion/eagle/snake (SEED_ON_STARTUP)
    3. Log startup complete

    Shutdown:
    1. Log shutdown (records are dropped with the process)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from animal_api import __version__
from animal_api.config import settings
from animal_api.exceptions import (
    AnimalAPIError,
    ConflictError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from animal_api.middleware.logging import RequestLoggingMiddleware
from animal_api.middleware.request_id import RequestIDMiddleware, request_id_var
from animal_api.routes import animals, health
from animal_api.services.memory_store import InMemoryAnimalStore
from animal_api.services.seed import seed_store
from animal_api.services.store_base import AnimalStore

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during app startup, before anything else logs.
    """
    log_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Our access middleware already logs every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Manage application lifecycle: startup and shutdown procedures.

    Seeding happens here (not in create_app) so that the records are in place
    before the server accepts traffic, while a bare create_app() used without
    a running server stays empty.
    """
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("=" * 60)
    logger.info("Animal API %s starting up...", __version__)

    if settings.seed_on_startup:
        seed_store(app.state.store)
    else:
        logger.info("Seeding disabled; starting with an empty store")

    logger.info(
        "Server ready at http://%s:%d%s/animals",
        settings.app_host,
        settings.app_port,
        settings.api_prefix,
    )
    logger.info("=" * 60)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Animal API shutting down; %d record(s) discarded.", app.state.store.count())


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_response(
    status_code: int, error: str, message: str, details=None, request_id: Optional[str] = None
) -> JSONResponse:
    rid = request_id_var.get("") if request_id is None else request_id
    return JSONResponse(
        status_code=status_code,
        content={
            "error": error,
            "message": message,
            "details": details,
            "request_id": rid,
        },
        headers={"X-Request-ID": rid} if rid else None,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        RequestValidationError → 400 Bad Request (bad path id, malformed/incomplete body)
        ValidationError        → 400 Bad Request (business rule, e.g. missing id)
        NotFoundError          → 404 Not Found
        ConflictError          → 409 Conflict
        StoreError             → 500 Internal Server Error
        AnimalAPIError (base)  → 500 Internal Server Error
        Exception (fallback)   → 500 Internal Server Error

    Security: 500 responses never carry internal details; they are logged.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        """FastAPI could not parse the path or body. Answer 400 instead of FastAPI's 422."""
        errors = [
            {
                "loc": [str(part) for part in err.get("loc", ())],
                "msg": err.get("msg", ""),
                "type": err.get("type", ""),
            }
            for err in exc.errors()
        ]
        logger.warning("[%s] Invalid request: %s", request_id_var.get(""), errors)
        return _error_response(400, "validation_error", "Invalid request", {"errors": errors})

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return _error_response(400, "validation_error", exc.message, exc.context)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error_response(404, "not_found", exc.message)

    @app.exception_handler(ConflictError)
    async def handle_conflict(request: Request, exc: ConflictError):
        return _error_response(409, "conflict", exc.message)

    @app.exception_handler(StoreError)
    async def handle_store_error(request: Request, exc: StoreError):
        logger.error("[%s] Store error: %s | Context: %s", request_id_var.get(""), exc.message, exc.context)
        return _error_response(500, "server_error", exc.message)

    @app.exception_handler(AnimalAPIError)
    async def handle_app_error(request: Request, exc: AnimalAPIError):
        logger.error("[%s] Application error: %s | Context: %s", request_id_var.get(""), exc.message, exc.context)
        return _error_response(500, "server_error", "An internal error occurred. Please try again later.")

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Catch-all: stack trace is logged server-side only.

        Starlette runs this handler outside RequestIDMiddleware, so the ID is
        read from request.state and the X-Request-ID header is set here.
        """
        rid = getattr(request.state, "request_id", "")
        logger.error(
            "[%s] Unexpected error: %s",
            rid,
            str(exc),
            exc_info=True,
        )
        return _error_response(
            500,
            "internal_server_error",
            "An unexpected error occurred. Please try again or contact support.",
            request_id=rid,
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(store: Optional[AnimalStore] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: Record store the app serves. A fresh, empty
               InMemoryAnimalStore is created when omitted.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="Animal API",
        description="CRUD service for animal records kept in process memory.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.state.store = store if store is not None else InMemoryAnimalStore()

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added = first to execute: RequestID → Logging → routes
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(animals.router, prefix=settings.api_prefix)
    app.include_router(health.router)

    return app


# ── Application Instance ─────────────────────────────────────────────────
# uvicorn expects `animal_api.main:app` to be importable
app = create_app()
