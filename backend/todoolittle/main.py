"""
Todoolittle Backend: FastAPI Application Factory
===================================================

What:  create_app() assembles settings, context, middleware, exception
       handlers and routers into a FastAPI instance.
Who:   uvicorn (`uvicorn --factory todoolittle.main:create_app`),
       `python -m todoolittle`, and the test suite.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │  state.context = AppContext(settings, db, views)    │
    │                                                     │
    │  Middleware:   Request ID → Logging                 │
    │                                                     │
    │  Routers (in order): greetings, todos, health       │
    │                                                     │
    │  Exception Handlers:                                │
    │   Database→500 │ HTTPException→status code          │
    │   TodoolittleError→500 │ Exception→500              │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, create the SQLite directory, create tables
              (unless db_create_tables is off)
    Shutdown: dispose the engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from todoolittle import __version__
from todoolittle.config import Settings
from todoolittle.context import AppContext
from todoolittle.exceptions import DatabaseError, TodoolittleError
from todoolittle.middleware.logging import RequestLoggingMiddleware
from todoolittle.middleware.request_id import (
    REQUEST_ID_HEADER,
    RequestIDMiddleware,
    request_id_var,
)
from todoolittle.routes import greetings, health, todos

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger once, at startup.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Quiet libraries that log every operation
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    context: AppContext = app.state.context
    settings = context.settings

    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging(settings.log_level)
    logger.info("Todoolittle %s starting up...", __version__)

    db_path = settings.sqlite_path
    if db_path is not None:
        db_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Database file: %s", db_path.resolve())

    if settings.db_create_tables:
        await context.database.create_all()

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Todoolittle shutting down...")
    await context.database.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

HTTP_ERROR_CODES = {
    404: "not_found",
    405: "method_not_allowed",
}


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to the JSON error envelope (see schemas.common.ErrorResponse).

    Internal details (driver errors, stack traces) go to the log only.
    """

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        """Generic message to the client; context logged server-side."""
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": "An internal error occurred. Please try again later.",
                "request_id": rid,
            },
        )

    @app.exception_handler(TodoolittleError)
    async def handle_app_error(request: Request, exc: TodoolittleError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        """Unmatched routes (404), wrong methods (405) and explicit HTTPExceptions."""
        rid = request_id_var.get("")
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": HTTP_ERROR_CODES.get(exc.status_code, "http_error"),
                "message": str(exc.detail),
                "request_id": rid,
            },
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Runs in Starlette's ServerErrorMiddleware, outside RequestIDMiddleware,
        so the X-Request-ID header is set here.
        """
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred.",
                "request_id": rid,
            },
            headers={REQUEST_ID_HEADER: rid} if rid else None,
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure a FastAPI application.

    Args:
        settings: Configuration to use. Defaults to Settings() read from the
                  environment.

    Every call returns an independent app with its own AppContext, so tests
    can build one per temporary database.
    """
    settings = settings or Settings()

    app = FastAPI(
        title="Todoolittle",
        description="Greeting pages and a minimal to-do list.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.context = AppContext.from_settings(settings)

    # Last added runs first: RequestID wraps Logging
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(greetings.router)
    app.include_router(todos.router)
    app.include_router(health.router)

    return app
