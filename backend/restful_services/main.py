"""
RESTful Services — FastAPI Application Factory
===============================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn restful_services.main:app).
When:  Once at server startup; the returned app handles all subsequent requests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────────┐ ┌──────────┐ ┌────────┐ ┌──────┐  │
    │  │ Path Normal. │→│ Req ID   │→│Logging │→│ CORS │  │
    │  └──────────────┘ └──────────┘ └────────┘ └──────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────┐ ┌──────────────────┐ ┌─────────┐  │
    │  │ /api/example │ │ /api/status-codes│ │ /health │  │
    │  └──────────────┘ └──────────────────┘ └─────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ 400 │ 401 │ 403 │ 404 │ 405 │ 500 (catch-all) │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘
"""

import logging
import re
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from restful_services import __version__
from restful_services.config import settings
from restful_services.exceptions import RestfulServicesError
from restful_services.middleware.logging import RequestLoggingMiddleware
from restful_services.middleware.path_normalization import PathNormalizationMiddleware
from restful_services.middleware.request_id import (
    RequestIDMiddleware,
    internal_error_response,
    request_id_var,
)
from restful_services.routes import example, health, status
from restful_services.status_codes import STATUS_PHRASES

logger = logging.getLogger(__name__)

# Canonical paths that PathNormalizationMiddleware folds requests onto
ROUTE_TEMPLATES = (
    example.EXAMPLE_RESOURCE_PATH,
    status.STATUS_CODES_PATH,
    status.STATUS_CODE_PATH,
    health.HEALTH_PATH,
)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: 2024-01-15T12:00:00 [INFO] restful_services.access: GET /api/example ...
    When:   Called once during app startup, before any request is served.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),  # Docker captures stdout
        ],
        force=True,
    )

    # Our access middleware replaces uvicorn's access log
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Configure logging on startup; log the shutdown."""
    setup_logging()
    logger.info("=" * 60)
    logger.info("%s v%s starting up...", settings.app_name, __version__)
    logger.info("Resource: %s", example.EXAMPLE_RESOURCE_PATH)
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("API docs: http://%s:%d/docs", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    logger.info("%s shutting down...", settings.app_name)


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def error_code_for_status(status_code: int) -> str:
    """
    Machine-readable error code derived from the reason phrase.

    405 → "method_not_allowed", 404 → "not_found"; codes missing from the
    catalog fall back to "http_error".
    """
    phrase = STATUS_PHRASES.get(status_code)
    if phrase is None:
        return "http_error"
    return re.sub(r"[^a-z0-9]+", "_", phrase.lower()).strip("_")


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler mapping:
        RestfulServicesError    → its own status_code (400/401/403/404/500)
        RequestValidationError  → 400 Bad Request (malformed JSON, bad params)
        Starlette HTTPException → its status (404 unknown route, 405 wrong verb)
        Exception (fallback)    → 500 Internal Server Error

    Every body has the ErrorResponse shape. Stack traces are logged
    server-side only.
    """

    @app.exception_handler(RestfulServicesError)
    async def handle_application_error(request: Request, exc: RestfulServicesError):
        rid = request_id_var.get("")
        if exc.status_code >= 500:
            logger.error("[%s] %s: %s | Context: %s", rid, type(exc).__name__, exc.message, exc.context)
        else:
            logger.warning("[%s] %s: %s", rid, type(exc).__name__, exc.message)

        content = {
            "error": exc.error_code,
            "message": exc.message,
            "request_id": rid,
        }
        if exc.expose_context:
            content["details"] = exc.context
        return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        """Malformed JSON or wrongly typed parameters: the client can fix it."""
        rid = request_id_var.get("")
        logger.warning("[%s] Request validation failed: %d error(s)", rid, len(exc.errors()))
        return JSONResponse(
            status_code=400,
            content={
                "error": "validation_error",
                "message": "The request could not be parsed or failed validation",
                "details": {"errors": jsonable_encoder(exc.errors())},
                "request_id": rid,
            },
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        """Routing-level errors raised by Starlette (unknown path, wrong verb)."""
        rid = request_id_var.get("")
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": error_code_for_status(exc.status_code),
                "message": str(exc.detail),
                "request_id": rid,
            },
            headers=exc.headers,
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Last resort for errors raised outside RequestIDMiddleware; route
        errors are already rendered there with their request id.
        """
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return internal_error_response(rid)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="RESTful Services API",
        description=(
            "Reference REST resource demonstrating canonical HTTP verb semantics "
            "and status codes on /api/example."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition: last added runs first.

    # CORS answers browser preflight OPTIONS (requests carrying Origin and
    # Access-Control-Request-Method) itself: 200 without Allow for a listed
    # origin, 400 otherwise. Plain OPTIONS reaches the route.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[
            "X-Request-ID",
            "Location",
            "Allow",
            "WWW-Authenticate",
        ],
    )

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(PathNormalizationMiddleware, templates=ROUTE_TEMPLATES)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(example.router)
    app.include_router(status.router)
    app.include_router(health.router)

    return app


# uvicorn expects `restful_services.main:app` to be importable
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "restful_services.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
    )
