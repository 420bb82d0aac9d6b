"""rulecheck — declarative record validation service.

Main FastAPI application with lifespan logging and global error handling.
"""

from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from rulecheck.config import get_settings
from rulecheck.api.router import api_router, legacy_router
from rulecheck.log import configure_logging
from rulecheck.validators import ConfigurationError

configure_logging()

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown lifecycle."""
    settings = get_settings()
    logger.info("app_started", debug=settings.DEBUG, strict_rules=settings.STRICT_RULES)

    yield

    logger.info("app_stopped")


# ── Global Exception Handlers ──

async def global_exception_handler(request: Request, exc: Exception):
    """Catch-all error handler for unhandled exceptions."""
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": "An unexpected error occurred. Please try again.",
        },
    )


async def configuration_error_handler(request: Request, exc: ConfigurationError):
    """Engine misuse is a server bug, never the client's fault."""
    logger.error(
        "validator_misconfigured",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=500,
        content={"error": "configuration_error", "message": str(exc)},
    )


# ── Root endpoint ──

async def root():
    """Root endpoint — API info."""
    return {
        "name": "rulecheck",
        "version": "1.0.0",
        "description": "Declarative record validation service",
        "docs": "/docs",
        "health": "/api/v1/health",
    }


def create_app() -> FastAPI:
    """Build the application with handlers and routes mounted."""
    app = FastAPI(
        title="rulecheck",
        description="Validates JSON-decoded records against declarative per-field rules.",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_exception_handler(Exception, global_exception_handler)
    app.add_exception_handler(ConfigurationError, configuration_error_handler)

    app.include_router(api_router, prefix="/api/v1")
    app.include_router(legacy_router)
    app.add_api_route("/", root, methods=["GET"])

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    logger.info("server_running", url=f"http://{settings.HOST}:{settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL)
