"""FastAPI application entry point.

Scoreboard API - submit scores, read the global leaderboard and personal bests.
"""

from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator
from datetime import datetime, timezone
import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from scoreboard.routes import api_router
from scoreboard.schemas import HealthResponse
from scoreboard.services.errors import InvalidLimitError, StoreUnavailableError, ValidationError
from scoreboard.settings import Settings, get_settings
from scoreboard.stores.postgres import Database

logger = logging.getLogger("uvicorn.error")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Owns the process-wide Database handle: built on startup, published on
    app.state.db, disposed on shutdown.
    """
    settings: Settings = app.state.settings

    db = Database.from_settings(settings)
    await db.connect()
    app.state.db = db

    try:
        await db.ping()
        if settings.create_tables_on_startup:
            await db.create_tables()
        logger.info("Database connected")
    except Exception:
        # Keep serving; store calls will fail with STORE_UNAVAILABLE until the DB is back.
        logger.exception("Database init failed")

    yield

    # Shutdown
    await db.dispose()
    app.state.db = None


def _error_response(status_code: int, code: str, message: str, detail: dict[str, Any] | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": code,
                "message": message,
                "detail": detail,
            }
        },
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Score submission and leaderboard API",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )
    app.state.settings = settings
    app.state.db = None

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
        return _error_response(400, exc.code, exc.message, exc.detail)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Malformed JSON / wrong types: same 400 shape as service validation."""
        errors = [
            {
                "field": ".".join(str(part) for part in err.get("loc", ())[1:]),
                "code": err.get("type", "invalid"),
                "message": err.get("msg", "Invalid value"),
            }
            for err in exc.errors()
        ]
        message = "; ".join(e["message"] for e in errors) or "Invalid request"
        # A non-integer ?limit= is a bad limit, same as one out of range.
        code = ValidationError.code
        if errors and all(e["field"] == "limit" for e in errors):
            code = InvalidLimitError.code
        return _error_response(400, code, message, {"errors": errors})

    @app.exception_handler(StoreUnavailableError)
    async def store_unavailable_handler(request: Request, exc: StoreUnavailableError) -> JSONResponse:
        return _error_response(503, exc.code, exc.message)

    # Exception handler for structured error format
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Global exception handler returning structured error format."""
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return _error_response(
            500,
            "INTERNAL_ERROR",
            str(exc) if settings.debug else "Internal server error",
        )

    # Health check endpoint
    @app.get("/health", tags=["health"], response_model=HealthResponse, operation_id="healthcheck")
    async def health_check() -> HealthResponse:
        """Liveness check; does not touch the database."""
        return HealthResponse(timestamp=datetime.now(timezone.utc))

    # Include API routes
    app.include_router(api_router)

    return app


# Application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "scoreboard.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
