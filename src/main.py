"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api import lists, settings as settings_api, tasks, users
from src.config import get_settings
from src.database import Database
from src.exceptions import AppError
from src.middleware import (
    SECURITY_HEADERS,
    RateLimiter,
    RateLimitMiddleware,
    SecurityHeadersMiddleware,
)

settings = get_settings()

logger = logging.getLogger(__name__)

# Leading location segments FastAPI adds to validation errors
_REQUEST_SECTIONS = {"body", "path", "query", "header", "cookie"}


def configure_logging() -> None:
    """Configure root logging from settings."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the database on startup and release it on shutdown."""
    configure_logging()
    app.state.database = Database(settings.database_url)
    logger.info(f"TaskMaster API starting (environment={settings.environment})")
    yield
    app.state.database.dispose()
    logger.info("TaskMaster API stopped")


app = FastAPI(
    title="TaskMaster API",
    description="Personal tasks grouped into lists, with per-user settings",
    version="1.0.0",
    lifespan=lifespan,
)

# Middleware added last runs first: security headers, rate limit, CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
if settings.rate_limit_enabled:
    app.add_middleware(
        RateLimitMiddleware,
        limiter=RateLimiter(settings.rate_limit_requests, settings.rate_limit_window_seconds),
    )
app.add_middleware(SecurityHeadersMiddleware)

# Register routers
app.include_router(users.router)
app.include_router(tasks.router)
app.include_router(lists.router)
app.include_router(settings_api.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "OK",
        "message": "TaskMaster API is running",
        "environment": settings.environment,
        "timestamp": datetime.now(UTC).isoformat(),
    }


def _error_path(loc: tuple) -> str:
    parts = [str(part) for part in loc]
    if parts and parts[0] in _REQUEST_SECTIONS:
        parts = parts[1:]
    return ".".join(parts)


def _error_message(error: dict) -> str:
    # Messages raised from our own validators arrive as "Value error, ..."
    ctx_error = error.get("ctx", {}).get("error")
    if error.get("type") == "value_error" and ctx_error is not None:
        return str(ctx_error)
    return error["msg"]


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Render schema violations as 400 with field-level detail."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "success": False,
            "message": "Validation failed",
            "errors": [
                {"path": _error_path(error["loc"]), "message": _error_message(error)}
                for error in exc.errors()
            ],
        },
    )


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    """Render domain errors raised by services."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.message},
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors in the same envelope as every other error."""
    content = {"success": False, "message": exc.detail}
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        content["message"] = "Route not found"
        content["path"] = request.url.path
    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Last resort: log and answer 500 without leaking details outside development."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    content = {"success": False, "message": "Internal server error"}
    if settings.is_development:
        content["message"] = str(exc)
    # Runs outside the user middleware stack, so the hardening headers are set here
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=content,
        headers=SECURITY_HEADERS,
    )


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    uvicorn.run("src.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
