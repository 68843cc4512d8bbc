"""Adoption API - Main FastAPI Application

Multi-tenant backend for an animal adoption platform.

This module builds the FastAPI application:
- Explicit service construction (database, notifier, image storage) on app.state
- Middleware (request ID correlation, CORS)
- Exception handlers producing the shared error envelope
- All API routers under /api
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .adoption_requests.router import router as adoption_requests_router
from .animals.router import router as animals_router
from .auth.router import router as auth_router
from .config import Settings, get_settings
from .contact_requests.router import router as contact_requests_router
from .dashboard.router import router as dashboard_router
from .database import Database
from .errors import AppError
from .notifications.dispatcher import NotificationDispatcher
from .observability.logging_config import configure_logging
from .observability.middleware import RequestIDMiddleware
from .observability.router import router as observability_router
from .success_stories.router import router as success_stories_router
from .superadmin.router import router as superadmin_router
from .tenancy.router import router as organization_router
from .uploads.ports import ImageStoragePort
from .uploads.router import router as uploads_router
from .uploads.s3_storage import S3ImageStorage

logger = logging.getLogger(__name__)

API_PREFIX = "/api"

_HTTP_ERROR_CODES = {
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
}


def _error_response(
    status_code: int,
    code: str,
    message: str,
    details: Optional[Any] = None,
    headers: Optional[dict] = None,
) -> JSONResponse:
    error = {"code": code, "message": message}
    if details:
        error["details"] = details
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": error},
        headers=headers,
    )


def _validation_details(exc: RequestValidationError) -> list:
    """Flatten pydantic errors into [{"field": ..., "message": ...}]."""
    details = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ())]
        if len(loc) > 1 and loc[0] in ("body", "query", "path", "header"):
            loc = loc[1:]
        message = str(err.get("msg", "Invalid value"))
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        details.append({"field": ".".join(loc), "message": message})
    return details


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
        else:
            logger.info(f"{exc.code} on {request.method} {request.url.path}")
        headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
        return _error_response(exc.status_code, exc.code, exc.message, exc.details, headers)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError
    ) -> JSONResponse:
        details = _validation_details(exc)
        logger.warning(
            f"Validation error on {request.method} {request.url.path}",
            extra={"errors": details}
        )
        return _error_response(
            status.HTTP_400_BAD_REQUEST,
            "VALIDATION_ERROR",
            "Request validation failed",
            details,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException
    ) -> JSONResponse:
        code = _HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR")
        message = exc.detail if isinstance(exc.detail, str) else "Request failed"
        if exc.status_code == 404 and message == "Not Found":
            message = f"Route {request.method} {request.url.path} not found"
        return _error_response(exc.status_code, code, message, headers=getattr(exc, "headers", None))

    @app.exception_handler(SQLAlchemyError)
    async def database_exception_handler(
        request: Request,
        exc: SQLAlchemyError
    ) -> JSONResponse:
        """Log the full database error; expose it only in development."""
        logger.error(
            f"Database error on {request.method} {request.url.path}",
            exc_info=exc
        )
        settings: Settings = request.app.state.settings
        message = str(exc) if settings.is_development else "Internal server error"
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "SERVER_ERROR", message)

    @app.exception_handler(Exception)
    async def generic_exception_handler(
        request: Request,
        exc: Exception
    ) -> JSONResponse:
        logger.error(
            f"Unhandled exception on {request.method} {request.url.path}",
            exc_info=exc
        )
        settings: Settings = request.app.state.settings
        message = str(exc) if settings.is_development else "Internal server error"
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "SERVER_ERROR", message)


def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
    notifier: Optional[NotificationDispatcher] = None,
    image_storage: Optional[ImageStoragePort] = None,
    configure_logs: bool = True,
) -> FastAPI:
    """Application factory.

    Every collaborator can be injected; the defaults are built from
    settings. The database handle is disposed when the application shuts
    down (uvicorn translates SIGINT/SIGTERM into a lifespan shutdown).
    """
    settings = settings or get_settings()

    if configure_logs:
        configure_logging(level=settings.LOG_LEVEL, json_format=settings.LOG_JSON)

    database = database or Database(
        settings.DATABASE_URL,
        echo=settings.DB_ECHO,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
    )
    notifier = notifier or NotificationDispatcher.from_settings(settings)
    image_storage = image_storage or S3ImageStorage.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Adoption API starting up (environment={settings.ENVIRONMENT})")
        yield
        logger.info("Adoption API shutting down...")
        app.state.database.dispose()

    show_docs = settings.ENVIRONMENT != "production"
    app = FastAPI(
        title="Adoption API",
        description="Multi-tenant backend for shelters publishing animals for adoption",
        version="0.1.0",
        docs_url="/docs" if show_docs else None,
        redoc_url="/redoc" if show_docs else None,
        openapi_url="/openapi.json" if show_docs else None,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.database = database
    app.state.notifier = notifier
    app.state.image_storage = image_storage

    # Request ID Middleware (must be first for proper correlation)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    register_exception_handlers(app)

    app.include_router(observability_router, prefix=API_PREFIX)
    app.include_router(auth_router, prefix=API_PREFIX)
    app.include_router(animals_router, prefix=API_PREFIX)
    app.include_router(adoption_requests_router, prefix=API_PREFIX)
    app.include_router(organization_router, prefix=API_PREFIX)
    app.include_router(success_stories_router, prefix=API_PREFIX)
    app.include_router(superadmin_router, prefix=API_PREFIX)
    app.include_router(contact_requests_router, prefix=API_PREFIX)
    app.include_router(dashboard_router, prefix=API_PREFIX)
    app.include_router(uploads_router, prefix=API_PREFIX)

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        return {
            "name": "Adoption API",
            "version": "0.1.0",
            "status": "running",
            "docs": "/docs" if show_docs else None,
        }

    return app


if __name__ == "__main__":
    import os

    import uvicorn

    uvicorn.run(
        "adoption_api.main:create_app",
        factory=True,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        log_level=get_settings().LOG_LEVEL.lower(),
    )
