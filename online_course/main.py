# ==============================================================================
# MAIN APPLICATION - FastAPI Entry Point
# ==============================================================================
# Application factory with lifespan events, middleware, and routing
# ==============================================================================

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from online_course.api.dependencies import HealthServiceDep
from online_course.api.router import api_router
from online_course.core.exceptions import AppException, ValidationError
from online_course.core.health import (
    DatabaseHealthCheck,
    HealthCheckService,
    HealthStatus,
    PrivateMemoryHealthCheck,
)
from online_course.core.logging_config import configure_logging
from online_course.core.settings import settings
from online_course.database.factory import DatabaseFactory
from online_course.integrations.blob_storage import LocalBlobStorage
from online_course.integrations.email_notification import (
    EmailNotification,
    LoggingEmailNotification,
    SMTPEmailNotification,
)
from online_course.mapping.profile import build_mapping_profile
from online_course.middleware.request_logger import RequestLoggerMiddleware
from online_course.schemas.base import HealthResponse

logger = logging.getLogger(__name__)


# ==============================================================================
# LIFESPAN MANAGEMENT
# ==============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan manager.

    - Startup: Initialize database connection
    - Shutdown: Close database connections
    """
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    logger.info(f"Database: {settings.DATABASE_TYPE}")

    try:
        await DatabaseFactory.initialize()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        # The health endpoint reports the outage outside production
        if settings.is_production:
            raise

    yield

    logger.info("Shutting down application...")
    await DatabaseFactory.shutdown()
    logger.info("Application shutdown complete")


# ==============================================================================
# COLLABORATORS
# ==============================================================================

def build_email_notification() -> EmailNotification:
    """SMTP delivery when a server is configured, log-only otherwise."""
    if settings.SMTP_HOST:
        return SMTPEmailNotification(
            host=settings.SMTP_HOST,
            port=settings.SMTP_PORT,
            sender=settings.EMAIL_FROM,
            recipient=settings.CONTACT_EMAIL_TO,
            username=settings.SMTP_USERNAME,
            password=settings.SMTP_PASSWORD,
            use_tls=settings.SMTP_USE_TLS,
        )
    return LoggingEmailNotification()


def build_health_service() -> HealthCheckService:
    return HealthCheckService(
        [
            ("database", DatabaseHealthCheck(DatabaseFactory.health_check)),
            (
                "private_memory",
                PrivateMemoryHealthCheck(settings.HEALTH_MAX_MEMORY_MB * 1024 * 1024),
            ),
        ]
    )


# ==============================================================================
# APPLICATION FACTORY
# ==============================================================================

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    The mapping profile, blob storage, email collaborator and health checks
    are built here once and kept on ``app.state``.

    Returns:
        Configured FastAPI application instance
    """
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.API_TITLE,
        description=settings.API_DESCRIPTION,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
    )

    app.state.mapper = build_mapping_profile()
    app.state.blob_storage = LocalBlobStorage(
        settings.BLOB_STORAGE_PATH,
        settings.BLOB_BASE_URL,
    )
    app.state.email_notification = build_email_notification()
    app.state.health_service = build_health_service()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggerMiddleware)

    register_exception_handlers(app)

    app.include_router(api_router)

    register_health_endpoints(app)

    return app


# ==============================================================================
# EXCEPTION HANDLERS
# ==============================================================================

def register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(AppException)
    async def app_exception_handler(
        request: Request,
        exc: AppException,
    ) -> JSONResponse:
        """Handle application exceptions."""
        return JSONResponse(
            status_code=exc.status_code,
            content=jsonable_encoder(exc.to_dict()),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Malformed or missing input is a 400."""
        error = ValidationError(
            message="Request validation failed",
            errors=[
                {
                    "field": ".".join(str(part) for part in err.get("loc", ())),
                    "message": err.get("msg"),
                    "type": err.get("type"),
                }
                for err in exc.errors()
            ],
        )
        return JSONResponse(
            status_code=error.status_code,
            content=jsonable_encoder(error.to_dict()),
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(f"Unexpected error: {exc}")

        if settings.DEBUG:
            detail = str(exc)
        else:
            detail = "An unexpected error occurred"

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "success": False,
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": detail,
                }
            },
        )


# ==============================================================================
# HEALTH ENDPOINTS
# ==============================================================================

def register_health_endpoints(app: FastAPI) -> None:
    """Register health check endpoints."""

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["Health"],
        summary="Health check",
        description="Runs the registered checks; 503 when any is unhealthy.",
        responses={503: {"model": HealthResponse}},
    )
    async def health_check(health_service: HealthServiceDep) -> JSONResponse:
        """Application health check."""
        report = await health_service.run()
        body = HealthResponse(version=settings.APP_VERSION, **report.to_dict())

        status_code = (
            status.HTTP_503_SERVICE_UNAVAILABLE
            if report.status == HealthStatus.UNHEALTHY
            else status.HTTP_200_OK
        )
        return JSONResponse(status_code=status_code, content=body.model_dump())

    @app.get(
        "/",
        tags=["Health"],
        summary="Root endpoint",
        description="Welcome message and API information.",
    )
    async def root() -> dict:
        """Root endpoint with API info."""
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "docs": "/docs" if settings.DEBUG else "Disabled in production",
            "health": "/health",
        }


# Create application instance
app = create_app()


# ==============================================================================
# DEVELOPMENT RUNNER
# ==============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "online_course.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
