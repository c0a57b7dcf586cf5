"""
FastAPI application factory.

Creates and configures the FastAPI application.
"""
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging

from .lifespan import lifespan
from .logging_config import setup_logging
from .logging_middleware import RequestLoggingMiddleware
from servicedesk.utils.exceptions import (
    BadRequestAlertException,
    CategoryNotFoundError,
)
from servicedesk.utils.header_utils import create_failure_alert

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    # ── Initialize logging first ──
    from servicedesk.config.settings import get_settings
    settings = get_settings()
    setup_logging(
        log_level=settings.log_level,
        log_dir=settings.log_dir,
        log_json=settings.log_json,
    )

    app = FastAPI(
        title="ServiceDesk API",
        description="""
        Service desk reference data API

        Features:
        - Category CRUD with JSON merge-patch partial updates
        - Paginated listings with Link and X-Total-Count headers
        - Alert headers for client-side notifications
        """,
        version="1.0.0",
        lifespan=lifespan
    )

    # ── Request logging middleware (must be added before CORS) ──
    app.add_middleware(RequestLoggingMiddleware)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[
            "Location",
            "Link",
            "X-Total-Count",
            "X-Request-ID",
            f"X-{settings.application_name}-alert",
            f"X-{settings.application_name}-error",
            f"X-{settings.application_name}-params",
        ],
    )

    # Register exception handlers
    _register_exception_handlers(app)

    # Include routers
    _include_routers(app)

    # Root and health endpoints
    _register_root_endpoints(app)

    return app


def _register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with logging."""
    from servicedesk.config.settings import get_settings

    @app.exception_handler(BadRequestAlertException)
    async def bad_request_alert_handler(request: Request, exc: BadRequestAlertException):
        logger.warning(f"Bad request: {exc.message} ({exc.error_key}) — {request.method} {request.url.path}")
        settings = get_settings()
        return JSONResponse(
            status_code=400,
            content={
                "title": exc.message,
                "status": 400,
                "entityName": exc.entity_name,
                "errorKey": exc.error_key,
                "message": f"error.{exc.error_key}",
            },
            headers=create_failure_alert(
                settings.application_name,
                settings.enable_translation,
                exc.entity_name,
                exc.error_key,
                exc.message,
            ),
        )

    @app.exception_handler(CategoryNotFoundError)
    async def category_not_found_handler(request: Request, exc: CategoryNotFoundError):
        logger.warning(f"Category not found: {exc.category_id} — {request.method} {request.url.path}")
        return Response(status_code=404)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        field_errors = [
            {
                "field": ".".join(str(part) for part in error["loc"][1:]),
                "message": error["msg"],
            }
            for error in exc.errors()
        ]
        logger.warning(f"Validation error: {field_errors} — {request.method} {request.url.path}")
        return JSONResponse(
            status_code=400,
            content={
                "title": "Method argument not valid",
                "status": 400,
                "message": "error.validation",
                "fieldErrors": field_errors,
            },
        )


def _include_routers(app: FastAPI) -> None:
    """Include all API routers."""
    from servicedesk.routers import category_router

    app.include_router(category_router.router)


def _register_root_endpoints(app: FastAPI) -> None:
    """Register root and health endpoints."""
    from .dependencies import container

    @app.get("/")
    async def root():
        """Root endpoint with API information."""
        return {
            "name": "ServiceDesk API",
            "version": "1.0.0",
            "endpoints": {
                "categories": f"{container.settings.api_prefix}/categories",
                "docs": "/docs"
            }
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "services": {
                "mongodb": "connected" if container.base_repo.is_connected else "disconnected",
            }
        }
