"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

from __future__ import annotations

from fastapi import FastAPI

from gateway.config import get_settings
from gateway.core.exceptions import register_exception_handlers
from gateway.core.lifespan import lifespan
from gateway.logging import RequestLoggingMiddleware, get_logger
from gateway.routers import health, info, products


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    # Load settings (validates configuration)
    settings = get_settings()

    app = FastAPI(
        title=f"{settings.service.name} Service",
        description="Forwards fixed add-product requests to the Product Service",
        version=settings.service.version,
        lifespan=lifespan,
    )

    app.add_middleware(RequestLoggingMiddleware, logger_factory=get_logger)

    register_exception_handlers(app)

    app.include_router(health.router, tags=["Operations"])
    app.include_router(info.router, tags=["Operations"])
    app.include_router(products.router, tags=["Products"])

    return app
