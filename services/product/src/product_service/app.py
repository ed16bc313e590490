"""
FastAPI application factory.
"""

from __future__ import annotations

from fastapi import FastAPI

from product_service.config import get_settings
from product_service.core.exceptions import register_exception_handlers
from product_service.core.lifespan import lifespan
from product_service.logging import RequestLoggingMiddleware, get_logger
from product_service.routers import health, info, product


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI instance with all routers registered
    """
    settings = get_settings()

    app = FastAPI(
        title=f"{settings.service.name} Service",
        description="Mock third-party API that decodes and echoes products",
        version=settings.service.version,
        lifespan=lifespan,
    )

    app.add_middleware(RequestLoggingMiddleware, logger_factory=get_logger)

    register_exception_handlers(app)

    app.include_router(health.router, tags=["Operations"])
    app.include_router(info.router, tags=["Operations"])
    app.include_router(product.router, tags=["Products"])

    return app
