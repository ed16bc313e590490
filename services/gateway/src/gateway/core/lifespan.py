"""
Application lifecycle management.

Creates the Product Service client at startup and closes it at shutdown.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from gateway.clients import ProductClient
from gateway.config import get_settings
from gateway.core.state import init_app_state
from gateway.logging import get_logger, setup_logging

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from fastapi import FastAPI


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """
    Manage application lifecycle.

    Startup:
    - Initialize logging
    - Initialize application state
    - Create the Product Service client
    - Probe the Product Service (logged only, never fatal)

    Shutdown:
    - Log shutdown with uptime
    - Close the HTTP client
    """
    # === STARTUP ===
    settings = get_settings()

    setup_logging(settings.server.log_level, settings.service.name)
    logger = get_logger()

    state = init_app_state()

    logger.info(
        "Service starting",
        extra={
            "service": settings.service.name,
            "version": settings.service.version,
            "host": settings.server.host,
            "port": settings.server.port,
        },
    )

    state.product_client = ProductClient(
        base_url=settings.backends.product_url,
        timeout=settings.backends.timeout_seconds,
        service_name="product",
    )
    logger.info(
        "Product client initialized",
        extra={
            "product_url": settings.backends.product_url,
            "timeout": settings.backends.timeout_seconds,
        },
    )

    # health_check never raises; it reports "unavailable" instead
    product_status = await state.product_client.health_check()
    logger.info("Backend health check completed", extra={"product": product_status})

    logger.info("Service ready to accept requests")

    yield  # Application runs here

    # === SHUTDOWN ===
    logger.info("Service shutting down", extra={"uptime_seconds": state.uptime_seconds})

    await state.product_client.close()

    logger.info("Service shutdown complete")
