"""
Structured JSON logging for the product service.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from service_commons.logging import (
    RequestLoggingMiddleware,
    get_service_logger,
    setup_logging,
)

if TYPE_CHECKING:
    import logging

__all__ = [
    "RequestLoggingMiddleware",
    "get_logger",
    "setup_logging",
]


def get_logger() -> logging.Logger:
    """Get the service logger instance."""
    # Import lazily to avoid import-time settings evaluation.
    from product_service.config import get_settings  # noqa: PLC0415

    return get_service_logger(get_settings().service.name)
