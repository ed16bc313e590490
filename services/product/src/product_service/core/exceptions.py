"""Exception handler registration for consistent error responses."""

from __future__ import annotations

from typing import TYPE_CHECKING

from service_commons.exceptions import ServiceError
from service_commons.exceptions import (
    register_exception_handlers as register_common_exception_handlers,
)

from product_service.logging import get_logger

if TYPE_CHECKING:
    from fastapi import FastAPI

__all__ = [
    "ServiceError",
    "register_exception_handlers",
]


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the app."""
    register_common_exception_handlers(app, get_logger)
