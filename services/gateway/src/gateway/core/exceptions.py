"""
Gateway error kinds and exception handler registration.

TransportError and ResponseReadError are raised by the outbound client and
carry no HTTP status; routers translate them into ServiceError.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from service_commons.exceptions import ServiceError
from service_commons.exceptions import (
    register_exception_handlers as register_common_exception_handlers,
)

from gateway.logging import get_logger

if TYPE_CHECKING:
    from fastapi import FastAPI

__all__ = [
    "BackendError",
    "ResponseReadError",
    "ServiceError",
    "TransportError",
    "register_exception_handlers",
]


class BackendError(ServiceError):
    """
    A JSON request to a backend failed.

    Used by the operational calls (/info) where a status code is already known.
    """


class TransportError(Exception):
    """
    The outbound request could not be made.

    Covers connection refused, DNS failure, timeouts and protocol errors
    raised before a response arrived.
    """

    def __init__(self, backend: str, url: str, cause: Exception) -> None:
        self.backend = backend
        self.url = url
        self.error_type = type(cause).__name__
        reason = str(cause) or self.error_type
        super().__init__(f"{backend} request to {url} failed: {reason}")


class ResponseReadError(Exception):
    """A response arrived but its body could not be read in full."""

    def __init__(self, backend: str, url: str, cause: Exception) -> None:
        self.backend = backend
        self.url = url
        self.error_type = type(cause).__name__
        super().__init__("request api has error")


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the app."""
    register_common_exception_handlers(app, get_logger)
