"""
Pydantic response models for the gateway service API.

The add-product endpoints relay raw downstream bytes and have no model.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel


class BackendStatus(BaseModel):
    """Backend service status for health check."""

    product: str


class HealthResponse(BaseModel):
    """Response model for GET /health endpoint."""

    status: Literal["healthy", "unhealthy"]
    """Service health status."""

    backends: BackendStatus | None = None
    """Backend service status (if check_backends=true)."""


class BackendInfo(BaseModel):
    """Backend service info for /info endpoint."""

    url: str
    status: str
    info: dict[str, Any] | None = None


class InfoResponse(BaseModel):
    """Response model for GET /info endpoint."""

    service: str
    """Service name."""

    version: str
    """Service version."""

    encodings: list[str]
    """Payload encodings the gateway can forward."""

    product: BackendInfo
    """Product Service information."""


class ErrorResponse(BaseModel):
    """Standard error response model."""

    error: str
    """Machine-readable error code."""

    message: str
    """Human-readable error description."""

    details: dict[str, Any]
    """Additional error context."""
