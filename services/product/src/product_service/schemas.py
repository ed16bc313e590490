"""
Pydantic models for the product service API.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError


class Product(BaseModel):
    """
    A product record decoded from any supported encoding.

    Fields not listed here are ignored. Required fields must also be
    non-zero: an empty name or a number of 0 counts as missing.
    """

    model_config = ConfigDict(extra="ignore")

    name: str = Field(min_length=1)
    """Product name; must be present and non-empty."""

    number: int
    """Quantity; must be present, an integer and non-zero."""

    @field_validator("number")
    @classmethod
    def number_is_set(cls, value: int) -> int:
        """Treat a zero number as absent."""
        if value == 0:
            raise PydanticCustomError("missing", "Field required")
        return value


class HealthResponse(BaseModel):
    """Response model for GET /health endpoint."""

    status: Literal["healthy"]
    """Service health status."""

    uptime_seconds: float
    """Uptime in seconds since service start."""

    uptime: str
    """Human-readable uptime."""

    system_time: str
    """Current system time in yyyy-mm-dd hh:mm format (UTC)."""


class InfoResponse(BaseModel):
    """Response model for GET /info endpoint."""

    service: str
    """Service name."""

    version: str
    """Service version."""

    media_types: list[str]
    """Content types accepted by POST /product."""


class ErrorResponse(BaseModel):
    """Standard error response model."""

    error: str
    """Machine-readable error code."""

    message: str
    """Human-readable error description."""

    details: dict[str, Any]
    """Additional error context."""
