"""API routers for the gateway service."""

from gateway.routers import health, info, products

__all__ = ["health", "info", "products"]
