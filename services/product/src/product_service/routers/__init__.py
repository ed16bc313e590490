"""API routers for the product service."""

from product_service.routers import health, info, product

__all__ = ["health", "info", "product"]
