"""
Application state management.

Tracks uptime and holds the Product Service client.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gateway.clients import ProductClient


@dataclass
class AppState:
    """
    Runtime application state.

    Attributes:
        start_time: When the application started (UTC)
        _product_client: HTTP client for the Product Service (internal)
    """

    start_time: datetime = field(default_factory=lambda: datetime.now(UTC))
    _product_client: ProductClient | None = field(default=None, repr=False)

    @property
    def product_client(self) -> ProductClient:
        """Get the product client. Raises RuntimeError if not initialized."""
        if self._product_client is None:
            raise RuntimeError("Product client not initialized")
        return self._product_client

    @product_client.setter
    def product_client(self, value: ProductClient) -> None:
        """Set the product client."""
        self._product_client = value

    @property
    def uptime_seconds(self) -> float:
        """Calculate uptime in seconds."""
        return (datetime.now(UTC) - self.start_time).total_seconds()


# Initialized in lifespan context
_app_state: AppState | None = None


def get_app_state() -> AppState:
    """
    Get the current application state.

    Raises:
        RuntimeError: If called before app startup
    """
    if _app_state is None:
        raise RuntimeError("Application state not initialized")
    return _app_state


def init_app_state() -> AppState:
    """Initialize application state. Called during startup."""
    global _app_state  # noqa: PLW0603 - intentional singleton pattern
    _app_state = AppState()
    return _app_state


def reset_app_state() -> None:
    """Reset application state. Used in testing."""
    global _app_state  # noqa: PLW0603 - intentional singleton pattern
    _app_state = None
