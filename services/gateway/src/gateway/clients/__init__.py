"""HTTP clients for backend services."""

from gateway.clients.base import BackendClient
from gateway.clients.product import ProductClient, RelayedResponse

__all__ = [
    "BackendClient",
    "ProductClient",
    "RelayedResponse",
]
