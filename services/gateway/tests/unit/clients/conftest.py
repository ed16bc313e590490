"""Fixtures for client unit tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Callable

    from gateway.clients.base import BackendClient
    from gateway.clients.product import ProductClient

    Handler = Callable[[httpx.Request], httpx.Response]

PRODUCT_URL = "http://localhost:7586"


class FailingStream(httpx.AsyncByteStream):
    """Response body stream that breaks after the headers arrived."""

    async def __aiter__(self):  # noqa: ANN204
        raise httpx.ReadError("connection reset while reading body")
        yield b""  # pragma: no cover


class MockBackend:
    """
    Scripted stand-in for a backend.

    Tests assign ``handler``; every request is recorded in ``requests``.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.handler: Handler = lambda _request: httpx.Response(200, json={})

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def failing_stream() -> FailingStream:
    """A body stream that raises on read."""
    return FailingStream()


@pytest.fixture
def mock_backend() -> MockBackend:
    """Create a scripted backend."""
    return MockBackend()


@pytest.fixture
async def product_client(mock_backend: MockBackend) -> AsyncGenerator[ProductClient, None]:
    """Create a ProductClient whose httpx client talks to the scripted backend."""
    from gateway.clients.product import ProductClient  # noqa: PLC0415

    client = ProductClient(base_url=PRODUCT_URL, timeout=5.0, service_name="product")
    await client.close()
    # Replace the internal httpx client with one bound to the mock transport
    client.client = httpx.AsyncClient(base_url=PRODUCT_URL, transport=mock_backend.transport())
    yield client
    await client.close()


@pytest.fixture
async def backend_client(mock_backend: MockBackend) -> AsyncGenerator[BackendClient, None]:
    """Create a generic BackendClient bound to the scripted backend."""
    from gateway.clients.base import BackendClient  # noqa: PLC0415

    client = BackendClient(base_url=PRODUCT_URL, timeout=5.0, service_name="test_backend")
    await client.close()
    client.client = httpx.AsyncClient(base_url=PRODUCT_URL, transport=mock_backend.transport())
    yield client
    await client.close()
