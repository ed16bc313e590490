"""
Shared fixtures for unit tests.

The Product Service client and app state are mocked so router tests run
without network access.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from gateway.clients import RelayedResponse

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Generator
    from pathlib import Path

TEST_CONFIG_YAML = """
service:
  name: "gateway"
  version: "0.1.0"

backends:
  product_url: "http://localhost:7586"
  timeout_seconds: 5.0

server:
  host: "0.0.0.0"
  port: 7587
  log_level: "info"
"""


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset settings cache before and after each test."""
    from gateway.config import clear_settings_cache  # noqa: PLC0415

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture(autouse=True)
def test_config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Write a valid config file and point GATEWAY_CONFIG_PATH at it."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(TEST_CONFIG_YAML)
    monkeypatch.setenv("GATEWAY_CONFIG_PATH", str(config_path))
    return config_path


@pytest.fixture
def mock_product_client() -> AsyncMock:
    """Create a mock Product Service client."""
    client = AsyncMock()
    client.health_check.return_value = "healthy"
    client.get_info.return_value = {
        "service": "product",
        "version": "0.1.0",
        "media_types": ["application/json", "application/xml"],
    }
    client.add_product.return_value = RelayedResponse(
        status_code=200,
        content_type="application/json",
        body=b'{"name":"iPhoneX","number":100}',
    )
    client.close = AsyncMock()
    return client


@pytest.fixture
def mock_app_state(mock_product_client: AsyncMock) -> MagicMock:
    """Create mock app state with the mock client."""
    mock_state = MagicMock()
    mock_state.product_client = mock_product_client
    mock_state.uptime_seconds = 123.45
    return mock_state


@pytest.fixture
def test_client(mock_app_state: MagicMock) -> Generator[TestClient, None, None]:
    """Create a test client with mocked dependencies."""
    from gateway.config import get_settings  # noqa: PLC0415
    from gateway.core.exceptions import register_exception_handlers  # noqa: PLC0415
    from gateway.routers import health, info, products  # noqa: PLC0415

    @asynccontextmanager
    async def mock_lifespan(_app: FastAPI) -> AsyncIterator[None]:
        yield

    settings = get_settings()

    # Create app without the real lifespan
    app = FastAPI(
        title=f"{settings.service.name} Service",
        version=settings.service.version,
        lifespan=mock_lifespan,
    )
    register_exception_handlers(app)
    app.include_router(health.router)
    app.include_router(info.router)
    app.include_router(products.router)

    with (
        patch("gateway.routers.health.get_app_state", return_value=mock_app_state),
        patch("gateway.routers.info.get_app_state", return_value=mock_app_state),
        patch("gateway.routers.products.get_app_state", return_value=mock_app_state),
        TestClient(app) as client,
    ):
        yield client
