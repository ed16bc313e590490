"""
Shared fixtures for unit tests.

App state is mocked and config comes from a temporary file, so tests run
without the real lifespan.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import TYPE_CHECKING
from unittest.mock import MagicMock, patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Iterator
    from pathlib import Path

TEST_CONFIG_YAML = """
service:
  name: "product"
  version: "0.1.0"

server:
  host: "0.0.0.0"
  port: 7586

logging:
  level: "INFO"
"""


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Iterator[None]:
    """Reset settings cache before and after each test."""
    from product_service.config import clear_settings_cache  # noqa: PLC0415

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture(autouse=True)
def test_config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Write a valid config file and point PRODUCT_SERVICE_CONFIG_PATH at it."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(TEST_CONFIG_YAML)
    monkeypatch.setenv("PRODUCT_SERVICE_CONFIG_PATH", str(config_path))
    return config_path


@pytest.fixture
def mock_app_state() -> MagicMock:
    """Mock application state with predictable uptime values."""
    state = MagicMock()
    state.start_time = datetime(2024, 1, 1, 0, 0, 0, tzinfo=UTC)
    state.uptime_seconds = 123.45
    state.uptime_formatted = "2m 3s"
    return state


@pytest.fixture
def test_client(mock_app_state: MagicMock) -> Iterator[TestClient]:
    """Create a test client with mocked app state."""
    from product_service.core.exceptions import register_exception_handlers  # noqa: PLC0415
    from product_service.routers import health, info, product  # noqa: PLC0415

    @asynccontextmanager
    async def mock_lifespan(_app: FastAPI) -> AsyncIterator[None]:
        yield

    app = FastAPI(lifespan=mock_lifespan)
    register_exception_handlers(app)
    app.include_router(health.router)
    app.include_router(info.router)
    app.include_router(product.router)

    with (
        patch("product_service.routers.health.get_app_state", return_value=mock_app_state),
        TestClient(app) as client,
    ):
        yield client
