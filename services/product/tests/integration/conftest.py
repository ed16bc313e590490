"""
Shared fixtures for integration tests.

Integration tests run the real product service application, lifespan
included, with the service's own config.yaml.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from fastapi.testclient import TestClient

from product_service.app import create_app
from product_service.config import clear_settings_cache
from product_service.core.state import reset_app_state

if TYPE_CHECKING:
    from collections.abc import Iterator

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config.yaml"


@pytest.fixture
def client(monkeypatch: pytest.MonkeyPatch) -> Iterator[TestClient]:
    """
    Create test client with the real application.

    Uses context manager to trigger lifespan events.
    """
    monkeypatch.setenv("PRODUCT_SERVICE_CONFIG_PATH", str(CONFIG_PATH))
    clear_settings_cache()
    reset_app_state()
    app = create_app()
    with TestClient(app) as test_client:
        yield test_client
    clear_settings_cache()
    reset_app_state()
