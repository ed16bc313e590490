"""
Shared fixtures for cross-service tests.

The gateway runs under TestClient and reaches the real product service
application in-process through ``httpx.ASGITransport``. No sockets are
opened.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING
from unittest.mock import patch

import httpx
import pytest
from fastapi.testclient import TestClient

from gateway.app import create_app as create_gateway_app
from gateway.clients import ProductClient
from gateway.config import clear_settings_cache as clear_gateway_settings
from product_service.app import create_app as create_product_app
from product_service.config import clear_settings_cache as clear_product_settings
from product_service.core.state import init_app_state, reset_app_state

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from fastapi import FastAPI

REPO_ROOT = Path(__file__).resolve().parent.parent
GATEWAY_CONFIG = REPO_ROOT / "services" / "gateway" / "config.yaml"
PRODUCT_CONFIG = REPO_ROOT / "services" / "product" / "config.yaml"


@pytest.fixture
def product_app(monkeypatch: pytest.MonkeyPatch) -> Iterator[FastAPI]:
    """
    Create the real product service application.

    ASGITransport does not run lifespan events, so app state is
    initialized here.
    """
    monkeypatch.setenv("PRODUCT_SERVICE_CONFIG_PATH", str(PRODUCT_CONFIG))
    clear_product_settings()
    app = create_product_app()
    init_app_state()
    yield app
    reset_app_state()
    clear_product_settings()


def _client_factory(transport: httpx.AsyncBaseTransport) -> Callable[..., ProductClient]:
    """Build a ProductClient replacement that sends through ``transport``."""

    class InProcessProductClient(ProductClient):
        def __init__(self, base_url: str, timeout: float, service_name: str) -> None:
            super().__init__(base_url=base_url, timeout=timeout, service_name=service_name)
            self.client = httpx.AsyncClient(
                base_url=base_url,
                timeout=httpx.Timeout(timeout),
                transport=transport,
            )

    return InProcessProductClient


def _gateway_client(
    transport: httpx.AsyncBaseTransport,
    monkeypatch: pytest.MonkeyPatch,
) -> Iterator[TestClient]:
    monkeypatch.setenv("GATEWAY_CONFIG_PATH", str(GATEWAY_CONFIG))
    clear_gateway_settings()
    with (
        patch("gateway.core.lifespan.ProductClient", _client_factory(transport)),
        TestClient(create_gateway_app()) as client,
    ):
        yield client
    clear_gateway_settings()


@pytest.fixture
def gateway(product_app: FastAPI, monkeypatch: pytest.MonkeyPatch) -> Iterator[TestClient]:
    """Gateway wired to the in-process product service."""
    yield from _gateway_client(httpx.ASGITransport(app=product_app), monkeypatch)


@pytest.fixture
def gateway_without_backend(monkeypatch: pytest.MonkeyPatch) -> Iterator[TestClient]:
    """Gateway whose Product Service refuses every connection."""

    def refuse(_request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused")

    yield from _gateway_client(httpx.MockTransport(refuse), monkeypatch)
