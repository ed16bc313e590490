"""
Configuration management for the gateway service.

Loads configuration from YAML with ZERO defaults.
Every value must be explicitly specified or startup fails.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field
from service_commons.config import (
    ConfigurationError,
    create_settings_loader,
    load_yaml_config,
)
from service_commons.config import (
    get_config_path as resolve_config_path,
)

if TYPE_CHECKING:
    from pathlib import Path

__all__ = [
    "BackendsConfig",
    "ConfigurationError",
    "ServerConfig",
    "ServiceConfig",
    "Settings",
    "clear_settings_cache",
    "get_config_path",
    "get_settings",
    "load_yaml_config",
]


class ServiceConfig(BaseModel):
    """Service identity configuration."""

    model_config = ConfigDict(extra="forbid")

    name: str
    version: str


class BackendsConfig(BaseModel):
    """Product Service location and outbound timeout."""

    model_config = ConfigDict(extra="forbid")

    product_url: str
    timeout_seconds: float = Field(gt=0)


class ServerConfig(BaseModel):
    """HTTP server configuration."""

    model_config = ConfigDict(extra="forbid")

    host: str
    port: int
    log_level: str


class Settings(BaseModel):
    """
    Root configuration container.

    All fields are REQUIRED. No defaults exist.

    Usage:
        from gateway.config import get_settings
        settings = get_settings()
    """

    model_config = ConfigDict(extra="forbid")

    service: ServiceConfig
    backends: BackendsConfig
    server: ServerConfig


def get_config_path() -> Path:
    """
    Determine configuration file path.

    Uses GATEWAY_CONFIG_PATH if set, otherwise ./config.yaml.
    """
    return resolve_config_path(
        env_var_name="GATEWAY_CONFIG_PATH",
        default_filename="config.yaml",
    )


get_settings, clear_settings_cache = create_settings_loader(Settings, get_config_path)
