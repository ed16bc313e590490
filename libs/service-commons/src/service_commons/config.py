"""
Shared configuration infrastructure for services.

Every service loads a YAML file into a pydantic settings model.
There are no defaults: a missing or invalid value stops startup.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from functools import lru_cache
from pathlib import Path
from typing import Any, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


class ConfigurationError(Exception):
    """Raised when configuration is invalid or missing."""


def load_yaml_config(config_path: Path) -> dict[str, Any]:
    """
    Load and parse a YAML configuration file.

    Args:
        config_path: Path to the service's config.yaml

    Returns:
        Parsed configuration dictionary

    Raises:
        ConfigurationError: If the file is missing, empty, or not a mapping
    """
    if not config_path.exists():
        raise ConfigurationError(
            f"Configuration file not found: {config_path}\n"
            f"Expected location: {config_path.absolute()}"
        )

    try:
        with config_path.open() as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    if config is None:
        raise ConfigurationError(f"Configuration file is empty: {config_path}")

    if not isinstance(config, dict):
        raise ConfigurationError(
            f"Configuration must be a YAML mapping, got {type(config).__name__}"
        )

    return config


def get_config_path(env_var_name: str, default_filename: str) -> Path:
    """
    Resolve the configuration file path.

    Args:
        env_var_name: Environment variable that may hold the path
        default_filename: Path used when the variable is unset

    Returns:
        Path to configuration file
    """
    return Path(os.environ.get(env_var_name, default_filename))


def load_settings(settings_model: type[ModelT], yaml_config: dict[str, Any]) -> ModelT:
    """
    Validate raw YAML config into a typed settings model.

    Raises:
        ConfigurationError: If validation fails
    """
    try:
        return settings_model(**yaml_config)
    except ValidationError as e:
        raise ConfigurationError(
            f"Configuration validation failed: {e}\n"
            f"All configuration values must be explicitly specified."
        ) from e


def create_settings_loader(
    settings_model: type[ModelT],
    get_config_path_fn: Callable[[], Path],
) -> tuple[Callable[[], ModelT], Callable[[], None]]:
    """
    Build a cached settings getter and its cache resetter.

    Args:
        settings_model: Pydantic settings model type
        get_config_path_fn: Resolves the config path at first access

    Returns:
        Tuple of (get_settings, clear_settings_cache)
    """

    @lru_cache
    def get_settings() -> ModelT:
        yaml_config = load_yaml_config(get_config_path_fn())
        return load_settings(settings_model, yaml_config)

    def clear_settings_cache() -> None:
        get_settings.cache_clear()

    return get_settings, clear_settings_cache
