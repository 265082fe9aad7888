"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError
import yaml

from framekit.core.config.models import AppConfig
from framekit.core.errors import InvalidConfiguration
from framekit.core.utils.json import read_json
from framekit.core.utils.logging import configure_logging as _configure_logging

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

LOG_LEVEL_ENV_VAR = "FRAMEKIT_LOG_LEVEL"


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("config.json")
        'json'
        >>> detect_format("config.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return raw configuration dictionary.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Raw configuration dictionary

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)

    if fmt == "json":
        try:
            content = read_json(path)
        except ValueError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    else:
        try:
            with path.open("r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
        # safe_load returns None for empty files
        if content is None:
            content = {}

    if not isinstance(content, dict):
        raise ValueError(f"Config root must be a mapping in {path}, got {type(content).__name__}")
    return content


def validate_options(model: type[M], options: dict[str, Any] | None) -> M:
    """Validate raw options against a config model.

    Args:
        model: Pydantic model class (should forbid extra fields).
        options: Raw option mapping; None means all defaults.

    Returns:
        Validated model instance.

    Raises:
        InvalidConfiguration: If options are unrecognized or invalid.
    """
    try:
        return model.model_validate(options or {})
    except ValidationError as e:
        raise InvalidConfiguration(f"Invalid {model.__name__}: {e}") from e


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration.

    Missing files fall back to defaults. ``FRAMEKIT_LOG_LEVEL`` overrides the
    configured log level.

    Args:
        path: Path to app config file (.json, .yaml, or .yml)

    Returns:
        Validated AppConfig instance

    Raises:
        InvalidConfiguration: If the config content is invalid
    """
    raw: dict[str, Any] = {}
    if path is not None and Path(path).exists():
        raw = load_config(path)
    elif path is not None:
        logger.debug("App config %s not found; using defaults", path)

    config = validate_options(AppConfig, raw)
    _load_env_vars_into_config(config)
    return config


def configure_logging(config: AppConfig | None = None) -> None:
    """Configure Python logging from app config.

    Args:
        config: AppConfig instance (defaults if None)
    """
    if config is None:
        config = load_app_config()

    _configure_logging(
        level=config.logging.level,
        format_string=config.logging.format,
        filename=config.logging.filename,
        structured=config.logging.structured,
    )


def _load_env_vars_into_config(config: AppConfig) -> None:
    """Apply environment overrides (mutates config)."""
    level = os.getenv(LOG_LEVEL_ENV_VAR)
    if level:
        level = level.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise InvalidConfiguration(f"{LOG_LEVEL_ENV_VAR} has invalid level: {level}")
        logger.debug("Loaded %s from environment", LOG_LEVEL_ENV_VAR)
        config.logging = config.logging.model_copy(update={"level": level})
