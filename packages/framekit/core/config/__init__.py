"""Configuration models and loaders."""

from framekit.core.config.loader import (
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
    validate_options,
)
from framekit.core.config.models import AppConfig, LoggingConfig, VideoConfig

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "VideoConfig",
    "configure_logging",
    "detect_format",
    "load_app_config",
    "load_config",
    "validate_options",
]
