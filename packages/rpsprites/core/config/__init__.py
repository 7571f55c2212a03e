"""Configuration management for rpsprites."""

from rpsprites.core.config.loader import (
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
)
from rpsprites.core.config.models import (
    AppConfig,
    CompositorConfig,
    GenerationConfig,
    LayoutConfig,
    LoggingConfig,
    PathsConfig,
)

__all__ = [
    # Loaders
    "load_config",
    "load_app_config",
    "detect_format",
    "configure_logging",
    # Models
    "AppConfig",
    "CompositorConfig",
    "GenerationConfig",
    "LayoutConfig",
    "LoggingConfig",
    "PathsConfig",
]
