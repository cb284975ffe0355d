"""Configuration management for assetsmith."""

from assetsmith.core.config.loader import (
    LOG_LEVEL_ENV_VAR,
    detect_format,
    load_app_config,
    load_config,
)
from assetsmith.core.config.models import (
    ACCEPTED_MIME_TYPES,
    MAX_UPLOAD_BYTES,
    AppConfig,
    ConversionConfig,
    LoggingConfig,
)

__all__ = [
    # Loaders
    "LOG_LEVEL_ENV_VAR",
    "detect_format",
    "load_app_config",
    "load_config",
    # Models
    "ACCEPTED_MIME_TYPES",
    "MAX_UPLOAD_BYTES",
    "AppConfig",
    "ConversionConfig",
    "LoggingConfig",
]
