"""Configuration models for assetsmith."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from assetsmith.core.imaging.colors import parse_color

MAX_UPLOAD_BYTES = 50 * 1024 * 1024

ACCEPTED_MIME_TYPES: tuple[str, ...] = ("image/png", "image/jpeg", "image/webp", "image/gif")


class ConversionConfig(BaseModel):
    """Conversion limits and encoder settings.

    Attributes:
        max_upload_bytes: Largest accepted source, in bytes.
        allowed_mime_types: Declared MIME types accepted as sources.
        jpeg_quality: Quality for JPEG outputs.
        compression_level: DEFLATE level for the archive.
        max_concurrency: Per-request limit on concurrent asset transforms.
        default_background: Background used when a request gives none.
        archive_name: Suggested filename for the archive.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    max_upload_bytes: int = Field(default=MAX_UPLOAD_BYTES, gt=0)
    allowed_mime_types: tuple[str, ...] = Field(default=ACCEPTED_MIME_TYPES, min_length=1)
    jpeg_quality: int = Field(default=90, ge=1, le=100)
    compression_level: int = Field(default=6, ge=0, le=9)
    max_concurrency: int = Field(default=4, gt=0)
    default_background: str = "#ffffff"
    archive_name: str = Field(default="google-play-assets.zip", min_length=1)

    @field_validator("default_background")
    @classmethod
    def _check_background(cls, value: str) -> str:
        parse_color(value)
        return value


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False
    filename: str | None = None


class AppConfig(BaseModel):
    """Application-level configuration."""

    model_config = ConfigDict(extra="ignore")

    conversion: ConversionConfig = ConversionConfig()
    logging: LoggingConfig = LoggingConfig()

    @classmethod
    def default_path(cls) -> Path:
        """Default path for application config."""
        return Path("assetsmith.yaml")
