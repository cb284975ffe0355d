"""Asset catalog models.

Defines the declarative data for the conversion engine:
- AssetCategory: Closed set of asset kinds (selects the fitting strategy)
- OutputFormat: Output encoding
- AssetSpec: One required output asset
- CategoryMetadata: Display label + description for a category
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class AssetCategory(str, Enum):
    """Classification of store assets.

    Determines how the source image is fitted into the target box.

    Attributes:
        ICON: Launcher/store icons (contain fit, padded with background).
        FEATURE: Feature graphic banner (cover fit).
        SCREENSHOT: Device screenshots (cover fit).
        SPLASH: Splash screens (centered artwork on background).
        TV: Android TV banner (cover fit).
    """

    ICON = "icon"
    FEATURE = "feature"
    SCREENSHOT = "screenshot"
    SPLASH = "splash"
    TV = "tv"


class OutputFormat(str, Enum):
    """Output encoding for an asset."""

    PNG = "png"
    JPEG = "jpeg"


class AssetSpec(BaseModel):
    """Declarative specification for one required output asset.

    Attributes:
        name: Unique identifier, also the output filename stem.
        width: Exact output width in pixels.
        height: Exact output height in pixels.
        category: Asset category (selects the fitting strategy).
        format: Output encoding.
        folder: Directory of this asset inside the archive.
        description: Human-readable label.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(min_length=1)
    width: int = Field(gt=0)
    height: int = Field(gt=0)
    category: AssetCategory
    format: OutputFormat = OutputFormat.PNG
    folder: str = Field(min_length=1)
    description: str = ""

    @property
    def size(self) -> tuple[int, int]:
        """Target (width, height)."""
        return (self.width, self.height)

    @property
    def filename(self) -> str:
        """Output filename, ``<name>.<format>``."""
        return f"{self.name}.{self.format.value}"

    @property
    def archive_path(self) -> str:
        """Path of this asset inside the archive."""
        return f"{self.folder}/{self.filename}"


class CategoryMetadata(BaseModel):
    """Display metadata for a category."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    label: str = Field(min_length=1)
    description: str = Field(min_length=1)
