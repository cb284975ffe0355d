"""Imaging result models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from assetsmith.core.catalog.models import OutputFormat


class ConvertedAsset(BaseModel):
    """Encoded output for one asset spec.

    Attributes:
        name: Spec name.
        filename: Output filename (``<name>.<format>``).
        folder: Directory inside the archive.
        data: Encoded image bytes.
        format: Output encoding.
        width: Image width in pixels.
        height: Image height in pixels.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(min_length=1)
    filename: str = Field(min_length=1)
    folder: str = Field(min_length=1)
    data: bytes = Field(min_length=1)
    format: OutputFormat
    width: int = Field(gt=0)
    height: int = Field(gt=0)

    @property
    def archive_path(self) -> str:
        """Path of this asset inside the archive."""
        return f"{self.folder}/{self.filename}"
