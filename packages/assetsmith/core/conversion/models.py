"""Batch conversion models.

Defines the request/response boundary of a conversion:
- SourceImage: Uploaded bytes with declared MIME type and size
- ConversionOutcome: Per-asset success/failure record
- ConversionRequest: Everything a caller supplies for one conversion
- ConversionResult: Archive bytes plus the ordered outcome report
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from assetsmith.core.catalog.models import AssetCategory


class SourceImage(BaseModel):
    """Uploaded source image.

    Attributes:
        data: Raw encoded bytes.
        mime_type: MIME type declared by the caller.
        size_bytes: Declared byte length.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    data: bytes
    mime_type: str
    size_bytes: int = Field(ge=0)

    @classmethod
    def from_bytes(cls, data: bytes, mime_type: str) -> SourceImage:
        """Build a SourceImage whose size is the length of ``data``."""
        return cls(data=data, mime_type=mime_type, size_bytes=len(data))


class ConversionOutcome(BaseModel):
    """Result of converting one asset spec.

    Attributes:
        name: Spec name.
        success: Whether the asset was produced.
        error: Failure reason (failed outcomes only).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(min_length=1)
    success: bool
    error: str | None = None


def success_outcome(name: str) -> ConversionOutcome:
    """Create a successful outcome."""
    return ConversionOutcome(name=name, success=True)


def failure_outcome(name: str, error: str) -> ConversionOutcome:
    """Create a failed outcome."""
    return ConversionOutcome(name=name, success=False, error=error or "Unknown error")


class ConversionRequest(BaseModel):
    """One conversion request as received from a caller.

    Attributes:
        image: Source image.
        categories: Raw category selection: None, a JSON-encoded list, or
            a sequence of category names.
        background_color: ``#RRGGBB`` background for icons and splash screens.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    image: SourceImage
    categories: str | list[str] | None = None
    background_color: str = "#ffffff"

    @classmethod
    def from_form(
        cls,
        data: bytes,
        mime_type: str,
        categories: str | None = None,
        background_color: str | None = None,
        size_bytes: int | None = None,
    ) -> ConversionRequest:
        """Build a request from form-style fields.

        An empty background color falls back to white.

        Args:
            data: Uploaded bytes.
            mime_type: Declared MIME type.
            categories: JSON-encoded category list, if the field was sent.
            background_color: Background color field.
            size_bytes: Declared size. Defaults to ``len(data)``.

        Returns:
            ConversionRequest
        """
        image = SourceImage(
            data=data,
            mime_type=mime_type,
            size_bytes=len(data) if size_bytes is None else size_bytes,
        )
        return cls(
            image=image,
            categories=categories,
            background_color=background_color or "#ffffff",
        )


class ConversionResult(BaseModel):
    """Completed conversion.

    Attributes:
        archive: ZIP archive bytes with every successful asset.
        outcomes: One outcome per processed spec, in processing order.
        report: Outcomes serialized as compact JSON, returned alongside the archive.
        categories: Categories that were processed.
        archive_name: Suggested filename for the archive.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    archive: bytes
    outcomes: list[ConversionOutcome] = Field(default_factory=list)
    report: str = "[]"
    categories: tuple[AssetCategory, ...] = ()
    archive_name: str = "google-play-assets.zip"

    @property
    def total_succeeded(self) -> int:
        """Count of successful outcomes."""
        return sum(1 for o in self.outcomes if o.success)

    @property
    def total_failed(self) -> int:
        """Count of failed outcomes."""
        return sum(1 for o in self.outcomes if not o.success)

    @property
    def all_succeeded(self) -> bool:
        return self.total_failed == 0

    def failures(self) -> list[ConversionOutcome]:
        """Return failed outcomes in processing order."""
        return [o for o in self.outcomes if not o.success]

    def to_response(self) -> dict[str, Any]:
        """Response payload for callers that transport the result themselves.

        Returns:
            Dict with ``archive_name`` and the outcome list; the archive bytes
            travel separately.
        """
        return {
            "archive_name": self.archive_name,
            "outcomes": [o.model_dump(mode="json", exclude_none=True) for o in self.outcomes],
        }
