"""Error taxonomy for the asset conversion engine.

Request-level errors (InvalidFileType, FileTooLarge, InvalidColor, a DecodeError on
the shared source, PackagingError) abort a conversion and reach the caller.
Per-asset errors (EncodeError, or any failure while transforming one spec) are
recorded in that asset's outcome and never abort the batch.
"""

from __future__ import annotations

from typing import Any


class AssetsmithError(Exception):
    """Base class for all conversion errors.

    Attributes:
        kind: Stable error identifier exposed to callers.
        message: Human-readable description.
    """

    kind: str = "AssetsmithError"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        """Structured form returned to callers instead of an archive.

        Returns:
            Dict with ``kind`` and ``message`` keys.
        """
        return {"kind": self.kind, "message": self.message}


class InvalidFileType(AssetsmithError):
    """Declared MIME type is not an accepted raster format."""

    kind = "InvalidFileType"


class FileTooLarge(AssetsmithError):
    """Source exceeds the maximum upload size."""

    kind = "FileTooLarge"


class DecodeError(AssetsmithError):
    """Source bytes are not a readable raster image."""

    kind = "DecodeError"


class EncodeError(AssetsmithError):
    """Output image could not be serialized."""

    kind = "EncodeError"


class UnknownCategory(AssetsmithError, ValueError):
    """Category value is outside the catalog's enumeration."""

    kind = "UnknownCategory"


class InvalidColor(AssetsmithError, ValueError):
    """Background color is not a ``#RRGGBB`` value."""

    kind = "InvalidColor"


class PackagingError(AssetsmithError):
    """Archive could not be written. Fatal for the whole batch."""

    kind = "PackagingError"


class AssetSpecNotFoundError(KeyError):
    """Raised when an asset spec name is not in the catalog."""

    pass
