"""ZIP packaging of converted assets.

Writes each asset under ``<folder>/<name>.<format>``. Entries carry a fixed
timestamp and fixed permissions, so identical assets in identical order always
produce identical archive bytes.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from io import BytesIO
import json
import logging
from typing import TYPE_CHECKING
import zipfile
import zlib

from assetsmith.core.errors import PackagingError
from assetsmith.core.imaging.models import ConvertedAsset

if TYPE_CHECKING:
    from assetsmith.core.conversion.models import ConversionOutcome

logger = logging.getLogger(__name__)

DEFAULT_COMPRESSION_LEVEL = 6

# Earliest timestamp representable in a ZIP entry
_FIXED_DATE_TIME = (1980, 1, 1, 0, 0, 0)

_FILE_MODE = 0o100644
_DIR_MODE = 0o40755


def _parent_dirs(path: str) -> list[str]:
    """Directory entries leading to a file path, outermost first.

    Example:
        >>> _parent_dirs("icons/android/a.png")
        ['icons/', 'icons/android/']
    """
    parts = path.split("/")[:-1]
    return ["/".join(parts[: i + 1]) + "/" for i in range(len(parts))]


def _entry(name: str, mode: int, compress_type: int) -> zipfile.ZipInfo:
    info = zipfile.ZipInfo(name, date_time=_FIXED_DATE_TIME)
    info.external_attr = mode << 16
    info.create_system = 3
    info.compress_type = compress_type
    return info


def pack(
    assets: Iterable[ConvertedAsset],
    compression_level: int = DEFAULT_COMPRESSION_LEVEL,
) -> bytes:
    """Pack converted assets into a DEFLATE-compressed ZIP archive.

    Args:
        assets: Successful assets, in insertion order.
        compression_level: DEFLATE level (0-9).

    Returns:
        Archive bytes.

    Raises:
        PackagingError: If two assets share a path or the archive cannot be written.
    """
    buf = BytesIO()
    written: set[str] = set()
    count = 0

    try:
        with zipfile.ZipFile(
            buf,
            mode="w",
            compression=zipfile.ZIP_DEFLATED,
            compresslevel=compression_level,
        ) as zf:
            for asset in assets:
                path = asset.archive_path
                if path in written:
                    raise PackagingError(f"Duplicate archive path: {path}")

                for directory in _parent_dirs(path):
                    if directory not in written:
                        zf.writestr(_entry(directory, _DIR_MODE, zipfile.ZIP_STORED), b"")
                        written.add(directory)

                zf.writestr(
                    _entry(path, _FILE_MODE, zipfile.ZIP_DEFLATED),
                    asset.data,
                    compresslevel=compression_level,
                )
                written.add(path)
                count += 1
    except PackagingError:
        raise
    except (OSError, ValueError, zlib.error, zipfile.LargeZipFile) as e:
        raise PackagingError(f"Failed to write archive: {e}") from e

    data = buf.getvalue()
    logger.debug("Packed %d assets into %d byte archive", count, len(data))
    return data


def read_archive(data: bytes) -> dict[str, bytes]:
    """Read every file entry of an archive.

    Args:
        data: Archive bytes.

    Returns:
        Mapping of archive path to file bytes, directory entries excluded.

    Raises:
        PackagingError: If the bytes are not a readable ZIP archive.
    """
    try:
        with zipfile.ZipFile(BytesIO(data)) as zf:
            return {
                info.filename: zf.read(info)
                for info in zf.infolist()
                if not info.is_dir()
            }
    except (zipfile.BadZipFile, OSError) as e:
        raise PackagingError(f"Unreadable archive: {e}") from e


def serialize_outcomes(outcomes: Sequence[ConversionOutcome]) -> str:
    """Serialize the outcome report as compact JSON.

    Args:
        outcomes: Outcomes in processing order.

    Returns:
        JSON array of ``{"name", "success"[, "error"]}`` objects.
    """
    payload = [o.model_dump(mode="json", exclude_none=True) for o in outcomes]
    return json.dumps(payload, separators=(",", ":"))
