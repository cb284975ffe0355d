"""Archive packaging and outcome report serialization."""

from assetsmith.core.packaging.archive import (
    DEFAULT_COMPRESSION_LEVEL,
    pack,
    read_archive,
    serialize_outcomes,
)

__all__ = [
    "DEFAULT_COMPRESSION_LEVEL",
    "pack",
    "read_archive",
    "serialize_outcomes",
]
