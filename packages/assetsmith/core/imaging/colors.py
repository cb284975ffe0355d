"""Background color parsing."""

from __future__ import annotations

import re

from PIL import ImageColor

from assetsmith.core.errors import InvalidColor

RGB = tuple[int, int, int]

DEFAULT_BACKGROUND = "#ffffff"

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def parse_color(value: str | RGB) -> RGB:
    """Parse a ``#RRGGBB`` (or short ``#RGB``) color into an RGB tuple.

    Args:
        value: Hex color string, or an already-parsed RGB tuple.

    Returns:
        (r, g, b) with each channel in 0..255.

    Raises:
        InvalidColor: If the value is not a hex color.

    Example:
        >>> parse_color("#1a2B3c")
        (26, 43, 60)
    """
    if isinstance(value, tuple):
        if len(value) == 3 and all(isinstance(c, int) and 0 <= c <= 255 for c in value):
            return value
        raise InvalidColor(f"Invalid RGB color: {value!r}")

    if not isinstance(value, str) or not _HEX_COLOR.match(value.strip()):
        raise InvalidColor(f"Invalid background color {value!r}, expected #RRGGBB")

    r, g, b = ImageColor.getrgb(value.strip())[:3]
    return (r, g, b)
