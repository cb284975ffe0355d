"""Shared pytest fixtures for assetsmith tests."""

from __future__ import annotations

from collections.abc import Callable
from io import BytesIO

import numpy as np
from PIL import Image
import pytest

ImageFactory = Callable[..., bytes]


def encode(image: Image.Image, fmt: str = "PNG") -> bytes:
    """Encode a PIL image to bytes."""
    buf = BytesIO()
    image.save(buf, fmt)
    return buf.getvalue()


# ============================================================================
# Source Image Fixtures
# ============================================================================


@pytest.fixture
def make_image_bytes() -> ImageFactory:
    """Factory for solid-color encoded source images."""

    def _make(
        width: int = 64,
        height: int = 64,
        color: tuple[int, ...] = (255, 0, 0, 255),
        fmt: str = "PNG",
    ) -> bytes:
        mode = "RGBA" if fmt == "PNG" else "RGB"
        img = Image.new(mode, (width, height), color[: len(mode)])
        return encode(img, fmt)

    return _make


@pytest.fixture
def square_png(make_image_bytes: ImageFactory) -> bytes:
    """64x64 opaque red PNG."""
    return make_image_bytes(64, 64)


@pytest.fixture
def wide_png(make_image_bytes: ImageFactory) -> bytes:
    """200x100 opaque red PNG."""
    return make_image_bytes(200, 100)


@pytest.fixture
def broken_png() -> bytes:
    """Noise PNG whose second IDAT chunk has a corrupted chunk type.

    The header is intact, so the failure only surfaces while loading pixels.
    """
    rng = np.random.default_rng(0)
    pixels = rng.integers(0, 256, size=(400, 400, 3), dtype=np.uint8)
    data = bytearray(encode(Image.fromarray(pixels, "RGB")))

    first = data.find(b"IDAT")
    second = data.find(b"IDAT", first + 4)
    assert second != -1, "encoder wrote a single IDAT chunk"
    data[second : second + 4] = b"\x00\x00\x00\x00"
    return bytes(data)
