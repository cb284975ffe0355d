"""Per-asset image transformation.

Maps one decoded source image onto one AssetSpec:
- icon: contain fit, padded with the opaque background color
- splash: artwork centered on a background-filled canvas at 60% scale
- everything else: cover fit, overflow cropped around the center

All functions are pure. The decoded source is only read, never mutated,
so one decode can be shared across concurrent transforms.
"""

from __future__ import annotations

from collections.abc import Callable
from io import BytesIO
import logging
import math

from PIL import Image, ImageOps, UnidentifiedImageError

from assetsmith.core.catalog.models import AssetCategory, AssetSpec, OutputFormat
from assetsmith.core.errors import DecodeError, EncodeError
from assetsmith.core.imaging.colors import RGB, parse_color
from assetsmith.core.imaging.models import ConvertedAsset

logger = logging.getLogger(__name__)

# Fraction of the available box the splash artwork may occupy
SPLASH_ARTWORK_RATIO = 0.6

DEFAULT_JPEG_QUALITY = 90

_RESAMPLE = Image.Resampling.LANCZOS

Fitter = Callable[[Image.Image, tuple[int, int], RGB], Image.Image]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _contain_size(source: tuple[int, int], bounds: tuple[int, int]) -> tuple[int, int]:
    """Largest size with the source's aspect ratio that fits inside bounds.

    Args:
        source: Source (width, height).
        bounds: Bounding (width, height).

    Returns:
        (width, height), each at least 1 and at most the bound.
    """
    sw, sh = source
    bw, bh = bounds
    scale = min(bw / sw, bh / sh)
    width = min(bw, max(1, _round_half_up(sw * scale)))
    height = min(bh, max(1, _round_half_up(sh * scale)))
    return (width, height)


def _centered_offset(outer: tuple[int, int], inner: tuple[int, int]) -> tuple[int, int]:
    return ((outer[0] - inner[0]) // 2, (outer[1] - inner[1]) // 2)


def decode_image(data: bytes) -> Image.Image:
    """Decode raw bytes into an RGBA image.

    Animated sources contribute their first frame only.

    Args:
        data: Encoded image bytes.

    Returns:
        Fully loaded RGBA image.

    Raises:
        DecodeError: If the bytes are not a readable raster image or have no
            usable dimensions.
    """
    if not data:
        raise DecodeError("Invalid image: empty input")

    try:
        with Image.open(BytesIO(data)) as img:
            img.seek(0)
            img.load()
            decoded = img.convert("RGBA")
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        ValueError,
        SyntaxError,
        EOFError,
    ) as e:
        raise DecodeError(f"Invalid image: {e}") from e

    width, height = decoded.size
    if width <= 0 or height <= 0:
        raise DecodeError("Invalid image: could not read dimensions")

    return decoded


def fit_contain(image: Image.Image, size: tuple[int, int], background: RGB) -> Image.Image:
    """Scale the whole source into the box and pad with the background color."""
    inner = _contain_size(image.size, size)
    resized = image.resize(inner, _RESAMPLE)

    canvas = Image.new("RGBA", size, (*background, 255))
    canvas.paste(resized, _centered_offset(size, inner))
    return canvas


def fit_cover(image: Image.Image, size: tuple[int, int], background: RGB) -> Image.Image:
    """Scale to cover the box and crop the overflow equally from both sides.

    The background color is not used.
    """
    return ImageOps.fit(image, size, method=_RESAMPLE, centering=(0.5, 0.5))


def fit_splash(image: Image.Image, size: tuple[int, int], background: RGB) -> Image.Image:
    """Center the artwork on a background-filled canvas.

    The artwork is never upscaled and occupies at most ``SPLASH_ARTWORK_RATIO``
    of the box in each dimension.
    """
    sw, sh = image.size
    tw, th = size
    scale = min(tw / sw, th / sh, 1.0) * SPLASH_ARTWORK_RATIO
    bounds = (max(1, _round_half_up(sw * scale)), max(1, _round_half_up(sh * scale)))

    inner = _contain_size(image.size, bounds)
    artwork = image.resize(inner, _RESAMPLE)

    canvas = Image.new("RGBA", size, (*background, 255))
    canvas.alpha_composite(artwork, dest=_centered_offset(size, inner))
    return canvas


_FITTERS: dict[AssetCategory, Fitter] = {
    AssetCategory.ICON: fit_contain,
    AssetCategory.SPLASH: fit_splash,
}


def render_asset(image: Image.Image, spec: AssetSpec, background: RGB) -> Image.Image:
    """Fit the source into the spec's box using its category's strategy.

    Args:
        image: Decoded RGBA source.
        spec: Target asset spec.
        background: Background RGB color.

    Returns:
        RGBA image of exactly ``spec.size``.

    Raises:
        EncodeError: If the fitted image does not match the spec's dimensions.
    """
    fitter = _FITTERS.get(spec.category, fit_cover)
    rendered = fitter(image, spec.size, background)

    if rendered.size != spec.size:
        raise EncodeError(
            f"Dimension mismatch: expected {spec.width}x{spec.height}, "
            f"got {rendered.width}x{rendered.height}"
        )
    return rendered


def encode_image(
    image: Image.Image,
    fmt: OutputFormat,
    background: RGB = (255, 255, 255),
    *,
    jpeg_quality: int = DEFAULT_JPEG_QUALITY,
) -> bytes:
    """Serialize an image as PNG or JPEG.

    JPEG has no alpha channel, so transparent pixels are flattened onto the
    background color first.

    Args:
        image: Image to encode.
        fmt: Output format.
        background: Color under transparent pixels for JPEG output.
        jpeg_quality: JPEG quality (1-100).

    Returns:
        Encoded bytes.

    Raises:
        EncodeError: If the encoder fails.
    """
    buf = BytesIO()
    try:
        if fmt == OutputFormat.JPEG:
            flat = Image.new("RGB", image.size, background)
            mask = image.getchannel("A") if "A" in image.getbands() else None
            flat.paste(image.convert("RGB"), mask=mask)
            flat.save(buf, "JPEG", quality=jpeg_quality)
        else:
            image.save(buf, "PNG")
    except (OSError, ValueError, KeyError) as e:
        raise EncodeError(f"Failed to encode {fmt.value}: {e}") from e

    return buf.getvalue()


def transform_decoded(
    image: Image.Image,
    spec: AssetSpec,
    background: RGB,
    jpeg_quality: int = DEFAULT_JPEG_QUALITY,
) -> ConvertedAsset:
    """Render and encode one asset from an already decoded source.

    Args:
        image: Decoded RGBA source (shared, read-only).
        spec: Target asset spec.
        background: Background RGB color.
        jpeg_quality: JPEG quality for JPEG specs.

    Returns:
        ConvertedAsset with the encoded bytes.

    Raises:
        EncodeError: If rendering or encoding fails.
    """
    rendered = render_asset(image, spec, background)
    data = encode_image(rendered, spec.format, background, jpeg_quality=jpeg_quality)

    return ConvertedAsset(
        name=spec.name,
        filename=spec.filename,
        folder=spec.folder,
        data=data,
        format=spec.format,
        width=spec.width,
        height=spec.height,
    )


def transform(
    source_bytes: bytes,
    mime_type: str,
    spec: AssetSpec,
    background_color: str | RGB,
) -> ConvertedAsset:
    """Decode a source image and produce one asset from it.

    Args:
        source_bytes: Encoded source image.
        mime_type: Declared MIME type of the source.
        spec: Target asset spec.
        background_color: ``#RRGGBB`` string or RGB tuple.

    Returns:
        ConvertedAsset for the spec.

    Raises:
        DecodeError: If the source cannot be decoded.
        EncodeError: If the output cannot be produced.
        InvalidColor: If the background color is malformed.
    """
    background = parse_color(background_color)
    logger.debug("Transforming %s source into %s", mime_type, spec.name)
    image = decode_image(source_bytes)
    return transform_decoded(image, spec, background)
