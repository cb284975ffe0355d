"""Image decoding, category-specific fitting, and encoding."""

from assetsmith.core.imaging.colors import DEFAULT_BACKGROUND, parse_color
from assetsmith.core.imaging.models import ConvertedAsset
from assetsmith.core.imaging.transformer import (
    DEFAULT_JPEG_QUALITY,
    SPLASH_ARTWORK_RATIO,
    decode_image,
    encode_image,
    fit_contain,
    fit_cover,
    fit_splash,
    render_asset,
    transform,
    transform_decoded,
)

__all__ = [
    "ConvertedAsset",
    "DEFAULT_BACKGROUND",
    "DEFAULT_JPEG_QUALITY",
    "SPLASH_ARTWORK_RATIO",
    "decode_image",
    "encode_image",
    "fit_contain",
    "fit_cover",
    "fit_splash",
    "parse_color",
    "render_asset",
    "transform",
    "transform_decoded",
]
