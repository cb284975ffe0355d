"""Batch conversion orchestrator.

Async-first implementation: validates the request, decodes the source once,
transforms every selected spec in worker threads, and packages the successful
outputs. A failure in one spec becomes a failed outcome for that spec only;
the batch always completes with one outcome per selected spec.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Sequence
import logging

from PIL import Image

from assetsmith.core.catalog.models import AssetCategory, AssetSpec
from assetsmith.core.catalog.specs import resolve_categories, specs_for_categories
from assetsmith.core.config.models import ConversionConfig
from assetsmith.core.conversion.models import (
    ConversionOutcome,
    ConversionRequest,
    ConversionResult,
    failure_outcome,
    success_outcome,
)
from assetsmith.core.errors import FileTooLarge, InvalidFileType
from assetsmith.core.imaging.colors import RGB, parse_color
from assetsmith.core.imaging.models import ConvertedAsset
from assetsmith.core.imaging.transformer import decode_image, transform_decoded
from assetsmith.core.packaging.archive import pack, serialize_outcomes
from assetsmith.core.utils.logging import log_performance

logger = logging.getLogger(__name__)

# (decoded source, spec, background, jpeg quality) -> converted asset
Transformer = Callable[[Image.Image, AssetSpec, RGB, int], ConvertedAsset]

CategorySelection = str | Sequence[AssetCategory | str] | None


def validate_source(mime_type: str, source_size: int, config: ConversionConfig) -> None:
    """Check request-level preconditions before any decoding.

    Args:
        mime_type: Declared MIME type.
        source_size: Declared size in bytes.
        config: Conversion limits.

    Raises:
        InvalidFileType: If the MIME type is not accepted.
        FileTooLarge: If the source exceeds the size limit.
    """
    if mime_type not in config.allowed_mime_types:
        raise InvalidFileType(
            f"Invalid file type {mime_type!r}. Please upload PNG, JPEG, WebP, or GIF."
        )

    if source_size > config.max_upload_bytes:
        limit_mb = config.max_upload_bytes / (1024 * 1024)
        raise FileTooLarge(f"File too large. Maximum size is {limit_mb:g}MB.")


async def _convert_one(
    image: Image.Image,
    spec: AssetSpec,
    background: RGB,
    *,
    jpeg_quality: int,
    transformer: Transformer,
    semaphore: asyncio.Semaphore,
) -> tuple[ConversionOutcome, ConvertedAsset | None]:
    """Transform one spec, capturing any failure as a failed outcome."""
    async with semaphore:
        try:
            # PIL is CPU-bound, run in a thread to keep the event loop free
            asset = await asyncio.to_thread(transformer, image, spec, background, jpeg_quality)
        except Exception as e:
            logger.error("Asset conversion failed for %s: %s", spec.name, e)
            return failure_outcome(spec.name, str(e)), None

    logger.debug("Converted %s (%d bytes)", spec.name, len(asset.data))
    return success_outcome(spec.name), asset


async def convert_async(
    source_bytes: bytes,
    mime_type: str,
    source_size: int,
    selected_categories: CategorySelection = None,
    background_color: str | None = None,
    *,
    config: ConversionConfig | None = None,
    specs: Sequence[AssetSpec] | None = None,
    transformer: Transformer | None = None,
) -> ConversionResult:
    """Convert one source image into every selected catalog asset.

    Args:
        source_bytes: Encoded source image.
        mime_type: Declared MIME type.
        source_size: Declared size in bytes.
        selected_categories: Raw category selection (see resolve_categories).
        background_color: ``#RRGGBB`` background. Defaults to the config's.
        config: Conversion limits and encoder settings.
        specs: Spec table to convert against. Defaults to the catalog.
        transformer: Per-spec transform. Defaults to transform_decoded.

    Returns:
        ConversionResult with the archive and one outcome per selected spec.

    Raises:
        InvalidFileType: If the MIME type is not accepted.
        FileTooLarge: If the source exceeds the size limit.
        InvalidColor: If the background color is malformed.
        DecodeError: If the source cannot be decoded.
        PackagingError: If the archive cannot be written.
    """
    config = config or ConversionConfig()
    transformer = transformer or transform_decoded

    validate_source(mime_type, source_size, config)
    background = parse_color(background_color or config.default_background)

    categories = resolve_categories(selected_categories)
    selected = specs_for_categories(categories, specs)

    image = await asyncio.to_thread(decode_image, source_bytes)
    logger.info(
        "Converting %dx%d %s source into %d assets",
        image.width,
        image.height,
        mime_type,
        len(selected),
    )

    semaphore = asyncio.Semaphore(config.max_concurrency)
    results = await asyncio.gather(
        *[
            _convert_one(
                image,
                spec,
                background,
                jpeg_quality=config.jpeg_quality,
                transformer=transformer,
                semaphore=semaphore,
            )
            for spec in selected
        ]
    )

    outcomes = [outcome for outcome, _ in results]
    assets = [asset for _, asset in results if asset is not None]

    archive = pack(assets, compression_level=config.compression_level)
    report = serialize_outcomes(outcomes)

    logger.info(
        "Conversion complete: %d succeeded, %d failed",
        len(assets),
        len(outcomes) - len(assets),
    )

    return ConversionResult(
        archive=archive,
        outcomes=outcomes,
        report=report,
        categories=categories,
        archive_name=config.archive_name,
    )


@log_performance
def convert(
    source_bytes: bytes,
    mime_type: str,
    source_size: int,
    selected_categories: CategorySelection = None,
    background_color: str | None = None,
    *,
    config: ConversionConfig | None = None,
    specs: Sequence[AssetSpec] | None = None,
    transformer: Transformer | None = None,
) -> ConversionResult:
    """Synchronous entry point for convert_async.

    Must not be called from inside a running event loop; await
    convert_async there instead.
    """
    return asyncio.run(
        convert_async(
            source_bytes,
            mime_type,
            source_size,
            selected_categories,
            background_color,
            config=config,
            specs=specs,
            transformer=transformer,
        )
    )


async def convert_request_async(
    request: ConversionRequest,
    config: ConversionConfig | None = None,
) -> ConversionResult:
    """Run a ConversionRequest."""
    return await convert_async(
        request.image.data,
        request.image.mime_type,
        request.image.size_bytes,
        request.categories,
        request.background_color,
        config=config,
    )


def convert_request(
    request: ConversionRequest,
    config: ConversionConfig | None = None,
) -> ConversionResult:
    """Run a ConversionRequest synchronously."""
    return asyncio.run(convert_request_async(request, config))
