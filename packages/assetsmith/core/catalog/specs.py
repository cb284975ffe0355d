"""Google Play asset catalog.

Process-wide read-only table of required store assets plus category metadata.
Lookup, filtering, and category parsing for values arriving as untyped strings.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
import json
import logging

from assetsmith.core.catalog.models import (
    AssetCategory,
    AssetSpec,
    CategoryMetadata,
    OutputFormat,
)
from assetsmith.core.errors import AssetSpecNotFoundError, UnknownCategory

logger = logging.getLogger(__name__)


def _spec(
    name: str,
    width: int,
    height: int,
    category: AssetCategory,
    folder: str,
    description: str,
) -> AssetSpec:
    return AssetSpec(
        name=name,
        width=width,
        height=height,
        category=category,
        format=OutputFormat.PNG,
        folder=folder,
        description=description,
    )


GOOGLE_PLAY_ASSETS: tuple[AssetSpec, ...] = (
    # App icons
    _spec("app-icon-512", 512, 512, AssetCategory.ICON, "icons", "Play Store App Icon"),
    _spec(
        "launcher-icon-xxxhdpi",
        192,
        192,
        AssetCategory.ICON,
        "icons/android",
        "Launcher Icon (xxxhdpi)",
    ),
    _spec(
        "launcher-icon-xxhdpi",
        144,
        144,
        AssetCategory.ICON,
        "icons/android",
        "Launcher Icon (xxhdpi)",
    ),
    _spec(
        "launcher-icon-xhdpi", 96, 96, AssetCategory.ICON, "icons/android", "Launcher Icon (xhdpi)"
    ),
    _spec(
        "launcher-icon-hdpi", 72, 72, AssetCategory.ICON, "icons/android", "Launcher Icon (hdpi)"
    ),
    _spec(
        "launcher-icon-mdpi", 48, 48, AssetCategory.ICON, "icons/android", "Launcher Icon (mdpi)"
    ),
    _spec(
        "launcher-icon-ldpi", 36, 36, AssetCategory.ICON, "icons/android", "Launcher Icon (ldpi)"
    ),
    # Feature graphic
    _spec(
        "feature-graphic",
        1024,
        500,
        AssetCategory.FEATURE,
        "marketing",
        "Feature Graphic (Play Store banner)",
    ),
    # TV
    _spec("tv-banner", 1280, 720, AssetCategory.TV, "tv", "TV Banner"),
    # Phone screenshots (portrait 9:16)
    _spec(
        "phone-screenshot-1080x1920",
        1080,
        1920,
        AssetCategory.SCREENSHOT,
        "screenshots/phone",
        "Phone Screenshot (1080x1920)",
    ),
    # Tablet screenshots (landscape 16:10)
    _spec(
        "tablet-7-screenshot-1280x800",
        1280,
        800,
        AssetCategory.SCREENSHOT,
        "screenshots/tablet-7",
        "7-inch Tablet Screenshot",
    ),
    _spec(
        "tablet-10-screenshot-2560x1600",
        2560,
        1600,
        AssetCategory.SCREENSHOT,
        "screenshots/tablet-10",
        "10-inch Tablet Screenshot",
    ),
    # Splash screens (portrait, xxxhdpi -> mdpi)
    _spec("splash-xxxhdpi", 1242, 2688, AssetCategory.SPLASH, "splash", "Splash Screen (xxxhdpi)"),
    _spec("splash-xxhdpi", 1080, 1920, AssetCategory.SPLASH, "splash", "Splash Screen (xxhdpi)"),
    _spec("splash-xhdpi", 720, 1280, AssetCategory.SPLASH, "splash", "Splash Screen (xhdpi)"),
    _spec("splash-hdpi", 480, 800, AssetCategory.SPLASH, "splash", "Splash Screen (hdpi)"),
    _spec("splash-mdpi", 320, 480, AssetCategory.SPLASH, "splash", "Splash Screen (mdpi)"),
    # Adaptive icon foreground (Android 8+)
    _spec(
        "adaptive-icon-foreground",
        432,
        432,
        AssetCategory.ICON,
        "icons/adaptive",
        "Adaptive Icon Foreground Layer",
    ),
)

ASSET_CATEGORIES: dict[AssetCategory, CategoryMetadata] = {
    AssetCategory.ICON: CategoryMetadata(
        label="App Icons",
        description="App launcher icons for various Android DPI levels",
    ),
    AssetCategory.FEATURE: CategoryMetadata(
        label="Feature Graphics",
        description="Promotional banners displayed on Play Store",
    ),
    AssetCategory.SCREENSHOT: CategoryMetadata(
        label="Screenshots",
        description="App screenshots for different device types",
    ),
    AssetCategory.SPLASH: CategoryMetadata(
        label="Splash Screens",
        description="Loading splash screens for various screen sizes",
    ),
    AssetCategory.TV: CategoryMetadata(
        label="TV Assets",
        description="Assets for Android TV applications",
    ),
}

ALL_CATEGORIES: tuple[AssetCategory, ...] = tuple(AssetCategory)


def list_all() -> tuple[AssetSpec, ...]:
    """Return every spec in declaration order."""
    return GOOGLE_PLAY_ASSETS


def list_categories() -> tuple[AssetCategory, ...]:
    """Return every category in enumeration order."""
    return ALL_CATEGORIES


def parse_category(value: AssetCategory | str) -> AssetCategory:
    """Parse an untyped category value.

    Args:
        value: Category enum or raw string (case-insensitive, surrounding
            whitespace ignored).

    Returns:
        Matching AssetCategory.

    Raises:
        UnknownCategory: If the value is not a catalog category.
    """
    if isinstance(value, AssetCategory):
        return value
    if not isinstance(value, str):
        raise UnknownCategory(f"Unknown asset category: {value!r}")
    try:
        return AssetCategory(value.strip().lower())
    except ValueError as e:
        raise UnknownCategory(f"Unknown asset category: {value!r}") from e


def filter_by_category(category: AssetCategory | str) -> list[AssetSpec]:
    """Return the specs of one category, in catalog order.

    Raises:
        UnknownCategory: If ``category`` is a string outside the enumeration.
    """
    wanted = parse_category(category)
    return [spec for spec in GOOGLE_PLAY_ASSETS if spec.category == wanted]


def get_category_metadata(category: AssetCategory | str) -> CategoryMetadata:
    """Look up the label and description of a category.

    Raises:
        UnknownCategory: If the category is not in the enumeration.
    """
    parsed = parse_category(category)
    try:
        return ASSET_CATEGORIES[parsed]
    except KeyError as e:
        raise UnknownCategory(f"No metadata for category: {parsed.value}") from e


def get_spec(name: str) -> AssetSpec:
    """Look up a spec by name.

    Raises:
        AssetSpecNotFoundError: If no spec has this name.
    """
    for spec in GOOGLE_PLAY_ASSETS:
        if spec.name == name:
            return spec
    raise AssetSpecNotFoundError(name)


def resolve_categories(
    raw: str | Sequence[AssetCategory | str] | None,
) -> tuple[AssetCategory, ...]:
    """Resolve a caller's category selection.

    Policy:
    - ``None``, a string that is not valid JSON, or JSON that is not a list
      selects every category.
    - Entries that are not category names are ignored. If a non-empty list
      leaves nothing behind, every category is selected.
    - An explicitly empty list selects nothing.

    Args:
        raw: ``None``, a JSON-encoded list of names, or a sequence of names.

    Returns:
        Selected categories in enumeration order, without duplicates.
    """
    if raw is None:
        return ALL_CATEGORIES

    values: object = raw
    if isinstance(raw, str):
        try:
            values = json.loads(raw)
        except json.JSONDecodeError:
            logger.debug("Unparseable category selection %r, selecting all", raw)
            return ALL_CATEGORIES

    if not isinstance(values, (list, tuple)):
        logger.debug("Category selection is not a list (%r), selecting all", values)
        return ALL_CATEGORIES

    if len(values) == 0:
        return ()

    selected: set[AssetCategory] = set()
    for value in values:
        try:
            selected.add(parse_category(value))
        except UnknownCategory:
            logger.debug("Ignoring unknown category %r", value)

    if not selected:
        return ALL_CATEGORIES

    return tuple(c for c in ALL_CATEGORIES if c in selected)


def specs_for_categories(
    categories: Iterable[AssetCategory],
    specs: Sequence[AssetSpec] | None = None,
) -> list[AssetSpec]:
    """Restrict a spec table to the selected categories, order preserved.

    Args:
        categories: Selected categories.
        specs: Spec table to filter. Defaults to the Google Play catalog.

    Returns:
        Matching specs in table order.
    """
    table = GOOGLE_PLAY_ASSETS if specs is None else specs
    wanted = set(categories)
    return [spec for spec in table if spec.category in wanted]
