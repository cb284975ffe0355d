"""Store asset catalog: the required outputs and their categories."""

from assetsmith.core.catalog.models import (
    AssetCategory,
    AssetSpec,
    CategoryMetadata,
    OutputFormat,
)
from assetsmith.core.catalog.specs import (
    ALL_CATEGORIES,
    ASSET_CATEGORIES,
    GOOGLE_PLAY_ASSETS,
    filter_by_category,
    get_category_metadata,
    get_spec,
    list_all,
    list_categories,
    parse_category,
    resolve_categories,
    specs_for_categories,
)

__all__ = [
    # Models
    "AssetCategory",
    "AssetSpec",
    "CategoryMetadata",
    "OutputFormat",
    # Catalog data
    "ALL_CATEGORIES",
    "ASSET_CATEGORIES",
    "GOOGLE_PLAY_ASSETS",
    # Lookup
    "filter_by_category",
    "get_category_metadata",
    "get_spec",
    "list_all",
    "list_categories",
    "parse_category",
    "resolve_categories",
    "specs_for_categories",
]
