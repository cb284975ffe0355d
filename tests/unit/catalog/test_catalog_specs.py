"""Tests for the Google Play asset catalog."""

from __future__ import annotations

from pydantic import ValidationError
import pytest

from assetsmith.core.catalog import (
    ALL_CATEGORIES,
    ASSET_CATEGORIES,
    GOOGLE_PLAY_ASSETS,
    AssetCategory,
    AssetSpec,
    OutputFormat,
    filter_by_category,
    get_category_metadata,
    get_spec,
    list_all,
    list_categories,
    parse_category,
    resolve_categories,
    specs_for_categories,
)
from assetsmith.core.errors import AssetSpecNotFoundError, UnknownCategory


class TestCatalogContents:
    def test_has_eighteen_specs(self) -> None:
        assert len(list_all()) == 18

    def test_names_are_unique(self) -> None:
        names = [spec.name for spec in list_all()]
        assert len(names) == len(set(names))

    def test_archive_paths_are_unique(self) -> None:
        paths = [spec.archive_path for spec in list_all()]
        assert len(paths) == len(set(paths))

    def test_dimensions_positive(self) -> None:
        for spec in list_all():
            assert spec.width > 0
            assert spec.height > 0

    def test_list_all_is_declaration_order(self) -> None:
        assert list_all() is GOOGLE_PLAY_ASSETS
        assert list_all()[0].name == "app-icon-512"
        assert list_all()[-1].name == "adaptive-icon-foreground"

    def test_store_icon(self) -> None:
        spec = get_spec("app-icon-512")
        assert spec.size == (512, 512)
        assert spec.category == AssetCategory.ICON
        assert spec.format == OutputFormat.PNG
        assert spec.folder == "icons"

    @pytest.mark.parametrize(
        ("dpi", "size"),
        [
            ("xxxhdpi", 192),
            ("xxhdpi", 144),
            ("xhdpi", 96),
            ("hdpi", 72),
            ("mdpi", 48),
            ("ldpi", 36),
        ],
    )
    def test_launcher_icons(self, dpi: str, size: int) -> None:
        spec = get_spec(f"launcher-icon-{dpi}")
        assert spec.size == (size, size)
        assert spec.category == AssetCategory.ICON
        assert spec.folder == "icons/android"

    def test_adaptive_icon_foreground(self) -> None:
        spec = get_spec("adaptive-icon-foreground")
        assert spec.size == (432, 432)
        assert spec.folder == "icons/adaptive"

    def test_feature_graphic(self) -> None:
        spec = get_spec("feature-graphic")
        assert spec.size == (1024, 500)
        assert spec.category == AssetCategory.FEATURE
        assert spec.folder == "marketing"

    def test_tv_banner(self) -> None:
        spec = get_spec("tv-banner")
        assert spec.size == (1280, 720)
        assert spec.category == AssetCategory.TV

    def test_screenshots(self) -> None:
        sizes = {spec.name: (spec.size, spec.folder) for spec in filter_by_category("screenshot")}
        assert sizes == {
            "phone-screenshot-1080x1920": ((1080, 1920), "screenshots/phone"),
            "tablet-7-screenshot-1280x800": ((1280, 800), "screenshots/tablet-7"),
            "tablet-10-screenshot-2560x1600": ((2560, 1600), "screenshots/tablet-10"),
        }

    def test_splash_screens_descending_dpi(self) -> None:
        splashes = filter_by_category(AssetCategory.SPLASH)
        assert [s.name for s in splashes] == [
            "splash-xxxhdpi",
            "splash-xxhdpi",
            "splash-xhdpi",
            "splash-hdpi",
            "splash-mdpi",
        ]
        assert [s.size for s in splashes] == [
            (1242, 2688),
            (1080, 1920),
            (720, 1280),
            (480, 800),
            (320, 480),
        ]
        assert all(s.format == OutputFormat.PNG for s in splashes)
        assert all(s.folder == "splash" for s in splashes)

    def test_all_png(self) -> None:
        assert all(spec.format == OutputFormat.PNG for spec in list_all())

    def test_get_spec_unknown_raises(self) -> None:
        with pytest.raises(AssetSpecNotFoundError):
            get_spec("nope")


class TestCategoryMetadata:
    def test_bijection_with_enum(self) -> None:
        assert set(ASSET_CATEGORIES) == set(AssetCategory)
        assert {spec.category for spec in list_all()} == set(AssetCategory)

    def test_labels(self) -> None:
        assert get_category_metadata(AssetCategory.ICON).label == "App Icons"
        assert get_category_metadata("feature").label == "Feature Graphics"
        assert get_category_metadata("screenshot").label == "Screenshots"
        assert get_category_metadata("splash").label == "Splash Screens"
        assert get_category_metadata("tv").label == "TV Assets"

    def test_descriptions_non_empty(self) -> None:
        for category in list_categories():
            assert get_category_metadata(category).description

    def test_unknown_category_raises(self) -> None:
        with pytest.raises(UnknownCategory) as exc:
            get_category_metadata("wallpaper")
        assert exc.value.kind == "UnknownCategory"


class TestFilterByCategory:
    @pytest.mark.parametrize("category", list(AssetCategory))
    def test_only_matching_category(self, category: AssetCategory) -> None:
        specs = filter_by_category(category)
        assert specs
        assert all(spec.category == category for spec in specs)

    def test_order_preserved(self) -> None:
        icons = filter_by_category("icon")
        expected = [spec for spec in list_all() if spec.category == AssetCategory.ICON]
        assert icons == expected
        assert len(icons) == 8

    def test_unknown_string_raises(self) -> None:
        with pytest.raises(UnknownCategory):
            filter_by_category("bogus")


class TestParseCategory:
    def test_parses_case_insensitively(self) -> None:
        assert parse_category(" Splash ") == AssetCategory.SPLASH

    def test_passes_enum_through(self) -> None:
        assert parse_category(AssetCategory.TV) is AssetCategory.TV

    def test_non_string_raises(self) -> None:
        with pytest.raises(UnknownCategory):
            parse_category(3)  # type: ignore[arg-type]

    def test_unknown_category_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_category("banner")


class TestResolveCategories:
    def test_none_selects_all(self) -> None:
        assert resolve_categories(None) == ALL_CATEGORIES

    def test_unparseable_json_selects_all(self) -> None:
        assert resolve_categories("icon,splash") == ALL_CATEGORIES

    def test_non_list_json_selects_all(self) -> None:
        assert resolve_categories('{"icon": true}') == ALL_CATEGORIES

    def test_empty_list_selects_nothing(self) -> None:
        assert resolve_categories("[]") == ()
        assert resolve_categories([]) == ()

    def test_json_list(self) -> None:
        assert resolve_categories('["splash", "icon"]') == (
            AssetCategory.ICON,
            AssetCategory.SPLASH,
        )

    def test_unknown_entries_ignored(self) -> None:
        assert resolve_categories(["tv", "wallpaper", 7]) == (AssetCategory.TV,)  # type: ignore[list-item]

    def test_only_unknown_entries_selects_all(self) -> None:
        assert resolve_categories('["wallpaper"]') == ALL_CATEGORIES

    def test_duplicates_collapsed(self) -> None:
        assert resolve_categories(["tv", "tv"]) == (AssetCategory.TV,)


class TestSpecsForCategories:
    def test_catalog_order_restricted_to_selection(self) -> None:
        specs = specs_for_categories([AssetCategory.SPLASH, AssetCategory.TV])
        assert [s.name for s in specs] == [
            "tv-banner",
            "splash-xxxhdpi",
            "splash-xxhdpi",
            "splash-xhdpi",
            "splash-hdpi",
            "splash-mdpi",
        ]

    def test_custom_table(self) -> None:
        table = [
            AssetSpec(name="a", width=1, height=1, category=AssetCategory.TV, folder="x"),
            AssetSpec(name="b", width=1, height=1, category=AssetCategory.ICON, folder="x"),
        ]
        assert specs_for_categories([AssetCategory.ICON], table) == [table[1]]

    def test_empty_selection(self) -> None:
        assert specs_for_categories([]) == []


class TestAssetSpecModel:
    def test_frozen(self) -> None:
        spec = get_spec("tv-banner")
        with pytest.raises(ValidationError):
            spec.width = 10  # type: ignore[misc]

    def test_rejects_non_positive_dimensions(self) -> None:
        with pytest.raises(ValidationError):
            AssetSpec(name="x", width=0, height=10, category=AssetCategory.ICON, folder="icons")

    def test_rejects_unknown_category(self) -> None:
        with pytest.raises(ValidationError):
            AssetSpec(name="x", width=1, height=1, category="wallpaper", folder="icons")  # type: ignore[arg-type]

    def test_paths(self) -> None:
        spec = AssetSpec(
            name="promo",
            width=10,
            height=10,
            category=AssetCategory.FEATURE,
            format=OutputFormat.JPEG,
            folder="marketing/extra",
        )
        assert spec.filename == "promo.jpeg"
        assert spec.archive_path == "marketing/extra/promo.jpeg"
