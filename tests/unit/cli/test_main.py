"""Unit tests for the assetsmith CLI."""

from __future__ import annotations

from io import StringIO
import json
import logging
from pathlib import Path

import pytest
from rich.console import Console

import assetsmith.cli.main as cli_main
from assetsmith.cli.main import (
    EXIT_FAILED,
    EXIT_OK,
    EXIT_USAGE,
    _guess_mime_type,
    _parse_category_arg,
    build_arg_parser,
    main,
)
from assetsmith.core.errors import UnknownCategory
from assetsmith.core.packaging import read_archive


@pytest.fixture(autouse=True)
def _isolate(tmp_path, monkeypatch):
    """Run in a scratch directory and restore root logging afterwards."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ASSETSMITH_LOG_LEVEL", raising=False)
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def output(monkeypatch) -> StringIO:
    """Capture rich console output at a width wide enough for every table."""
    buf = StringIO()
    monkeypatch.setattr(cli_main, "console", Console(file=buf, width=200))
    return buf


@pytest.fixture
def source_image(tmp_path: Path, square_png: bytes) -> Path:
    path = tmp_path / "logo.png"
    path.write_bytes(square_png)
    return path


class TestParseCategoryArg:
    def test_none(self) -> None:
        assert _parse_category_arg(None) is None

    def test_comma_separated(self) -> None:
        assert _parse_category_arg("Icon, tv,") == ["icon", "tv"]

    def test_json_passes_through(self) -> None:
        assert _parse_category_arg('["icon", "bogus"]') == '["icon", "bogus"]'

    def test_unknown_name_raises(self) -> None:
        with pytest.raises(UnknownCategory):
            _parse_category_arg("icon,wallpaper")


def test_guess_mime_type() -> None:
    assert _guess_mime_type(Path("a.png")) == "image/png"
    assert _guess_mime_type(Path("a.jpg")) == "image/jpeg"
    assert _guess_mime_type(Path("a")) == "application/octet-stream"


class TestArgParser:
    def test_convert_defaults(self) -> None:
        args = build_arg_parser().parse_args(["convert", "logo.png"])
        assert args.cmd == "convert"
        assert args.image == "logo.png"
        assert args.out is None
        assert args.categories is None
        assert args.background is None
        assert args.structured_logs is False

    def test_global_options(self) -> None:
        args = build_arg_parser().parse_args(
            ["--log-level", "DEBUG", "--structured-logs", "list", "--category", "icon"]
        )
        assert args.log_level == "DEBUG"
        assert args.structured_logs is True
        assert args.category == "icon"

    def test_command_required(self) -> None:
        with pytest.raises(SystemExit):
            build_arg_parser().parse_args([])


class TestListCommand:
    def test_lists_catalog(self, output: StringIO) -> None:
        assert main(["list"]) == EXIT_OK
        text = output.getvalue()
        assert "app-icon-512" in text
        assert "adaptive-icon-foreground" in text
        assert "1024x500" in text

    def test_single_category(self, output: StringIO) -> None:
        assert main(["list", "--category", "tv"]) == EXIT_OK
        text = output.getvalue()
        assert "tv-banner" in text
        assert "app-icon-512" not in text

    def test_unknown_category(self, output: StringIO) -> None:
        assert main(["list", "--category", "wallpaper"]) == EXIT_USAGE
        assert "Unknown asset category" in output.getvalue()


class TestConvertCommand:
    def test_writes_archive_and_report(
        self, tmp_path: Path, source_image: Path, output: StringIO
    ) -> None:
        out = tmp_path / "dist" / "assets.zip"
        report = tmp_path / "dist" / "report.json"

        code = main(
            [
                "convert",
                str(source_image),
                "--out",
                str(out),
                "--categories",
                "tv,feature",
                "--background",
                "#000000",
                "--report",
                str(report),
            ]
        )

        assert code == EXIT_OK
        assert list(read_archive(out.read_bytes())) == [
            "marketing/feature-graphic.png",
            "tv/tv-banner.png",
        ]
        assert json.loads(report.read_text()) == [
            {"name": "feature-graphic", "success": True},
            {"name": "tv-banner", "success": True},
        ]
        assert "2 succeeded, 0 failed" in output.getvalue()

    def test_default_archive_name(self, tmp_path: Path, source_image: Path, output: StringIO) -> None:
        assert main(["convert", str(source_image), "--categories", '["tv"]']) == EXIT_OK
        assert (tmp_path / "google-play-assets.zip").is_file()

    def test_missing_image(self, output: StringIO) -> None:
        assert main(["convert", "nope.png"]) == EXIT_USAGE
        assert "Image not found" in output.getvalue()

    def test_unknown_category(self, source_image: Path, output: StringIO) -> None:
        assert main(["convert", str(source_image), "--categories", "wallpaper"]) == EXIT_USAGE

    def test_rejected_file_type(self, tmp_path: Path, output: StringIO) -> None:
        path = tmp_path / "notes.txt"
        path.write_text("hello")
        assert main(["convert", str(path)]) == EXIT_FAILED
        assert "InvalidFileType" in output.getvalue()
        assert not (tmp_path / "google-play-assets.zip").exists()

    def test_corrupt_image_reports_decode_error(
        self, tmp_path: Path, broken_png: bytes, output: StringIO
    ) -> None:
        path = tmp_path / "broken.png"
        path.write_bytes(broken_png)
        assert main(["convert", str(path), "--categories", "tv"]) == EXIT_FAILED
        assert "DecodeError" in output.getvalue()

    def test_invalid_background(self, source_image: Path, output: StringIO) -> None:
        code = main(["convert", str(source_image), "--categories", "tv", "--background", "red"])
        assert code == EXIT_FAILED
        assert "InvalidColor" in output.getvalue()

    def test_config_file_applies(self, tmp_path: Path, source_image: Path, output: StringIO) -> None:
        (tmp_path / "assetsmith.yaml").write_text(
            "conversion:\n  archive_name: store.zip\n"
        )
        assert main(["convert", str(source_image), "--categories", "tv"]) == EXIT_OK
        assert (tmp_path / "store.zip").is_file()
