"""Command-line interface for assetsmith."""

from __future__ import annotations

import argparse
import logging
import mimetypes
from pathlib import Path
import sys

from rich.console import Console
from rich.table import Table

from assetsmith.core.catalog import (
    AssetCategory,
    filter_by_category,
    get_category_metadata,
    list_all,
    parse_category,
)
from assetsmith.core.config import AppConfig, load_app_config
from assetsmith.core.conversion.models import ConversionResult
from assetsmith.core.conversion.orchestrator import convert
from assetsmith.core.errors import AssetsmithError, UnknownCategory
from assetsmith.core.utils.logging import configure_logging

console = Console()
logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def _parse_category_arg(value: str | None) -> str | list[str] | None:
    """Turn the --categories argument into a selection.

    A JSON list passes through unchanged for the orchestrator's selection
    policy. A comma-separated list is parsed strictly.

    Raises:
        UnknownCategory: If a comma-separated name is not a category.
    """
    if value is None:
        return None
    if value.lstrip().startswith("["):
        return value
    names = [part for part in (p.strip() for p in value.split(",")) if part]
    return [parse_category(name).value for name in names]


def _guess_mime_type(path: Path) -> str:
    mime_type, _ = mimetypes.guess_type(path.name)
    return mime_type or "application/octet-stream"


def _print_outcomes(result: ConversionResult) -> None:
    table = Table(title="Conversion Results")
    table.add_column("Asset")
    table.add_column("Status")
    table.add_column("Error", overflow="fold")

    for outcome in result.outcomes:
        status = "[green]ok[/green]" if outcome.success else "[red]failed[/red]"
        table.add_row(outcome.name, status, outcome.error or "")

    console.print(table)
    console.print(
        f"{result.total_succeeded} succeeded, {result.total_failed} failed "
        f"({len(result.outcomes)} assets)"
    )


def run_convert(args: argparse.Namespace, config: AppConfig) -> int:
    """Convert an image into the asset archive.

    Returns:
        Exit code (0 all succeeded, 1 failures, 2 usage error)
    """
    image_path = Path(args.image).resolve()
    if not image_path.is_file():
        console.print(f"[red]ERROR: Image not found: {image_path}[/red]")
        return EXIT_USAGE

    try:
        categories = _parse_category_arg(args.categories)
    except UnknownCategory as e:
        console.print(f"[red]ERROR: {e.message}[/red]")
        return EXIT_USAGE

    data = image_path.read_bytes()
    mime_type = _guess_mime_type(image_path)
    out_path = Path(args.out or config.conversion.archive_name).resolve()

    try:
        result = convert(
            data,
            mime_type,
            len(data),
            categories,
            args.background,
            config=config.conversion,
        )
    except AssetsmithError as e:
        logger.debug("Conversion rejected: %s", e.to_dict())
        console.print(f"[red]ERROR ({e.kind}): {e.message}[/red]")
        return EXIT_FAILED

    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_bytes(result.archive)
    console.print(f"[green]Archive written:[/green] {out_path}")

    if args.report:
        report_path = Path(args.report).resolve()
        report_path.parent.mkdir(parents=True, exist_ok=True)
        report_path.write_text(result.report, encoding="utf-8")
        console.print(f"[green]Report written:[/green] {report_path}")

    _print_outcomes(result)
    return EXIT_OK if result.all_succeeded else EXIT_FAILED


def run_list(args: argparse.Namespace) -> int:
    """Print the asset catalog, optionally one category."""
    try:
        specs = filter_by_category(args.category) if args.category else list(list_all())
    except UnknownCategory as e:
        console.print(f"[red]ERROR: {e.message}[/red]")
        return EXIT_USAGE

    table = Table(title="Google Play Assets")
    table.add_column("Name")
    table.add_column("Size", justify="right")
    table.add_column("Category")
    table.add_column("Folder")
    table.add_column("Description")

    for spec in specs:
        label = get_category_metadata(spec.category).label
        table.add_row(
            spec.name,
            f"{spec.width}x{spec.height}",
            label,
            spec.folder,
            spec.description,
        )

    console.print(table)
    return EXIT_OK


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="assetsmith",
        description="assetsmith - generate Google Play store assets from one image",
    )
    p.add_argument("--config", default=None, help="Path to app config (JSON or YAML)")
    p.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )
    p.add_argument(
        "--structured-logs", action="store_true", help="Emit logs as JSON lines"
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    conv = sub.add_parser("convert", help="Convert an image into the asset archive")
    conv.add_argument("image", help="Path to source image (png/jpeg/webp/gif)")
    conv.add_argument("--out", default=None, help="Archive path (default: google-play-assets.zip)")
    conv.add_argument(
        "--categories",
        default=None,
        help=(
            "Categories to generate, comma-separated or a JSON list "
            f"({', '.join(c.value for c in AssetCategory)}; default: all)"
        ),
    )
    conv.add_argument(
        "--background", default=None, help="Background color as #RRGGBB (default: #ffffff)"
    )
    conv.add_argument("--report", default=None, help="Write the JSON outcome report here")

    lst = sub.add_parser("list", help="List the asset catalog")
    lst.add_argument("--category", default=None, help="Only list this category")

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    p = build_arg_parser()
    args = p.parse_args(argv)

    config = load_app_config(args.config)
    configure_logging(
        level=args.log_level or config.logging.level,
        format_string=config.logging.format,
        filename=config.logging.filename,
        structured=args.structured_logs or config.logging.structured,
    )

    if args.cmd == "convert":
        return run_convert(args, config)
    if args.cmd == "list":
        return run_list(args)
    return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())
