"""
Command line entry point for renkit.
Usage: python -m renkit dump-layers [AREA ...]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from . import __version__
from .errors import RenkitError
from .layers import AreaTable, ChunkLoader, LayerCompositor, LayerWriter
from .layers.models import Area
from .settings import AppSettings, ConfigError
from .utils.logging_config import setup_logging

logger = logging.getLogger(f"{__name__}.main")


def _add_common_options(parser: argparse.ArgumentParser, default=None) -> None:
    """Options accepted both before and after the subcommand.

    Subcommands pass `argparse.SUPPRESS` so an option given before the
    subcommand is not reset by the subparser's default.
    """
    parser.add_argument(
        "--profile",
        default="default" if default is None else default,
        help="settings profile",
    )
    parser.add_argument("--config", type=Path, default=default, help="INI settings file to use")
    parser.add_argument(
        "--areas-file",
        type=Path,
        default=default,
        help="area table JSON (default: builtin table)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="renkit", description="Extract map area layers and sprite animations."
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    _add_common_options(parser)
    sub = parser.add_subparsers(dest="command", required=True)

    dump = sub.add_parser("dump-layers", help="composite and store area layers")
    _add_common_options(dump, default=argparse.SUPPRESS)
    dump.add_argument("areas", nargs="*", help="area names (default: all areas)")
    dump.add_argument("--chunks-dir", type=Path, help="directory of chunk images")
    dump.add_argument("--output-dir", type=Path, help="directory for layer files")
    dump.add_argument(
        "--strict", action="store_true", default=None, help="check per-cell chunk alignment"
    )
    dump.add_argument(
        "--thumbnails", action="store_true", default=None, help="also store area thumbnails"
    )
    dump.add_argument(
        "--keep-going", action="store_true", help="skip areas that fail instead of stopping"
    )

    listing = sub.add_parser("list-areas", help="list known areas and their chunk grids")
    _add_common_options(listing, default=argparse.SUPPRESS)
    return parser


def dump_layers(
    areas: Sequence[Area],
    loader: ChunkLoader,
    writer: LayerWriter,
    strict: bool = False,
    thumbnails: bool = False,
    keep_going: bool = False,
) -> List[str]:
    """Load, render and dump each area in turn.

    Each area's chunk store is dropped before the next area is loaded.

    Returns:
        Names of areas that failed (only non-empty with keep_going)
    """
    failed: List[str] = []
    for area in areas:
        try:
            store = loader.load_area(area, include_thumbnail=thumbnails)
            compositor = LayerCompositor(store, strict=strict)
            writer.dump(compositor.render_area(area, include_thumbnail=thumbnails))
            store.clear()
        except (RenkitError, OSError) as e:
            if not keep_going:
                raise
            logger.error(f"Skipping {area.name!r}: {e}")
            failed.append(area.name)
    return failed


def _select_areas(table: AreaTable, names: Sequence[str]) -> List[Area]:
    if not names:
        return list(table)
    return [table.get(name) for name in names]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main application entry point."""
    args = build_parser().parse_args(argv)

    try:
        settings = AppSettings(profile=args.profile, settings_file=args.config)
    except ConfigError as e:
        print(f"renkit: {e}", file=sys.stderr)
        return 1
    setup_logging(settings)
    logger.debug(f"Configuration loaded from {settings.get_settings_file_path()}")

    try:
        table = AreaTable.from_settings(args.areas_file or settings.paths.areas_file)

        if args.command == "list-areas":
            for area in table:
                print(f"{area.name}\t{area.rows}x{area.cols}")
            return 0

        chunks_dir = args.chunks_dir or settings.paths.chunks_dir
        if not chunks_dir.is_dir():
            logger.error(f"Chunks directory does not exist: {chunks_dir}")
            return 1

        strict = settings.render.strict_grid if args.strict is None else args.strict
        thumbnails = (
            settings.render.dump_thumbnail if args.thumbnails is None else args.thumbnails
        )
        failed = dump_layers(
            _select_areas(table, args.areas),
            ChunkLoader(chunks_dir, max_workers=settings.render.loader_workers),
            LayerWriter(args.output_dir or settings.paths.output_dir),
            strict=strict,
            thumbnails=thumbnails,
            keep_going=args.keep_going,
        )
    except (RenkitError, OSError, KeyError, ValueError) as e:
        logger.error(f"{e}")
        return 1

    if failed:
        logger.error(f"{len(failed)} area(s) failed: {', '.join(failed)}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
