#!/usr/bin/env python3
"""
Quarantine SPR Sprite Extractor
Converts the sprites of an Imagexcel .SPR archive to P3 .ppm images

Usage:
    spr-extract [options] <palette_file> <spr_file>

Options:
    --output-dir <dir>      Where to write the .ppm files (default: archive's directory)
    --planar                Payloads are stored as four Mode X planes
    --list                  Print the sprite directory and exit
    --max-name-length <n>   Longest output file name accepted (default: 31)
    --log-level <level>     DEBUG, INFO, WARNING, ERROR
    --log-file <file>       Also write the log to a file
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from .archive import decode_archive, list_archive
from .config import ExtractorConfig
from .constants import EXIT_ARCHIVE_FAILURE, EXIT_OK, EXIT_PALETTE_FAILURE, EXIT_USAGE
from .exceptions import ArchiveError, PaletteError, UsageError
from .logging_config import setup_logging
from .palette import read_palette


class ExtractorArgumentParser(argparse.ArgumentParser):
    """Argument parser that raises UsageError instead of exiting with status 2"""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser() -> ExtractorArgumentParser:
    parser = ExtractorArgumentParser(
        prog="spr-extract",
        description="Extract sprites from Quarantine .SPR archives as P3 .ppm images",
    )
    parser.add_argument("palette_file", nargs="?", help="Palette source (.IMG file)")
    parser.add_argument("spr_file", nargs="?", help="Sprite archive (.SPR file)")
    parser.add_argument("-o", "--output-dir", type=Path, help="Output directory")
    parser.add_argument("--planar", action="store_true", default=None,
                        help="Linearize four-plane Mode X pixel data before writing")
    parser.add_argument("--list", action="store_true",
                        help="List the sprite directory and exit")
    parser.add_argument("--max-name-length", type=int,
                        help="Longest output file name accepted")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        type=str.upper, help="Logging level")
    parser.add_argument("--log-file", help="Write the log to this file too")
    return parser


def _usage_error(parser: argparse.ArgumentParser, message: str) -> int:
    parser.print_usage(sys.stderr)
    print(f"{parser.prog}: error: {message}", file=sys.stderr)
    return EXIT_USAGE


def _list_sprites(spr_file: str) -> int:
    try:
        entries = list_archive(spr_file)
    except ArchiveError:
        return EXIT_ARCHIVE_FAILURE

    for entry in entries:
        note = " (empty)" if entry.is_empty else ""
        print(f"{entry.index:3d} {entry.width:3d}x{entry.height:<3d} {entry.pixel_count:6d} bytes{note}")
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        return _usage_error(parser, str(e))

    if args.list and args.palette_file and not args.spr_file:
        # A lone positional with --list names the archive
        args.spr_file, args.palette_file = args.palette_file, None

    if not args.spr_file or (not args.palette_file and not args.list):
        parser.print_usage()
        return EXIT_OK

    try:
        config = ExtractorConfig.from_env().merged(
            output_dir=args.output_dir,
            planar=args.planar,
            max_name_length=args.max_name_length,
            log_level=args.log_level,
            log_file=args.log_file,
        )
    except ValueError as e:
        return _usage_error(parser, str(e))

    logger = setup_logging(config.log_level, config.log_file)

    if args.list:
        return _list_sprites(args.spr_file)

    logger.info(f"Reading palette from {args.palette_file} and sprites from {args.spr_file}...")

    try:
        color_table = read_palette(args.palette_file)
    except PaletteError:
        return EXIT_PALETTE_FAILURE

    try:
        report = decode_archive(args.spr_file, color_table, config)
    except ArchiveError:
        return EXIT_ARCHIVE_FAILURE

    return EXIT_OK if report.ok else EXIT_ARCHIVE_FAILURE


if __name__ == "__main__":
    sys.exit(main())
