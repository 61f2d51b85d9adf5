#!/usr/bin/env python3
"""
Imagexcel .SPR sprite archive decoder

Archive layout:
- uint8 sprite_count
- sprite_count * (uint8 width, uint8 height) directory entries
- raw 8-bit indexed pixels for each non-empty sprite, in directory order,
  tightly packed (entries with a zero dimension have no payload)
"""
from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO

from .config import ExtractorConfig
from .constants import DIRECTORY_ENTRY_SIZE, SPRITE_COUNT_SIZE
from .exceptions import (
    ArchiveDirectoryError,
    ArchiveHeaderError,
    ArchiveOpenError,
    OutputError,
    PlanarLayoutError,
    SprExtractorError,
    SpritePayloadError,
)
from .logging_config import get_logger
from .palette import ColorTable
from .planar import linearize_planar_data
from .ppm_writer import write_ppm

logger = get_logger(__name__)


@dataclass(frozen=True)
class SpriteEntry:
    """One width/height pair from the archive directory"""

    index: int
    width: int
    height: int

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    @property
    def pixel_count(self) -> int:
        return self.width * self.height


@dataclass
class ArchiveReport:
    """Outcome of decoding one archive"""

    archive_path: Path
    entries: list[SpriteEntry] = field(default_factory=list)
    written: list[Path] = field(default_factory=list)
    errors: list[SprExtractorError] = field(default_factory=list)

    @property
    def sprite_count(self) -> int:
        return len(self.entries)

    @property
    def ok(self) -> bool:
        return not self.errors


def _open_archive(archive_path: Path) -> BinaryIO:
    try:
        return archive_path.open("rb")
    except OSError as e:
        logger.error(f"Failed to open '{archive_path}': {e}")
        raise ArchiveOpenError(f"Failed to open '{archive_path}': {e}") from e


def read_directory(stream: BinaryIO, source: str = "") -> list[SpriteEntry]:
    """
    Read the sprite count and width/height directory.

    Args:
        stream: Binary stream positioned at the start of the archive
        source: Archive name used in error messages

    Returns:
        One SpriteEntry per directory slot, empty slots included

    Raises:
        ArchiveHeaderError: If the count byte is missing
        ArchiveDirectoryError: If the directory is truncated
    """
    try:
        count_byte = stream.read(SPRITE_COUNT_SIZE)
    except OSError as e:
        logger.error(f"Read failed in header of '{source}': {e}")
        raise ArchiveHeaderError(
            f"Failed to read sprite count field in header of '{source}': {e}"
        ) from e
    if len(count_byte) != SPRITE_COUNT_SIZE:
        message = f"Failed to read sprite count field in header of '{source}'"
        logger.error(message)
        raise ArchiveHeaderError(message)

    num_sprites = count_byte[0]
    logger.info(f"Number of sprites in file: {num_sprites}")

    header_size = num_sprites * DIRECTORY_ENTRY_SIZE
    try:
        header = stream.read(header_size)
    except OSError as e:
        logger.error(f"Read failed in directory of '{source}': {e}")
        raise ArchiveDirectoryError(
            f"Failed to read {header_size} bytes of header data from '{source}': {e}"
        ) from e
    if len(header) != header_size:
        message = (
            f"Failed to read {header_size} bytes of header data from '{source}' "
            f"(got {len(header)})"
        )
        logger.error(message)
        raise ArchiveDirectoryError(message)

    return [
        SpriteEntry(index=i, width=header[i * 2], height=header[i * 2 + 1])
        for i in range(num_sprites)
    ]


def iter_sprite_payloads(stream: BinaryIO, entries: list[SpriteEntry],
                         source: str = "") -> Iterator[tuple[SpriteEntry, bytes]]:
    """
    Yield (entry, pixels) for every non-empty sprite, in directory order.

    Empty entries consume no bytes. A short read leaves the stream out of step
    with the directory, so it raises instead of yielding.

    Raises:
        SpritePayloadError: If a sprite's pixel data is truncated or unreadable
    """
    for entry in entries:
        if entry.is_empty:
            logger.debug(f"Skipping empty sprite {entry.index} ({entry.width}x{entry.height})")
            continue

        try:
            pixels = stream.read(entry.pixel_count)
        except OSError as e:
            raise SpritePayloadError(
                entry.index, entry.pixel_count, 0, source, detail=str(e)
            ) from e
        if len(pixels) != entry.pixel_count:
            raise SpritePayloadError(entry.index, entry.pixel_count, len(pixels), source)
        yield entry, pixels


def list_archive(archive_path: str | Path) -> list[SpriteEntry]:
    """Read only the directory of an archive."""
    path = Path(archive_path)
    with _open_archive(path) as f:
        return read_directory(f, str(path))


def decode_archive(archive_path: str | Path, color_table: ColorTable,
                   config: ExtractorConfig | None = None) -> ArchiveReport:
    """
    Convert every sprite of an archive to a P3 pixmap.

    Output failures for one sprite are recorded and the next sprite is still
    attempted. A truncated payload is recorded and ends the archive.

    Args:
        archive_path: Path to the .SPR file
        color_table: Palette shared by all sprites
        config: Output directory, planar mode and name limit

    Returns:
        ArchiveReport listing written files and recorded errors

    Raises:
        ArchiveOpenError: If the archive cannot be opened
        ArchiveHeaderError: If the count byte is missing
        ArchiveDirectoryError: If the directory is truncated
    """
    if config is None:
        config = ExtractorConfig()

    path = Path(archive_path)
    source = str(path)
    output_dir = config.output_dir_for(path)
    report = ArchiveReport(archive_path=path)

    logger.info(f"Decoding sprites from {path} into {output_dir}")

    with _open_archive(path) as f:
        report.entries = read_directory(f, source)

        try:
            for entry, pixels in iter_sprite_payloads(f, report.entries, source):
                try:
                    if config.planar:
                        pixels = linearize_planar_data(pixels, entry.pixel_count)
                    written = write_ppm(
                        output_dir,
                        path.name,
                        entry.index,
                        color_table,
                        pixels,
                        entry.width,
                        entry.height,
                        max_name_length=config.max_name_length,
                    )
                except (OutputError, PlanarLayoutError) as e:
                    logger.error(f"Sprite {entry.index}: {e}")
                    report.errors.append(e)
                    continue

                report.written.append(written)
                logger.info(f"Wrote sprite {entry.index} ({entry.width}x{entry.height}) to {written}")
        except SpritePayloadError as e:
            logger.error(f"{e}; stopping, remaining sprites are out of alignment")
            report.errors.append(e)

    if report.ok:
        logger.info(f"Extracted {len(report.written)} sprites from {path}")
    else:
        logger.warning(
            f"Extracted {len(report.written)} sprites from {path} with {len(report.errors)} error(s)"
        )
    return report
