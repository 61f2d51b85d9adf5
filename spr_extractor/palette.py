#!/usr/bin/env python3
"""
Palette utilities
Reads the 256-color RGB table stored in Imagexcel .IMG files
"""
from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

import numpy as np

from .constants import (
    BYTES_PER_COLOR,
    PALETTE_DATA_OFFSET,
    PALETTE_ENTRIES,
    PALETTE_SIZE_BYTES,
)
from .exceptions import PaletteOpenError, PaletteReadError, PaletteSeekError
from .logging_config import get_logger

logger = get_logger(__name__)

RGB = tuple[int, int, int]


class ColorTable:
    """Immutable table of exactly 256 RGB colors"""

    __slots__ = ("_array", "_colors")

    def __init__(self, data: bytes | bytearray) -> None:
        if len(data) != PALETTE_SIZE_BYTES:
            raise ValueError(
                f"Color table needs {PALETTE_SIZE_BYTES} bytes, got {len(data)}"
            )
        array = np.frombuffer(bytes(data), dtype=np.uint8).reshape(
            PALETTE_ENTRIES, BYTES_PER_COLOR
        )
        array.flags.writeable = False
        self._array = array
        self._colors: tuple[RGB, ...] = tuple(
            (int(r), int(g), int(b)) for r, g, b in array
        )

    @classmethod
    def from_colors(cls, colors: list[RGB] | tuple[RGB, ...]) -> ColorTable:
        """Build a table from 256 (r, g, b) tuples."""
        if len(colors) != PALETTE_ENTRIES:
            raise ValueError(f"Expected {PALETTE_ENTRIES} colors, got {len(colors)}")
        return cls(bytes(channel for color in colors for channel in color))

    def __len__(self) -> int:
        return PALETTE_ENTRIES

    def __getitem__(self, index: int) -> RGB:
        if not 0 <= index < PALETTE_ENTRIES:
            raise IndexError(f"Palette index {index} out of range 0-{PALETTE_ENTRIES - 1}")
        return self._colors[index]

    def __iter__(self) -> Iterator[RGB]:
        return iter(self._colors)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorTable):
            return NotImplemented
        return self._colors == other._colors

    def __hash__(self) -> int:
        return hash(self._colors)

    def __repr__(self) -> str:
        return f"ColorTable({self._colors[0]!r}, ..., {self._colors[-1]!r})"

    def to_bytes(self) -> bytes:
        """Packed R, G, B bytes in table order."""
        return self._array.tobytes()

    def as_array(self) -> np.ndarray:
        """Read-only (256, 3) uint8 view of the table."""
        return self._array


def read_palette(palette_file: str | Path) -> ColorTable:
    """
    Read the color table from a palette file.

    Args:
        palette_file: Path to the .IMG file holding the palette

    Returns:
        ColorTable with 256 entries

    Raises:
        PaletteOpenError: If the file cannot be opened
        PaletteSeekError: If the file ends before the palette offset
        PaletteReadError: If fewer than 768 bytes follow the offset
    """
    logger.debug(f"Reading palette from {palette_file}")

    try:
        f = Path(palette_file).open("rb")
    except OSError as e:
        logger.error(f"Failed to open '{palette_file}': {e}")
        raise PaletteOpenError(f"Failed to open '{palette_file}': {e}") from e

    with f:
        try:
            file_size = f.seek(0, os.SEEK_END)
            f.seek(PALETTE_DATA_OFFSET)
        except OSError as e:
            logger.error(f"Seek failed in '{palette_file}': {e}")
            raise PaletteSeekError(
                f"Unable to seek to offset 0x{PALETTE_DATA_OFFSET:02X} in '{palette_file}': {e}"
            ) from e

        if file_size < PALETTE_DATA_OFFSET:
            message = (
                f"Unable to seek to offset 0x{PALETTE_DATA_OFFSET:02X} in "
                f"'{palette_file}' (file is {file_size} bytes)"
            )
            logger.error(message)
            raise PaletteSeekError(message)

        try:
            palette_data = f.read(PALETTE_SIZE_BYTES)
        except OSError as e:
            logger.error(f"Read failed in '{palette_file}': {e}")
            raise PaletteReadError(
                f"Unable to read {PALETTE_SIZE_BYTES} bytes from offset "
                f"0x{PALETTE_DATA_OFFSET:02X} in '{palette_file}': {e}"
            ) from e

    if len(palette_data) != PALETTE_SIZE_BYTES:
        message = (
            f"Unable to read {PALETTE_SIZE_BYTES} bytes from offset "
            f"0x{PALETTE_DATA_OFFSET:02X} in '{palette_file}' (got {len(palette_data)})"
        )
        logger.error(message)
        raise PaletteReadError(message)

    logger.info(f"Loaded {PALETTE_ENTRIES}-color palette from {palette_file}")
    return ColorTable(palette_data)
