#!/usr/bin/env python3
"""
Plain-text Netpbm pixmap (P3) writer
Emits one .ppm file per sprite from indexed pixels and a color table
"""
from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import numpy as np

from .constants import (
    MAX_OUTPUT_NAME_LENGTH,
    OUTPUT_EXTENSION,
    PALETTE_ENTRIES,
    PIXELS_PER_LINE,
    PPM_MAGIC,
    RGB888_MAX_VALUE,
    SPRITE_INDEX_DIGITS,
    TRIPLET_SEPARATOR,
)
from .exceptions import OutputOpenError, OutputPathError, OutputWriteError
from .logging_config import get_logger
from .palette import ColorTable

logger = get_logger(__name__)


def output_name(base_name: str, sprite_index: int,
                extension: str = OUTPUT_EXTENSION,
                max_length: int = MAX_OUTPUT_NAME_LENGTH) -> str:
    """
    Build the pixmap file name for a sprite.

    Args:
        base_name: Archive file name the sprite came from
        sprite_index: Directory index of the sprite (0-255)
        extension: File extension without the dot
        max_length: Longest name accepted

    Returns:
        Name of the form ``<base>_<NNN>.<ext>``

    Raises:
        OutputPathError: If the name is longer than max_length
    """
    name = f"{base_name}_{sprite_index:0{SPRITE_INDEX_DIGITS}d}.{extension}"
    if len(name) > max_length:
        raise OutputPathError(
            f"Output name '{name}' is {len(name)} characters (max {max_length})"
        )
    return name


def _resolve_pixels(color_table: ColorTable, pixels: bytes | Sequence[int],
                    width: int, height: int) -> np.ndarray:
    """Map indexed pixels to an (N, 3) RGB array."""
    pixel_count = width * height
    if len(pixels) != pixel_count:
        raise OutputWriteError(
            f"Pixel buffer holds {len(pixels)} bytes, expected {pixel_count} "
            f"for a {width}x{height} sprite"
        )

    if isinstance(pixels, (bytes, bytearray, memoryview)):
        indices = np.frombuffer(bytes(pixels), dtype=np.uint8)
    else:
        indices = np.asarray(pixels, dtype=np.int64)
        if indices.size and (indices.min() < 0 or indices.max() >= PALETTE_ENTRIES):
            bad = int(indices[(indices < 0) | (indices >= PALETTE_ENTRIES)][0])
            raise OutputWriteError(
                f"Palette index {bad} out of range 0-{PALETTE_ENTRIES - 1}"
            )

    return color_table.as_array()[indices]


def format_ppm(color_table: ColorTable, pixels: bytes | Sequence[int],
               width: int, height: int) -> str:
    """
    Render a sprite as P3 pixmap text.

    Channels are three-digit zero-padded decimals and lines wrap after
    every fourth pixel.
    """
    rgb = _resolve_pixels(color_table, pixels, width, height)
    triplets = [f"{r:03d} {g:03d} {b:03d}" for r, g, b in rgb.tolist()]

    lines = [PPM_MAGIC, f"{width} {height}", str(RGB888_MAX_VALUE)]
    for start in range(0, len(triplets), PIXELS_PER_LINE):
        lines.append(TRIPLET_SEPARATOR.join(triplets[start:start + PIXELS_PER_LINE]))
    return "\n".join(lines) + "\n"


def write_ppm(output_dir: str | Path, base_name: str, sprite_index: int,
              color_table: ColorTable, pixels: bytes | Sequence[int],
              width: int, height: int,
              max_name_length: int = MAX_OUTPUT_NAME_LENGTH) -> Path:
    """
    Write one sprite to ``<output_dir>/<base>_<NNN>.ppm``.

    Args:
        output_dir: Directory to write into
        base_name: Archive file name used as the output prefix
        sprite_index: Directory index of the sprite
        color_table: Palette shared by every sprite of the archive
        pixels: Indexed pixels, row-major, width * height long
        width: Sprite width in pixels
        height: Sprite height in pixels
        max_name_length: Longest output name accepted

    Returns:
        Path of the written pixmap

    Raises:
        OutputPathError: If the output name is too long
        OutputOpenError: If the file cannot be created
        OutputWriteError: If the pixels are invalid or writing fails
    """
    name = output_name(base_name, sprite_index, max_length=max_name_length)
    output_path = Path(output_dir) / name

    # Format before opening so bad pixel data leaves no partial file behind
    text = format_ppm(color_table, pixels, width, height)

    try:
        f = output_path.open("w", encoding="ascii", newline="\n")
    except OSError as e:
        logger.error(f"Unable to open '{output_path}' for writing: {e}")
        raise OutputOpenError(f"Unable to open '{output_path}' for writing: {e}") from e

    with f:
        try:
            f.write(text)
        except OSError as e:
            logger.error(f"Failed writing '{output_path}': {e}")
            raise OutputWriteError(f"Failed writing '{output_path}': {e}") from e

    logger.debug(f"Wrote {width}x{height} pixmap {output_path}")
    return output_path
