"""Custom exceptions for the SPR sprite extractor"""
from __future__ import annotations


class SprExtractorError(Exception):
    """Base exception for all extractor errors."""


class PaletteError(SprExtractorError):
    """Raised for palette file errors."""


class PaletteOpenError(PaletteError):
    """Raised when the palette file cannot be opened."""


class PaletteSeekError(PaletteError):
    """Raised when the palette data offset cannot be reached."""


class PaletteReadError(PaletteError):
    """Raised when the palette table is shorter than 768 bytes."""


class ArchiveError(SprExtractorError):
    """Raised for sprite archive errors."""


class ArchiveOpenError(ArchiveError):
    """Raised when the archive cannot be opened."""


class ArchiveHeaderError(ArchiveError):
    """Raised when the sprite count byte is missing."""


class ArchiveDirectoryError(ArchiveError):
    """Raised when the width/height directory is truncated."""


class SpritePayloadError(ArchiveError):
    """Raised when a sprite's pixel data is shorter than its directory entry."""

    def __init__(self, index: int, expected: int, actual: int, source: str = "",
                 detail: str = "") -> None:
        self.index = index
        self.expected = expected
        self.actual = actual
        self.source = source
        where = f" from '{source}'" if source else ""
        reason = f": {detail}" if detail else ""
        super().__init__(
            f"Failed to read {expected} bytes of pixel data for sprite {index}{where} "
            f"(got {actual}){reason}"
        )


class OutputError(SprExtractorError):
    """Raised for pixmap output errors."""


class OutputPathError(OutputError):
    """Raised when an output name exceeds the name length limit."""


class OutputOpenError(OutputError):
    """Raised when an output file cannot be opened for writing."""


class OutputWriteError(OutputError):
    """Raised when pixel data cannot be written."""


class PlanarLayoutError(SprExtractorError, ValueError):
    """Raised when a buffer cannot be split into four equal planes."""


class UsageError(SprExtractorError):
    """Raised for invalid command-line arguments."""
