"""
Quarantine SPR Sprite Extractor
Decodes Imagexcel .SPR sprite archives into P3 Netpbm pixmaps
"""

from .archive import ArchiveReport, SpriteEntry, decode_archive, list_archive
from .config import ExtractorConfig
from .palette import ColorTable, read_palette
from .planar import linearize_planar_data
from .ppm_writer import format_ppm, output_name, write_ppm

__version__ = "1.0.0"
__all__ = [
    "ArchiveReport",
    "ColorTable",
    "ExtractorConfig",
    "SpriteEntry",
    "decode_archive",
    "format_ppm",
    "linearize_planar_data",
    "list_archive",
    "output_name",
    "read_palette",
    "write_ppm",
]
