#!/usr/bin/env python3
"""
Constants for the SPR sprite extractor
Format offsets, sizes and limits in one place
"""

# Palette (.IMG) specifications
PALETTE_DATA_OFFSET = 0x0D  # RGB table starts after the image header
PALETTE_ENTRIES = 256
BYTES_PER_COLOR = 3  # R, G, B
PALETTE_SIZE_BYTES = PALETTE_ENTRIES * BYTES_PER_COLOR  # 768
PALETTE_MIN_FILE_SIZE = PALETTE_DATA_OFFSET + PALETTE_SIZE_BYTES  # 781

# Archive (.SPR) specifications
SPRITE_COUNT_SIZE = 1  # uint8 count
DIRECTORY_ENTRY_SIZE = 2  # uint8 width, uint8 height
MAX_SPRITES = 255
MAX_SPRITE_DIMENSION = 255
MAX_SPRITE_PIXELS = MAX_SPRITE_DIMENSION * MAX_SPRITE_DIMENSION  # 65025

# VGA Mode X layout
MODEX_PLANES = 4

# Output pixmap specifications
OUTPUT_EXTENSION = "ppm"
PPM_MAGIC = "P3"
RGB888_MAX_VALUE = 255
PIXELS_PER_LINE = 4
TRIPLET_SEPARATOR = "   "
SPRITE_INDEX_DIGITS = 3

# Legacy name buffer was 32 bytes including the terminator
MAX_OUTPUT_NAME_LENGTH = 31

# Exit codes
EXIT_OK = 0
EXIT_PALETTE_FAILURE = 1
EXIT_ARCHIVE_FAILURE = 2
EXIT_USAGE = 3  # bad option value or unknown flag

# Environment variables
ENV_DEBUG = "SPR_EXTRACTOR_DEBUG"
ENV_OUTPUT_DIR = "SPR_EXTRACTOR_OUTPUT_DIR"
