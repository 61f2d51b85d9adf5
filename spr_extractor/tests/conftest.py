"""
Shared pytest fixtures and configuration for extractor tests
"""

import logging
import tempfile
from pathlib import Path

import pytest

from spr_extractor.constants import PALETTE_DATA_OFFSET
from spr_extractor.logging_config import LOGGER_NAME
from spr_extractor.palette import ColorTable


def build_palette_file_data(colors=None, header=None):
    """Palette file bytes: 13 header bytes then 256 RGB triplets"""
    if colors is None:
        colors = [(i, i, i) for i in range(256)]
    if header is None:
        header = bytes(range(0xA0, 0xA0 + PALETTE_DATA_OFFSET))
    return header + bytes(channel for color in colors for channel in color)


def build_archive_data(sizes, payloads):
    """Archive bytes: count, (width, height) pairs, concatenated payloads"""
    data = bytearray([len(sizes)])
    for width, height in sizes:
        data.extend([width, height])
    for payload in payloads:
        data.extend(payload)
    return bytes(data)


@pytest.fixture(autouse=True)
def reset_extractor_logger():
    """Undo setup_logging() so caplog sees records in every test"""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def gray_table():
    """Color table where index i maps to (i, i, i)"""
    return ColorTable.from_colors([(i, i, i) for i in range(256)])


@pytest.fixture
def distinct_table():
    """Color table with different values in each channel"""
    return ColorTable.from_colors([(i, 255 - i, (i * 7) % 256) for i in range(256)])


@pytest.fixture
def palette_file(temp_dir):
    """Palette file holding the gray table"""
    path = temp_dir / "QUAR.IMG"
    path.write_bytes(build_palette_file_data())
    return str(path)


@pytest.fixture
def sample_archive_data():
    """Three sprites: 4x2, an empty slot (0x3), and 2x3"""
    return build_archive_data(
        [(4, 2), (0, 3), (2, 3)],
        [bytes(range(8)), bytes([10, 11, 12, 13, 14, 15])],
    )


@pytest.fixture
def archive_file(temp_dir, sample_archive_data):
    """Archive file holding sample_archive_data"""
    path = temp_dir / "TEST.SPR"
    path.write_bytes(sample_archive_data)
    return str(path)


@pytest.fixture
def make_palette_data():
    """Factory for palette file bytes"""
    return build_palette_file_data


@pytest.fixture
def make_archive_data():
    """Factory for archive bytes"""
    return build_archive_data
