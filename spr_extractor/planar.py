#!/usr/bin/env python3
"""
VGA Mode X planar pixel utilities
Re-linearizes pixel data that was split into four planes for display
"""
from __future__ import annotations

import numpy as np

from .constants import MODEX_PLANES
from .exceptions import PlanarLayoutError


def linearize_planar_data(planar: bytes | bytearray | memoryview,
                          pixel_count: int,
                          out: bytearray | None = None) -> bytes:
    """
    Interleave four plane-major planes back into linear pixel order.

    Pixel ``p`` of plane ``k`` moves to position ``MODEX_PLANES * p + k``.

    Args:
        planar: Buffer holding plane 0 entirely, then plane 1, and so on
        pixel_count: Total number of pixels across all planes
        out: Optional caller-owned buffer to fill in place

    Returns:
        The linear pixel data

    Raises:
        PlanarLayoutError: If pixel_count is not a multiple of 4 or a buffer
            is too small
    """
    if pixel_count < 0 or pixel_count % MODEX_PLANES:
        raise PlanarLayoutError(
            f"Pixel count {pixel_count} is not a multiple of {MODEX_PLANES} planes"
        )
    if len(planar) < pixel_count:
        raise PlanarLayoutError(
            f"Planar buffer holds {len(planar)} bytes, expected {pixel_count}"
        )
    if out is not None and len(out) < pixel_count:
        raise PlanarLayoutError(
            f"Output buffer holds {len(out)} bytes, expected {pixel_count}"
        )

    planes = np.frombuffer(bytes(planar[:pixel_count]), dtype=np.uint8)
    linear = planes.reshape(MODEX_PLANES, pixel_count // MODEX_PLANES).T.tobytes()

    if out is not None:
        out[:pixel_count] = linear
    return linear
