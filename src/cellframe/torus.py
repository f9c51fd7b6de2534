"""Toroidal coordinate arithmetic.

Each axis of a frame wraps at its extent, so the cell left of column 0 is the
last column and the cell above row 0 is the last row.
"""

from typing import Tuple

from .errors import OffsetError


def wrap(coord: int, delta: int, extent: int) -> int:
    """Add a signed offset to a coordinate modulo the axis extent.

    Args:
        coord: Starting coordinate (0 to extent-1)
        delta: Signed offset, strictly smaller than extent in magnitude
        extent: Axis length

    Returns:
        Wrapped coordinate in [0, extent)

    Raises:
        OffsetError: If abs(delta) >= extent
    """
    if abs(delta) >= extent:
        raise OffsetError(f"Offset {delta} too large for axis of extent {extent}")
    return (coord + delta) % extent


def wrap_point(point: Tuple[int, int], dx: int, dy: int,
               width: int, height: int) -> Tuple[int, int]:
    """Offset an (x, y) point on a width x height torus."""
    x, y = point
    return wrap(x, dx, width), wrap(y, dy, height)


def box_offsets(radius: int):
    """Yield (dx, dy) offsets of the (2r+1)^2 box around the origin, origin excluded.

    dx is the outer loop and dy the inner loop, both ascending.
    """
    if radius < 0:
        raise OffsetError(f"Radius must be non-negative, got {radius}")
    for dx in range(-radius, radius + 1):
        for dy in range(-radius, radius + 1):
            if dx != 0 or dy != 0:
                yield dx, dy
