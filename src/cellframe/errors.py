"""Exception types raised by the cellframe substrate.

Every error here reports caller misuse of a precondition. The core touches no
I/O, so there is no recoverable error path.
"""


class CellFrameError(Exception):
    """Base class for all cellframe errors."""


class FrameShapeError(CellFrameError, ValueError):
    """Invalid frame dimensions or ragged initial rows."""


class CoordinateError(CellFrameError, IndexError):
    """Absolute coordinate outside the frame bounds."""

    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(f"Coordinates ({x}, {y}) out of bounds for {width}x{height} frame")
        self.x = x
        self.y = y


class OffsetError(CellFrameError, ValueError):
    """Relative offset whose magnitude is not smaller than the axis extent."""


class StaleSquareError(CellFrameError, RuntimeError):
    """A Square was used after the transition call that received it returned."""
