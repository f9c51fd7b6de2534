"""
cellframe: generic toroidal cellular-automaton substrate

A `Frame` holds one value per cell of a fixed-size wraparound grid.
`Frame.advance` builds the next generation by calling a transition
function with a read-only `Square` view of each cell's neighborhood.
"""

from .errors import (
    CellFrameError,
    CoordinateError,
    FrameShapeError,
    OffsetError,
    StaleSquareError,
)
from .frame import Frame, Transition
from .square import Square

__version__ = "0.1.0"

__all__ = [
    'Frame',
    'Square',
    'Transition',
    'CellFrameError',
    'CoordinateError',
    'FrameShapeError',
    'OffsetError',
    'StaleSquareError',
]
