"""Fixed-size toroidal frame holding one generation of a cellular automaton.

A frame stores one value of an arbitrary element type per cell in a dense
numpy object array of shape (height, width). The next generation is derived
by `Frame.advance`, which hands every cell's `Square` view of the current
frame to a caller-supplied transition function and collects the results into
a new frame. The current frame is never modified while advancing, so every
transition sees the same snapshot.
"""

import copy
import logging
from typing import Any, Callable, Iterator, Optional, Sequence, Tuple

import numpy as np

from .errors import CoordinateError, FrameShapeError
from .square import Square

logger = logging.getLogger(__name__)

Transition = Callable[[Square], Any]


class Frame:
    """2D toroidal grid of cell values.

    Attributes:
        width: Frame width in cells
        height: Frame height in cells
    """

    def __init__(self, width: int, height: int,
                 default: Optional[Callable[[], Any]] = None):
        """Initialize a frame with every cell set to a default value.

        Args:
            width: Frame width (cells), may be 0
            height: Frame height (cells), may be 0
            default: Zero-argument factory called once per cell (int if None)

        Raises:
            FrameShapeError: If a dimension is negative or not an integer
        """
        _check_dimensions(width, height)
        factory = default if default is not None else int

        cells = np.empty((height, width), dtype=object)
        for y in range(height):
            for x in range(width):
                cells[y, x] = factory()

        self._width = width
        self._height = height
        self._cells = cells
        logger.debug(f"Created frame {width}x{height}")

    @classmethod
    def _wrap(cls, cells: np.ndarray) -> 'Frame':
        # Adopts an already populated buffer without calling a factory.
        frame = cls.__new__(cls)
        frame._height, frame._width = cells.shape
        frame._cells = cells
        return frame

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Any]]) -> 'Frame':
        """Create a frame from row sequences, where rows[y][x] is cell (x, y).

        Raises:
            FrameShapeError: If rows have differing lengths
        """
        height = len(rows)
        width = len(rows[0]) if height else 0
        for y, row in enumerate(rows):
            if len(row) != width:
                raise FrameShapeError(f"Row {y} has {len(row)} cells, expected {width}")

        cells = np.empty((height, width), dtype=object)
        for y, row in enumerate(rows):
            for x, value in enumerate(row):
                cells[y, x] = value
        return cls._wrap(cells)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def shape(self) -> Tuple[int, int]:
        """(width, height) of the frame."""
        return self._width, self._height

    def contains(self, x: int, y: int) -> bool:
        """Check whether (x, y) lies inside the frame."""
        return 0 <= x < self._width and 0 <= y < self._height

    def get(self, x: int, y: int) -> Any:
        """Get cell value at coordinates.

        Args:
            x: X coordinate (column)
            y: Y coordinate (row)

        Returns:
            The value stored at (x, y)

        Raises:
            CoordinateError: If coordinates are out of bounds
        """
        if not self.contains(x, y):
            raise CoordinateError(x, y, self._width, self._height)
        return self._cells[y, x]

    def set(self, x: int, y: int, value: Any) -> None:
        """Set cell value at coordinates.

        Raises:
            CoordinateError: If coordinates are out of bounds
        """
        if not self.contains(x, y):
            raise CoordinateError(x, y, self._width, self._height)
        self._cells[y, x] = value

    def square(self, x: int, y: int) -> Square:
        """Neighborhood view anchored at (x, y), for inspection outside advance."""
        return Square(self, x, y)

    def enumerate_cells(self) -> Iterator[Tuple[int, int, Any]]:
        """Yield (x, y, value) for every cell in row-major order.

        x advances before y. Each call starts again from (0, 0).
        """
        for y in range(self._height):
            for x in range(self._width):
                yield x, y, self._cells[y, x]

    def advance(self, transition: Transition) -> 'Frame':
        """Compute the next generation.

        Every cell's new value is `transition(square)`, where the square views
        this frame, which stays unchanged. Results go into a copy of the
        current buffer that becomes the returned frame.

        Args:
            transition: Function mapping a Square to the cell's next value

        Returns:
            New frame of the same dimensions

        Raises:
            Whatever the transition raises, unchanged; no partial frame results
        """
        cells = self._cells.copy()
        for x, y, _ in self.enumerate_cells():
            square = Square(self, x, y)
            try:
                cells[y, x] = transition(square)
            finally:
                square.release()

        logger.debug(f"Advanced frame {self._width}x{self._height}")
        return Frame._wrap(cells)

    def evolve(self, transition: Transition, steps: int) -> 'Frame':
        """Advance `steps` times and return the final frame.

        Raises:
            ValueError: If steps is negative
        """
        if steps < 0:
            raise ValueError(f"Steps must be non-negative, got {steps}")

        frame = self.copy()
        for _ in range(steps):
            frame = frame.advance(transition)
        logger.debug(f"Evolved frame {self._width}x{self._height} over {steps} generations")
        return frame

    def generations(self, transition: Transition) -> Iterator['Frame']:
        """Lazily yield successive generations, starting with the next one."""
        frame = self
        while True:
            frame = frame.advance(transition)
            yield frame

    def copy(self) -> 'Frame':
        """Create a deep copy of the frame."""
        return Frame._wrap(copy.deepcopy(self._cells))

    def to_array(self, dtype: Optional[Any] = None) -> np.ndarray:
        """Get a (height, width) numpy snapshot of the cells.

        The snapshot shares no mutable cell values with the frame.
        """
        if dtype is None:
            return copy.deepcopy(self._cells)
        return self._cells.astype(dtype)

    def __len__(self) -> int:
        return self._width * self._height

    def __iter__(self) -> Iterator[Tuple[int, int, Any]]:
        return self.enumerate_cells()

    def __getitem__(self, key: Tuple[int, int]) -> Any:
        """Access cell value using frame[x, y] syntax."""
        x, y = key
        return self.get(x, y)

    def __setitem__(self, key: Tuple[int, int], value: Any) -> None:
        """Set cell value using frame[x, y] = value syntax."""
        x, y = key
        self.set(x, y, value)

    def __eq__(self, other: object) -> bool:
        """Check equality with another frame."""
        if not isinstance(other, Frame):
            return False
        return (self._width == other._width and
                self._height == other._height and
                self._cells.tolist() == other._cells.tolist())

    __hash__ = None

    def __repr__(self) -> str:
        return f"Frame({self._width}x{self._height})"


def _check_dimensions(width: int, height: int) -> None:
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise FrameShapeError(f"Frame {name} must be an integer, got {value!r}")
        if value < 0:
            raise FrameShapeError(f"Frame {name} must be non-negative, got {value}")
