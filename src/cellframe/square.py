"""Read-only neighborhood view handed to transition functions.

A Square is bound to one cell of one frame. Transition rules use it to look
at nearby cells through signed offsets that wrap around the frame edges,
without touching the frame's storage directly.
"""

from typing import TYPE_CHECKING, Any, List, Optional, Tuple

from .errors import CoordinateError, StaleSquareError
from .torus import box_offsets, wrap_point

if TYPE_CHECKING:
    from .frame import Frame


class Square:
    """Neighborhood view anchored at (x, y) within a frame.

    Attributes:
        x: Anchor column
        y: Anchor row
    """

    __slots__ = ('_frame', '_x', '_y')

    def __init__(self, frame: 'Frame', x: int, y: int):
        if not frame.contains(x, y):
            raise CoordinateError(x, y, frame.width, frame.height)
        self._frame: Optional['Frame'] = frame
        self._x = x
        self._y = y

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    def _bound_frame(self) -> 'Frame':
        if self._frame is None:
            raise StaleSquareError(
                f"Square at ({self.x}, {self.y}) used after its transition call returned")
        return self._frame

    def release(self) -> None:
        """Detach the view from its frame; later lookups raise StaleSquareError."""
        self._frame = None

    @property
    def released(self) -> bool:
        return self._frame is None

    def get(self, dx: int, dy: int) -> Any:
        """Get the value at the anchor offset by (dx, dy), wrapping at the edges.

        Args:
            dx: Column offset, abs(dx) < frame width
            dy: Row offset, abs(dy) < frame height

        Returns:
            Cell value at the wrapped coordinate

        Raises:
            OffsetError: If an offset is as large as the extent of its axis
            StaleSquareError: If the square has been released
        """
        frame = self._bound_frame()
        x, y = wrap_point((self.x, self.y), dx, dy, frame.width, frame.height)
        return frame.get(x, y)

    def coordinate(self) -> Tuple[int, int]:
        """Anchor position (x, y)."""
        return self.x, self.y

    def neighbors_in_radius(self, radius: int) -> List[Any]:
        """Values of the (2r+1)x(2r+1) box around the anchor, anchor excluded.

        Ordered with dx in the outer loop and dy in the inner loop, so r=1 gives
        (-1,-1), (-1,0), (-1,1), (0,-1), (0,1), (1,-1), (1,0), (1,1).
        """
        return [self.get(dx, dy) for dx, dy in box_offsets(radius)]

    def __repr__(self) -> str:
        state = "released" if self.released else "bound"
        return f"Square(x={self.x}, y={self.y}, {state})"
