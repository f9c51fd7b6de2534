"""
Conway's Game of Life as a cellframe transition rule

Example rule module driving the generic frame. Cells hold `CellState`
values; the rule counts live cells in the Moore neighborhood through
`Square.neighbors_in_radius(1)`, so the grid wraps at its edges.
"""

from enum import Enum
from typing import Iterable, Optional, Set, Tuple

from .frame import Frame
from .square import Square


# Standard Conway rules
SURVIVAL_SET: Set[int] = {2, 3}  # Live cells survive with 2-3 neighbors
BIRTH_SET: Set[int] = {3}        # Dead cells born with exactly 3 neighbors


class CellState(Enum):
    """State of a single Game of Life cell."""
    DEAD = 0
    ALIVE = 1

    @classmethod
    def default(cls) -> 'CellState':
        """Default cell state, used as the frame's default factory."""
        return cls.DEAD


class LifeRule:
    """Life-like transition rule parameterized by survival and birth counts.

    Instances are callable and can be passed straight to `Frame.advance`.
    """

    def __init__(self,
                 survival: Optional[Set[int]] = None,
                 birth: Optional[Set[int]] = None):
        """Initialize rule parameters.

        Args:
            survival: Neighbor counts for live cell survival (default {2,3})
            birth: Neighbor counts for dead cell birth (default {3})
        """
        self.survival: Set[int] = set(survival) if survival is not None else SURVIVAL_SET.copy()
        self.birth: Set[int] = set(birth) if birth is not None else BIRTH_SET.copy()

    @classmethod
    def standard(cls) -> 'LifeRule':
        """Create standard Conway rules."""
        return cls(SURVIVAL_SET, BIRTH_SET)

    def next_state(self, state: CellState, live_neighbors: int) -> CellState:
        """Apply these rule parameters to a cell.

        Args:
            state: Current cell state
            live_neighbors: Number of live neighbors (0-8)

        Returns:
            Next cell state
        """
        if state is CellState.ALIVE:
            alive = live_neighbors in self.survival
        else:
            alive = live_neighbors in self.birth
        return CellState.ALIVE if alive else CellState.DEAD

    def __call__(self, square: Square) -> CellState:
        live = sum(1 for neighbor in square.neighbors_in_radius(1)
                   if neighbor is CellState.ALIVE)
        return self.next_state(square.get(0, 0), live)

    def __repr__(self) -> str:
        return f"LifeRule(survival={sorted(self.survival)}, birth={sorted(self.birth)})"


game_of_life = LifeRule.standard()


def life_frame(width: int, height: int, alive: Iterable[Tuple[int, int]] = ()) -> Frame:
    """Create a Game of Life frame with the given (x, y) cells alive."""
    frame = Frame(width, height, default=CellState.default)
    for x, y in alive:
        frame.set(x, y, CellState.ALIVE)
    return frame


def live_cells(frame: Frame) -> Set[Tuple[int, int]]:
    """Coordinates of every live cell in a frame."""
    return {(x, y) for x, y, state in frame.enumerate_cells() if state is CellState.ALIVE}
