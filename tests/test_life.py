"""
Game of Life on the toroidal frame

Checks the Life rule parameters and the classic oscillator, still life
and glider behaviors, including patterns that cross the frame edges.
"""

import pytest

from cellframe.life import (
    BIRTH_SET,
    SURVIVAL_SET,
    CellState,
    LifeRule,
    game_of_life,
    life_frame,
    live_cells,
)

ALIVE = CellState.ALIVE
DEAD = CellState.DEAD


class TestLifeRule:
    """Test rule parameters and single-cell decisions."""

    def test_standard_sets(self):
        rule = LifeRule.standard()
        assert rule.survival == SURVIVAL_SET == {2, 3}
        assert rule.birth == BIRTH_SET == {3}

    def test_standard_sets_not_shared(self):
        rule = LifeRule.standard()
        rule.birth.add(6)
        assert BIRTH_SET == {3}

    @pytest.mark.parametrize("neighbors,expected", [
        (0, DEAD), (1, DEAD), (2, ALIVE), (3, ALIVE), (4, DEAD), (8, DEAD),
    ])
    def test_live_cell(self, neighbors, expected):
        assert game_of_life.next_state(ALIVE, neighbors) is expected

    @pytest.mark.parametrize("neighbors,expected", [
        (0, DEAD), (2, DEAD), (3, ALIVE), (4, DEAD), (6, DEAD),
    ])
    def test_dead_cell(self, neighbors, expected):
        assert game_of_life.next_state(DEAD, neighbors) is expected

    def test_custom_rule(self):
        """HighLife-style birth on 6 neighbors."""
        rule = LifeRule(survival={2, 3}, birth={3, 6})
        assert rule.next_state(DEAD, 6) is ALIVE
        assert game_of_life.next_state(DEAD, 6) is DEAD

    def test_repr(self):
        assert repr(LifeRule({3, 2}, {3})) == "LifeRule(survival=[2, 3], birth=[3])"

    def test_default_state(self):
        assert CellState.default() is DEAD
        assert life_frame(3, 3).get(1, 1) is DEAD


class TestLifePatterns:
    """Test classic patterns evolve as expected."""

    def test_blinker_on_small_torus(self):
        """Vertical blinker flips to horizontal and back on a 4x4 frame."""
        frame1 = life_frame(4, 4, alive=[(1, 0), (1, 1), (1, 2)])

        frame2 = frame1.advance(game_of_life)
        frame3 = frame2.advance(game_of_life)

        expected = life_frame(4, 4, alive=[(0, 1), (1, 1), (2, 1)])
        assert frame2 == expected
        assert frame3 == frame1

    def test_blinker_source_unchanged(self):
        frame = life_frame(4, 4, alive=[(1, 0), (1, 1), (1, 2)])
        frame.advance(game_of_life)
        assert live_cells(frame) == {(1, 0), (1, 1), (1, 2)}

    def test_blinker_across_edge(self):
        """Blinker straddling the top/bottom seam still oscillates."""
        frame = life_frame(6, 6, alive=[(3, 5), (3, 0), (3, 1)])

        flipped = frame.advance(game_of_life)

        assert live_cells(flipped) == {(2, 0), (3, 0), (4, 0)}
        assert frame.evolve(game_of_life, 2) == frame

    def test_block_still_life(self):
        frame = life_frame(6, 6, alive=[(2, 2), (3, 2), (2, 3), (3, 3)])
        assert frame.evolve(game_of_life, 10) == frame

    def test_block_across_corner(self):
        """Block split over all four corners is stable on a torus."""
        frame = life_frame(6, 6, alive=[(5, 5), (0, 5), (5, 0), (0, 0)])
        assert frame.advance(game_of_life) == frame

    def test_lonely_cell_dies(self):
        frame = life_frame(5, 5, alive=[(2, 2)])
        assert live_cells(frame.advance(game_of_life)) == set()

    def test_glider_returns_after_full_lap(self):
        """Glider travels once around an 8x8 torus in 32 generations."""
        glider = [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)]
        frame = life_frame(8, 8, alive=glider)

        first = next(frame.generations(game_of_life))
        assert len(live_cells(first)) == 5

        assert frame.evolve(game_of_life, 32) == frame
        assert frame.evolve(game_of_life, 4) != frame

    def test_glider_moves_one_cell_diagonally(self):
        glider = [(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)]
        frame = life_frame(8, 8, alive=glider)

        moved = frame.evolve(game_of_life, 4)

        assert live_cells(moved) == {(x + 1, y + 1) for x, y in glider}
