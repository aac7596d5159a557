import unittest

import numpy as np
import pytest

from swarmgrid.exceptions import GridConsistencyError, GridFormatError
from swarmgrid.grid.state_grid import StateGrid
from swarmgrid.grid.types import CellState


def border_states(grid: StateGrid):
    for x in range(grid.d_width):
        for y in range(grid.d_height):
            if grid.is_border(x, y):
                yield grid.get(x, y)


class TestStateGrid:
    def test_padded_shape(self):
        grid = StateGrid(4, 3)
        assert grid.grid.shape == (6, 5)
        assert grid.interior().shape == (4, 3)

    def test_border_is_reachable(self):
        for width, height in [(0, 0), (1, 1), (3, 2), (5, 7)]:
            grid = StateGrid(width, height)
            assert all(s == CellState.REACHABLE for s in border_states(grid))

    def test_interior_starts_unknown(self):
        grid = StateGrid(3, 3)
        assert grid.count(CellState.UNKNOWN) == 9
        assert np.all(grid.interior() == CellState.UNKNOWN.value)

    def test_negative_dimensions(self):
        with pytest.raises(GridFormatError):
            StateGrid(-1, 3)

    def test_get_set(self):
        grid = StateGrid(2, 2)
        grid.set(1, 2, CellState.WALL)
        assert grid.get(1, 2) == CellState.WALL
        assert grid.get(2, 1) == CellState.UNKNOWN

    def test_out_of_range_access(self):
        grid = StateGrid(2, 2)
        with pytest.raises(GridConsistencyError):
            grid.get(-1, 0)
        with pytest.raises(GridConsistencyError):
            grid.get(4, 1)
        with pytest.raises(GridConsistencyError):
            grid.set(1, 4, CellState.WALL)

    def test_border_cannot_be_overwritten(self):
        grid = StateGrid(2, 2)
        with pytest.raises(GridConsistencyError):
            grid.set(0, 1, CellState.MARKER)
        grid.set(0, 1, CellState.REACHABLE)

    def test_neighbors4_order(self):
        grid = StateGrid(3, 3)
        grid.set(2, 1, CellState.WALL)
        grid.set(2, 3, CellState.STRUCTURE)
        grid.set(1, 2, CellState.MARKER)
        assert grid.neighbors4(2, 2) == (
            CellState.WALL,
            CellState.STRUCTURE,
            CellState.MARKER,
            CellState.UNKNOWN,
        )

    def test_neighbors4_at_map_edge(self):
        grid = StateGrid(1, 1)
        assert grid.neighbors4(1, 1) == (CellState.REACHABLE,) * 4

    def test_neighbors8(self):
        grid = StateGrid(3, 3)
        assert len(list(grid.neighbors8(2, 2))) == 8
        assert (2, 2) not in set(grid.neighbors8(2, 2))
        # corner of the padded grid
        assert set(grid.neighbors8(0, 0)) == {(1, 0), (0, 1), (1, 1)}

    def test_interior_cells_reverse_covers_every_row(self):
        grid = StateGrid(3, 4)
        cells = list(grid.interior_cells(reverse=True))
        assert len(cells) == 12
        assert set(cells) == set(grid.interior_cells())
        assert cells[0] == (3, 4)
        assert cells[-1] == (1, 1)

    def test_interior_cells_row_major(self):
        grid = StateGrid(2, 2)
        assert list(grid.interior_cells()) == [(1, 1), (2, 1), (1, 2), (2, 2)]
        assert list(grid.interior_cells(reverse=True)) == [
            (2, 2),
            (1, 2),
            (2, 1),
            (1, 1),
        ]

    def test_add_entry_fixed_symbols(self):
        grid = StateGrid(3, 1)
        assert grid.add_entry(1, 1, "#")
        assert grid.add_entry(2, 1, "B")
        assert grid.add_entry(3, 1, "z")
        assert [grid.get(x, 1) for x in (1, 2, 3)] == [
            CellState.WALL,
            CellState.STRUCTURE,
            CellState.MARKER,
        ]

    def test_add_entry_free_cell(self):
        grid = StateGrid(3, 3)
        # top row touches the border
        assert grid.add_entry(2, 1, ".")
        assert grid.get(2, 1) == CellState.REACHABLE

        grid.set(1, 2, CellState.WALL)
        grid.set(2, 1, CellState.WALL)
        # right and bottom neighbors are still unread
        assert not grid.add_entry(2, 2, ".")
        assert grid.get(2, 2) == CellState.UNKNOWN

    def test_add_entry_rejects_unknown_symbol(self):
        grid = StateGrid(2, 2)
        with pytest.raises(GridFormatError):
            grid.add_entry(1, 1, "?")
        assert grid.get(1, 1) == CellState.UNKNOWN

    def test_copy_is_independent(self):
        grid = StateGrid(2, 2)
        other = grid.copy()
        assert other == grid
        other.set(1, 1, CellState.WALL)
        assert grid.get(1, 1) == CellState.UNKNOWN
        assert other != grid


if __name__ == "__main__":
    unittest.main()
