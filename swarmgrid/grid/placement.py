import typing as t

from swarmgrid.grid.state_grid import StateGrid
from swarmgrid.grid.types import CellState, GridCell


def place_markers(grid: StateGrid, targets: t.Iterable[GridCell]) -> int:
    """Puts an attacker on every reachable cell around each building.

    The whole 8-neighborhood of a building counts, diagonals included. Only REACHABLE
    cells are marked, so walls, other buildings, unreachable pockets and cells that
    already hold an attacker are left alone. The border lies outside the map and never
    receives a marker.

    :return: the number of markers placed
    """
    n_placed = 0
    for tx, ty in targets:
        for x, y in grid.neighbors8(tx, ty):
            if grid.is_border(x, y):
                continue
            if grid.get(x, y) == CellState.REACHABLE:
                grid.set(x, y, CellState.MARKER)
                n_placed += 1
    return n_placed
