import typing as t

from swarmgrid.grid.types import CellState

if t.TYPE_CHECKING:
    from swarmgrid.grid.state_grid import StateGrid


def classify(grid: "StateGrid", x: int, y: int) -> CellState:
    """Infers the state of a free cell from its four orthogonal neighbors.

    A cell next to a reachable cell is reachable. Otherwise, if any neighbor is still
    undetermined the answer is UNKNOWN and the cell must be looked at again later.
    A cell whose neighbors are all determined and none reachable is unreachable.

    Only meaningful for cells that are UNKNOWN or free; walls, buildings and attackers
    are never reclassified.
    """
    neighbors = grid.neighbors4(x, y)
    if CellState.REACHABLE in neighbors:
        return CellState.REACHABLE
    if CellState.UNKNOWN in neighbors:
        return CellState.UNKNOWN
    return CellState.UNREACHABLE
