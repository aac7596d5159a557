import typing as t

from swarmgrid.grid.state_grid import StateGrid
from swarmgrid.grid.types import CellState

DEBUG_SYMBOLS: t.Dict[CellState, str] = {
    CellState.UNKNOWN: "?",
    CellState.REACHABLE: ".",
    CellState.WALL: "#",
    CellState.STRUCTURE: "B",
    CellState.UNREACHABLE: "x",
    CellState.MARKER: "z",
}

# The answer has no notion of reachability, an unreachable cell is plain free space.
ANSWER_SYMBOLS: t.Dict[CellState, str] = {
    **DEBUG_SYMBOLS,
    CellState.UNREACHABLE: ".",
}


def render(grid: StateGrid, answer: bool = False) -> t.List[str]:
    """Draws the grid as text rows, top to bottom.

    :param answer: draw the puzzle answer, without the border and with unreachable cells
        shown as free space. Otherwise draw every cell of the padded grid for debugging.
    """
    if answer:
        symbols = ANSWER_SYMBOLS
        xs = range(1, grid.d_width - 1)
        ys = range(1, grid.d_height - 1)
    else:
        symbols = DEBUG_SYMBOLS
        xs = range(grid.d_width)
        ys = range(grid.d_height)
    return ["".join(symbols[grid.get(x, y)] for x in xs) for y in ys]


def render_text(grid: StateGrid, answer: bool = False) -> str:
    return "\n".join(render(grid, answer=answer))
