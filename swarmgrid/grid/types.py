import typing as t
from enum import Enum


class CellState(Enum):
    UNKNOWN = 0
    REACHABLE = 1
    WALL = 2
    STRUCTURE = 3
    UNREACHABLE = 4
    MARKER = 5


TERMINAL_STATES = frozenset(
    {
        CellState.REACHABLE,
        CellState.WALL,
        CellState.STRUCTURE,
        CellState.UNREACHABLE,
        CellState.MARKER,
    }
)

# Input alphabet. "." is resolved by the classifier at ingestion time.
FREE_SYMBOL = "."
SYMBOL_TO_FIXED_STATE: t.Dict[str, CellState] = {
    "#": CellState.WALL,
    "B": CellState.STRUCTURE,
    "z": CellState.MARKER,
}
INPUT_SYMBOLS = frozenset({FREE_SYMBOL, *SYMBOL_TO_FIXED_STATE})

GridCell = t.Tuple[int, int]


class SweepOrder(str, Enum):
    ROW_MAJOR = "row_major"
    ALTERNATING = "alternating"
