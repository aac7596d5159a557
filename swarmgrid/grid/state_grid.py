import typing as t

import numpy as np
import numpy.typing as npt
from typing_extensions import Self

from swarmgrid.exceptions import GridConsistencyError, GridFormatError
from swarmgrid.grid import classifier
from swarmgrid.grid.types import (
    FREE_SYMBOL,
    SYMBOL_TO_FIXED_STATE,
    CellState,
    GridCell,
)
from swarmgrid.utils import utils


class StateGrid:
    """A map of cell states surrounded by a one-cell border of reachable cells.

    The logical map is ``width`` x ``height``. It is stored in a numpy array of shape
    ``(width + 2, height + 2)`` indexed ``[x, y]``, so physical coordinate ``(1, 1)`` is
    the top left cell of the map. The border models attackers entering from anywhere
    outside the map, and lets neighbor lookups at the map edge stay in range.
    """

    def __init__(self, width: int, height: int):
        if width < 0 or height < 0:
            raise GridFormatError(1, f"negative grid dimensions {width}x{height}")
        self.width = width
        self.height = height
        self.d_width = width + 2
        self.d_height = height + 2
        # UNKNOWN is 0, so the interior starts out undetermined
        self.grid: npt.NDArray[np.int8] = np.zeros(
            (self.d_width, self.d_height), dtype=np.int8
        )
        self.__set_border()

    def __set_border(self):
        reachable = CellState.REACHABLE.value
        self.grid[0, :] = reachable
        self.grid[self.d_width - 1, :] = reachable
        self.grid[:, 0] = reachable
        self.grid[:, self.d_height - 1] = reachable

    def is_in_grid(self, x: int, y: int) -> bool:
        return not (x < 0 or x >= self.d_width or y < 0 or y >= self.d_height)

    def is_border(self, x: int, y: int) -> bool:
        return x in (0, self.d_width - 1) or y in (0, self.d_height - 1)

    def _check_bounds(self, x: int, y: int):
        # numpy would silently wrap negative indices
        if not self.is_in_grid(x, y):
            raise GridConsistencyError(
                f"cell ({x}, {y}) is outside the padded {self.d_width}x{self.d_height} grid"
            )

    def get(self, x: int, y: int) -> CellState:
        self._check_bounds(x, y)
        return CellState(int(self.grid[x, y]))

    def set(self, x: int, y: int, state: CellState):
        self._check_bounds(x, y)
        if self.is_border(x, y) and state != CellState.REACHABLE:
            raise GridConsistencyError(
                f"border cell ({x}, {y}) cannot become {state.name}"
            )
        self.grid[x, y] = state.value

    def neighbors4(self, x: int, y: int) -> t.Tuple[CellState, ...]:
        """Returns the states above, below, left of and right of the cell."""
        return tuple(self.get(x + dx, y + dy) for dx, dy in utils.TAXI_NEIGHBORHOOD)

    def neighbors8(self, x: int, y: int) -> t.Iterable[GridCell]:
        for dx, dy in utils.CHESSBOARD_NEIGHBORHOOD:
            cell = (x + dx, y + dy)
            if self.is_in_grid(*cell):
                yield cell

    def interior_cells(self, reverse: bool = False) -> t.Iterator[GridCell]:
        ys = range(1, self.height + 1)
        xs = range(1, self.width + 1)
        if reverse:
            ys = range(self.height, 0, -1)
            xs = range(self.width, 0, -1)
        for y in ys:
            for x in xs:
                yield (x, y)

    def interior(self) -> npt.NDArray[np.int8]:
        return self.grid[1 : self.d_width - 1, 1 : self.d_height - 1]

    def count(self, state: CellState) -> int:
        return int(np.count_nonzero(self.interior() == state.value))

    def add_entry(self, x: int, y: int, symbol: str) -> bool:
        """Stores one input symbol at physical coordinate ``(x, y)``.

        Walls, buildings and attackers are stored as is. A free cell is classified from
        its neighbors, which may not all be known yet.

        :return: False if the cell could not be resolved and a propagation pass is needed
        """
        if symbol in SYMBOL_TO_FIXED_STATE:
            self.set(x, y, SYMBOL_TO_FIXED_STATE[symbol])
            return True
        if symbol != FREE_SYMBOL:
            raise GridFormatError(y + 1, f"unrecognized symbol {symbol!r} at column {x}")

        state = classifier.classify(self, x, y)
        self.set(x, y, state)
        return state != CellState.UNKNOWN

    def copy(self) -> Self:
        other = self.__class__(self.width, self.height)
        other.grid = self.grid.copy()
        return other

    def __eq__(self, other: t.Any):
        if isinstance(other, StateGrid):
            return self.grid.shape == other.grid.shape and bool(
                np.array_equal(self.grid, other.grid)
            )
        return NotImplemented
