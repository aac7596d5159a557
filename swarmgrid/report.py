import typing as t

from pydantic import BaseModel

from swarmgrid.grid.state_grid import StateGrid
from swarmgrid.grid.types import CellState


class SolveReport(BaseModel):
    width: int
    height: int

    n_targets: int = 0
    """The number of buildings on the map"""

    sweeps: int = 0
    """The number of propagation sweeps, 0 if ingestion resolved every cell"""

    n_forced_unreachable: int = 0
    """Cells that no sweep could decide and that were forced to unreachable"""

    n_markers_placed: int = 0
    """Attackers placed around buildings, not counting those given in the input"""

    state_counts: t.Dict[str, int] = {}
    """The number of map cells in each state once solving is done"""

    def record_state_counts(self, grid: StateGrid):
        self.state_counts = {state.name: grid.count(state) for state in CellState}
