import typing as t

from swarmgrid.exceptions import GridConsistencyError
from swarmgrid.grid import classifier
from swarmgrid.grid.state_grid import StateGrid
from swarmgrid.grid.types import CellState, SweepOrder
from swarmgrid.utils import utils


class SweepResult(t.NamedTuple):
    still_ambiguous: bool
    made_progress: bool
    n_reachable: int
    n_unreachable: int
    n_unknown: int


class PropagationResult:
    def __init__(
        self,
        *,
        sweeps: int = 0,
        n_reachable: int = 0,
        n_unreachable: int = 0,
        n_forced_unreachable: int = 0,
    ):
        self.sweeps = sweeps
        self.n_reachable = n_reachable
        """Cells resolved to REACHABLE by the sweeps"""
        self.n_unreachable = n_unreachable
        """Cells resolved to UNREACHABLE by the sweeps"""
        self.n_forced_unreachable = n_forced_unreachable
        """Cells left undecidable by the sweeps and forced to UNREACHABLE"""


class Propagator:
    """Repeatedly classifies the undetermined cells of a grid until nothing changes.

    A sweep classifies every UNKNOWN interior cell and writes the result straight back
    into the grid, so cells visited later in the same sweep already see it. With
    ``double_buffer`` the sweep reads neighbors from a snapshot taken before the sweep
    instead. With the ``alternating`` sweep order every second sweep runs bottom-up,
    right to left. All variants reach the same fixed point, only the number of sweeps
    differs.

    Sweeping stops once no cell is left UNKNOWN, or once a sweep resolves nothing. In
    the latter case the remaining cells only depend on one another and can never be
    reached from the border, so they are forced to UNREACHABLE.
    """

    def __init__(
        self,
        grid: StateGrid,
        *,
        sweep_order: SweepOrder = SweepOrder.ROW_MAJOR,
        double_buffer: bool = False,
        logger: utils.SwarmgridLogger | None = None,
    ):
        self.grid = grid
        self.sweep_order = sweep_order
        self.double_buffer = double_buffer
        self.logger = logger if logger is not None else utils.SwarmgridLogger()
        self.max_sweeps = grid.width * grid.height + 1

    def sweep(self, sweep_index: int = 1) -> SweepResult:
        reverse = self.sweep_order == SweepOrder.ALTERNATING and sweep_index % 2 == 0
        source = self.grid.copy() if self.double_buffer else self.grid

        n_reachable = n_unreachable = n_unknown = 0
        for x, y in self.grid.interior_cells(reverse=reverse):
            if self.grid.get(x, y) != CellState.UNKNOWN:
                continue
            result = classifier.classify(source, x, y)
            if result == CellState.UNKNOWN:
                n_unknown += 1
                continue
            if result == CellState.REACHABLE:
                n_reachable += 1
            else:
                n_unreachable += 1
            self.grid.set(x, y, result)

        return SweepResult(
            still_ambiguous=n_unknown > 0,
            made_progress=(n_reachable + n_unreachable) > 0,
            n_reachable=n_reachable,
            n_unreachable=n_unreachable,
            n_unknown=n_unknown,
        )

    def force_resolve(self) -> int:
        n_forced = 0
        for x, y in self.grid.interior_cells():
            if self.grid.get(x, y) == CellState.UNKNOWN:
                self.grid.set(x, y, CellState.UNREACHABLE)
                n_forced += 1
        return n_forced

    def run(self) -> PropagationResult:
        result = PropagationResult()
        while True:
            result.sweeps += 1
            if result.sweeps > self.max_sweeps:
                raise GridConsistencyError(
                    f"propagation did not converge within {self.max_sweeps} sweeps"
                )

            sweep = self.sweep(result.sweeps)
            result.n_reachable += sweep.n_reachable
            result.n_unreachable += sweep.n_unreachable
            self.logger.append(
                utils.SwarmgridLog(
                    f"Sweep resolved {sweep.n_reachable} reachable and "
                    f"{sweep.n_unreachable} unreachable cells, {sweep.n_unknown} left unknown.",
                    result.sweeps,
                )
            )

            if not sweep.made_progress:
                result.n_forced_unreachable = self.force_resolve()
                if result.n_forced_unreachable:
                    self.logger.append(
                        utils.SwarmgridLog(
                            f"Forced {result.n_forced_unreachable} undecidable cells to unreachable.",
                            result.sweeps,
                        )
                    )
                return result

            if not sweep.still_ambiguous:
                return result
