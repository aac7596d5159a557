import typing as t

from swarmgrid.data_models import SolveConfigModel
from swarmgrid.grid.placement import place_markers
from swarmgrid.grid.propagator import Propagator
from swarmgrid.grid.state_grid import StateGrid
from swarmgrid.io.parser import IngestedGrid, parse_grid
from swarmgrid.report import SolveReport
from swarmgrid.utils import utils


class SolveResult:
    def __init__(
        self, *, grid: StateGrid, report: SolveReport, logger: utils.SwarmgridLogger
    ):
        self.grid = grid
        self.report = report
        self.logger = logger


def solve_ingested(
    ingested: IngestedGrid,
    config: SolveConfigModel | None = None,
    logger: utils.SwarmgridLogger | None = None,
) -> SolveResult:
    config = config or SolveConfigModel()
    if logger is None:
        logger = utils.SwarmgridLogger(printout=config.print_logs)
    grid = ingested.grid
    report = SolveReport(
        width=grid.width, height=grid.height, n_targets=len(ingested.targets)
    )
    logger.append(
        utils.SwarmgridLog(
            f"Map of {grid.width}x{grid.height} cells loaded with {len(ingested.targets)} buildings.",
            0,
        )
    )

    if ingested.needs_propagation:
        propagator = Propagator(
            grid,
            sweep_order=config.sweep_order,
            double_buffer=config.double_buffer,
            logger=logger,
        )
        propagation = propagator.run()
        report.sweeps = propagation.sweeps
        report.n_forced_unreachable = propagation.n_forced_unreachable
    else:
        logger.append(utils.SwarmgridLog("Every cell resolved while loading.", 0))

    report.n_markers_placed = place_markers(grid, ingested.targets)
    logger.append(
        utils.SwarmgridLog(f"Placed {report.n_markers_placed} attackers.", report.sweeps)
    )
    report.record_state_counts(grid)
    return SolveResult(grid=grid, report=report, logger=logger)


def solve(
    lines: t.Iterable[str],
    config: SolveConfigModel | None = None,
    logger: utils.SwarmgridLogger | None = None,
) -> SolveResult:
    """Reads a map, classifies every cell and places attackers around the buildings."""
    return solve_ingested(parse_grid(lines), config=config, logger=logger)
