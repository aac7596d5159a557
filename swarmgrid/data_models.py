import typing as t

import yaml
from pydantic import BaseModel

from swarmgrid.grid.types import SweepOrder


class SolveConfigModel(BaseModel):
    sweep_order: SweepOrder = SweepOrder.ROW_MAJOR
    """Order in which propagation visits the cells. ``alternating`` runs every second
    sweep in reverse."""

    double_buffer: bool = False
    """Classify against a snapshot of the grid taken before each sweep."""

    print_logs: bool | None = None
    """Echo the run log to stderr. Defaults to ``swarmgrid.config.PRINT_LOGS``."""


def solve_config_from_yaml(file_path: str) -> SolveConfigModel:
    with open(file_path, "r") as stream:
        config = yaml.safe_load(stream)
    return SolveConfigModel(**(config or {}))


def merge_overrides(
    config: SolveConfigModel, **overrides: t.Any
) -> SolveConfigModel:
    """Returns a copy of the config with every override that is not None applied."""
    update = {key: value for key, value in overrides.items() if value is not None}
    return config.model_copy(update=update)
