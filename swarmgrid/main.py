import sys
import typing as t

import typer

from swarmgrid.data_models import (
    SolveConfigModel,
    merge_overrides,
    solve_config_from_yaml,
)
from swarmgrid.exceptions import GridFormatError
from swarmgrid.grid.types import SweepOrder
from swarmgrid.io import parser, render
from swarmgrid.solver import solve_ingested

app = typer.Typer()


@app.callback()
def main():
    """Classify grid maps and place attackers around their buildings."""


@app.command()
def solve(
    map_file: t.Annotated[
        t.Optional[str], typer.Argument(help="Map file, standard input if omitted")
    ] = None,
    config_file: t.Annotated[t.Optional[str], typer.Option("--config")] = None,
    sweep_order: t.Annotated[
        t.Optional[SweepOrder], typer.Option("--sweep-order")
    ] = None,
    double_buffer: t.Annotated[
        t.Optional[bool], typer.Option("--double-buffer/--in-place")
    ] = None,
    report_file: t.Annotated[t.Optional[str], typer.Option("--report")] = None,
    debug: t.Annotated[bool, typer.Option("--debug")] = False,
    verbose: t.Annotated[bool, typer.Option("--verbose")] = False,
):
    config = solve_config_from_yaml(config_file) if config_file else SolveConfigModel()
    config = merge_overrides(
        config,
        sweep_order=sweep_order,
        double_buffer=double_buffer,
        print_logs=True if verbose else None,
    )

    try:
        if map_file is None:
            ingested = parser.parse_grid_stream(sys.stdin)
        else:
            ingested = parser.parse_grid_file(map_file)
    except GridFormatError as e:
        typer.echo(f"Invalid map: {e}", err=True)
        raise typer.Exit(code=1)

    result = solve_ingested(ingested, config=config)

    if debug:
        typer.echo(render.render_text(result.grid), err=True)
    typer.echo(render.render_text(result.grid, answer=True))

    if report_file:
        with open(report_file, "w") as f:
            f.write(result.report.model_dump_json(indent=4))


if __name__ == "__main__":
    app()
