import typing as t

from swarmgrid.exceptions import GridFormatError
from swarmgrid.grid.state_grid import StateGrid
from swarmgrid.grid.types import INPUT_SYMBOLS, GridCell


class IngestedGrid:
    def __init__(
        self, *, grid: StateGrid, targets: t.List[GridCell], needs_propagation: bool
    ):
        self.grid = grid
        self.targets = targets
        """Physical coordinates of every building, in input order"""
        self.needs_propagation = needs_propagation
        """Whether some free cell could not be resolved while reading the map"""


def parse_header(line: str | None) -> t.Tuple[int, int]:
    if line is None:
        raise GridFormatError(1, "missing 'W H' header")
    fields = line.split()
    if len(fields) != 2:
        raise GridFormatError(1, f"expected 'W H' header, got {line.strip()!r}")
    try:
        width, height = int(fields[0]), int(fields[1])
    except ValueError:
        raise GridFormatError(1, f"non-integer grid dimensions {line.strip()!r}")
    if width < 0 or height < 0:
        raise GridFormatError(1, f"negative grid dimensions {width}x{height}")
    return width, height


def validate_row(row: str, width: int, line_number: int):
    if len(row) != width:
        raise GridFormatError(
            line_number, f"expected {width} symbols, got {len(row)}"
        )
    for column, symbol in enumerate(row):
        if symbol not in INPUT_SYMBOLS:
            raise GridFormatError(
                line_number,
                f"unrecognized symbol {symbol!r} at column {column + 1}",
            )


def parse_grid(lines: t.Iterable[str]) -> IngestedGrid:
    """Reads a map given as a ``"W H"`` header followed by ``H`` rows of ``W`` symbols.

    Each row is checked in full before any of its cells reaches the grid. Free cells
    are classified as they are read, and buildings are collected along the way so
    placement does not need another scan.
    """
    it = iter(lines)
    width, height = parse_header(next(it, None))
    grid = StateGrid(width, height)
    targets: t.List[GridCell] = []
    needs_propagation = False

    for y in range(1, height + 1):
        line_number = y + 1
        raw = next(it, None)
        if raw is None:
            raise GridFormatError(
                line_number, f"expected {height} rows, got {y - 1}"
            )
        row = raw.rstrip()
        validate_row(row, width, line_number)
        for x, symbol in enumerate(row, start=1):
            if symbol == "B":
                targets.append((x, y))
            needs_propagation |= not grid.add_entry(x, y, symbol)

    for line_number, raw in enumerate(it, start=height + 2):
        if raw.strip():
            raise GridFormatError(
                line_number, f"expected {height} rows, found extra row {raw.strip()!r}"
            )

    return IngestedGrid(
        grid=grid, targets=targets, needs_propagation=needs_propagation
    )


def parse_grid_stream(stream: t.TextIO) -> IngestedGrid:
    return parse_grid(stream)


def parse_grid_file(path: str) -> IngestedGrid:
    with open(path, "r", encoding="utf-8") as f:
        return parse_grid(f)
