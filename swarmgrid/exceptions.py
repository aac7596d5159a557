class GridFormatError(Exception):
    """Raised at the ingestion boundary when the textual grid is malformed."""

    def __init__(self, line_number: int, message: str):
        super().__init__(f"line {line_number}: {message}")
        self.line_number = line_number
        self.message = message


class GridConsistencyError(Exception):
    """An internal invariant of the padded grid was violated."""

    pass
