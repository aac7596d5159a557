import sys
import typing as t
from datetime import datetime

import swarmgrid.config as config

# Constants
TAXI_NEIGHBORHOOD = ((0, -1), (0, 1), (-1, 0), (1, 0))
CHESSBOARD_NEIGHBORHOOD = (
    (-1, -1),
    (0, -1),
    (1, -1),
    (-1, 0),
    (1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
)


def timestamp_string():
    return datetime.now().strftime("%Y-%m-%d-%Hh%Mm%Ss_%f")


class SwarmgridLog:
    def __init__(self, message: str, step: int, timestamp: str | None = None):
        self.message = message
        self.step = step
        self.timestamp = timestamp or timestamp_string()

    def __str__(self):
        return "At step {}: '{}'".format(self.step, self.message)


class SwarmgridLogger(list[SwarmgridLog]):
    def __init__(self, printout: bool | None = None, stream: t.TextIO | None = None):
        super(SwarmgridLogger, self).__init__()
        self.printout = config.PRINT_LOGS if printout is None else printout
        self.stream = stream

    def append(self, log: SwarmgridLog):
        super(SwarmgridLogger, self).append(log)
        if self.printout:
            # stdout is reserved for the answer
            print(log, file=self.stream or sys.stderr)

    def messages(self) -> t.List[str]:
        return [log.message for log in self]
