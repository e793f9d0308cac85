"""
Exceptions raised by termsnake.

Losing the game (self-collision, full board) is not an error and never
raises; these cover setup problems and the one recoverable engine fault.
"""


class TermSnakeError(Exception):
    """Base class for all termsnake errors."""


class ConfigError(TermSnakeError):
    """A setting from the environment or command line is invalid."""


class SegmentOverlapError(TermSnakeError):
    """The starting body would occupy a cell twice."""


class ChainCapacityError(TermSnakeError):
    """The segment arena has no room for another segment."""


class DisplayTooSmallError(TermSnakeError):
    """The terminal cannot fit the configured field and score panel."""

    def __init__(self, required_rows: int, required_cols: int, actual_rows: int, actual_cols: int):
        self.required_rows = required_rows
        self.required_cols = required_cols
        self.actual_rows = actual_rows
        self.actual_cols = actual_cols
        super().__init__(
            f"This screen has {actual_rows} rows and {actual_cols} columns. Enlarge it.\n"
            f"You need at least {required_rows} rows and {required_cols} columns."
        )
