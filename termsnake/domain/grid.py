"""
Grid entity - the occupancy map of the playing field.
"""

from typing import List, Tuple

from .constants import EMPTY, CELL_STATES


class Grid:
    """
    Fixed-size occupancy map.

    Attributes:
        rows, cols: field dimensions, fixed for the session
        cells: rows x cols list of EMPTY / BODY / FOOD

    Callers wrap coordinates before calling; the grid itself only rejects
    positions that are out of range.
    """

    def __init__(self, rows: int, cols: int):
        if rows < 1 or cols < 1:
            raise ValueError(f"Grid needs at least one cell, got {rows}x{cols}.")
        self.rows = rows
        self.cols = cols
        self.cells: List[List[str]] = [[EMPTY for _ in range(cols)] for _ in range(rows)]
        self._free = rows * cols

    @property
    def size(self) -> int:
        return self.rows * self.cols

    def _check(self, position: Tuple[int, int]) -> Tuple[int, int]:
        row, col = position
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise ValueError(f"Position {position} is outside the {self.rows}x{self.cols} grid.")
        return row, col

    def get(self, position: Tuple[int, int]) -> str:
        row, col = self._check(position)
        return self.cells[row][col]

    def set(self, position: Tuple[int, int], state: str) -> None:
        if state not in CELL_STATES:
            raise ValueError(f"Unknown cell state {state!r}.")
        row, col = self._check(position)
        previous = self.cells[row][col]
        if previous == state:
            return
        if previous == EMPTY:
            self._free -= 1
        elif state == EMPTY:
            self._free += 1
        self.cells[row][col] = state

    def count_free(self) -> int:
        """Number of EMPTY cells (food does not count as free)."""
        return self._free

    def free_cells(self) -> List[Tuple[int, int]]:
        """All EMPTY cells in row-major order."""
        return [
            (row, col)
            for row in range(self.rows)
            for col in range(self.cols)
            if self.cells[row][col] == EMPTY
        ]

    def __repr__(self):
        return f"<Grid {self.rows}x{self.cols}, free={self._free}>"
