"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import List, Optional, Tuple


class GameState:
    """
    A snapshot of the game at a specific tick.

    Attributes:
        tick_number: how many ticks have been processed
        snake_positions: list of (row, col) from head to tail
        snake_directions: direction of each segment, head first
        food: (row, col) of the food, or None when the board is full
        score: points so far
        status: running / lost / quit
        end_reason: self_collision / board_full when lost, else None
        rows, cols: board dimensions
    """

    def __init__(
        self,
        tick_number: int,
        snake_positions: List[Tuple[int, int]],
        snake_directions: List[str],
        food: Optional[Tuple[int, int]],
        score: int,
        status: str,
        end_reason: Optional[str],
        rows: int,
        cols: int
    ):
        self.tick_number = tick_number
        self.snake_positions = snake_positions
        self.snake_directions = snake_directions
        self.food = food
        self.score = score
        self.status = status
        self.end_reason = end_reason
        self.rows = rows
        self.cols = cols

    @property
    def head(self) -> Tuple[int, int]:
        return self.snake_positions[0]

    @property
    def head_direction(self) -> str:
        return self.snake_directions[0]

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        * = food
        O = snake body
        @ = snake head
        Row 0 is printed first, matching the terminal layout.
        """
        board = [['.' for _ in range(self.cols)] for _ in range(self.rows)]

        if self.food is not None:
            food_row, food_col = self.food
            board[food_row][food_col] = '*'

        for pos_idx, (row, col) in enumerate(self.snake_positions):
            board[row][col] = '@' if pos_idx == 0 else 'O'

        return "\n".join("".join(line) for line in board)

    def __repr__(self):
        return (
            f"<GameState tick={self.tick_number}, status={self.status}, "
            f"length={len(self.snake_positions)}, food={self.food}, score={self.score}>"
        )
