"""
Session state and the game loop.
"""

import logging
import random
import time
import uuid
from typing import List, Optional, Tuple, Union

from .domain.commands import DrawCell, DrawScore
from .domain.constants import (
    BODY, EMPTY, FOOD, QUIT, RIGHT,
    RUNNING, LOST, QUIT_REQUESTED,
    SELF_COLLISION, BOARD_FULL,
    ROWS, COLS, STARTING_SIZE, FOOD_REWARD,
)
from .domain.game_state import GameState
from .domain.grid import Grid
from .domain.snake import Snake
from .engine import advance, propagate_directions, turn_head
from .food import place_food

logger = logging.getLogger(__name__)

Command = Union[DrawCell, DrawScore]


class SnakeGame:
    """
    Manages:
      - Grid (rows, cols)
      - The snake
      - The food cell
      - Score
      - Ticks
      - Running / lost / quit status
    """

    def __init__(
        self,
        rows: int = ROWS,
        cols: int = COLS,
        starting_length: int = STARTING_SIZE,
        food_reward: int = FOOD_REWARD,
        rng: Optional[random.Random] = None,
        session_id: str = None
    ):
        self.rows = rows
        self.cols = cols
        self.starting_length = starting_length
        self.food_reward = food_reward
        self.rng = rng or random.Random()

        self.grid = Grid(rows, cols)
        self.snake = Snake(self.grid)
        self.food: Optional[Tuple[int, int]] = None

        self.score = 0
        self.foods_eaten = 0
        self.tick_number = 0
        self.status = RUNNING
        self.end_reason: Optional[str] = None
        self.end_tick: Optional[int] = None
        self.start_time = time.time()
        self.started = False

        if session_id is None:
            self.session_id = str(uuid.uuid4())
        else:
            self.session_id = session_id

    @property
    def game_over(self) -> bool:
        return self.status != RUNNING

    @property
    def center(self) -> Tuple[int, int]:
        return self.rows // 2, self.cols // 2

    def start(self) -> List[Command]:
        """
        Lay out the starting snake, place the first food and return the
        commands that draw the opening frame.

        Raises:
            SegmentOverlapError: the starting length does not fit the grid
        """
        if self.started:
            raise RuntimeError(f"Session {self.session_id} has already started.")
        self.snake.initialize(self.center, self.starting_length, RIGHT)
        self.started = True
        logger.info(
            f"Session {self.session_id} started on a {self.rows}x{self.cols} grid "
            f"with a snake of length {self.starting_length}"
        )

        commands: List[Command] = [
            DrawCell(row, col, BODY) for row, col in self.snake.positions()
        ]
        commands.extend(self._spawn_food())
        commands.append(DrawScore(self.score))
        return commands

    def set_food(self, position: Tuple[int, int]) -> List[Command]:
        """
        Put the food on a specific cell, replacing any current food.

        Raises:
            RuntimeError: the session has not started or is already over
            ValueError: the cell is out of bounds or part of the snake
        """
        if not self.started:
            raise RuntimeError("Call start() before set_food().")
        if self.game_over:
            raise RuntimeError(f"Session {self.session_id} is over, cannot place food.")
        row, col = position
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise ValueError(f"Food out of bounds at {position}.")
        if self.grid.get(position) == BODY:
            raise ValueError(f"Cannot put food on the snake at {position}.")

        commands: List[Command] = []
        if self.food is not None and self.food != position:
            self.grid.set(self.food, EMPTY)
            commands.append(DrawCell(self.food[0], self.food[1], EMPTY))
        self.grid.set(position, FOOD)
        self.food = position
        commands.append(DrawCell(row, col, FOOD))
        logger.debug(f"Food set to {position}")
        return commands

    def _spawn_food(self) -> List[Command]:
        self.food = place_food(self.grid, self.rng)
        if self.food is None:
            self.end_game(LOST, BOARD_FULL)
            return []
        return [DrawCell(self.food[0], self.food[1], FOOD)]

    def tick(self, move: Optional[str] = None) -> List[Command]:
        """
        Execute one tick:
          1) If game is over, do nothing
          2) Quit if asked to
          3) Propagate directions down the body, then turn the head
          4) Move, handling collision, food and growth
        Returns the draw commands for everything that changed.
        """
        if self.game_over:
            logger.debug(f"Session {self.session_id} is already over, ignoring tick")
            return []
        if not self.started:
            raise RuntimeError("Call start() before tick().")

        if move == QUIT:
            self.end_game(QUIT_REQUESTED)
            return []

        propagate_directions(self.snake)
        turn_head(self.snake, move)
        result = advance(self.snake)

        if result.collided:
            self.end_game(LOST, SELF_COLLISION)
            return []

        self.tick_number += 1
        commands: List[Command] = []
        if result.vacated is not None:
            commands.append(DrawCell(result.vacated[0], result.vacated[1], EMPTY))
        commands.append(DrawCell(result.new_head[0], result.new_head[1], BODY))

        if result.ate:
            self.score += self.food_reward
            self.foods_eaten += 1
            logger.debug(f"Ate food at {result.new_head}, score is now {self.score}")
            commands.extend(self._spawn_food())
            commands.append(DrawScore(self.score))

        return commands

    def end_game(self, status: str, reason: Optional[str] = None) -> None:
        """Single transition out of RUNNING."""
        if self.game_over:
            return
        self.status = status
        self.end_reason = reason
        self.end_tick = self.tick_number
        if status == LOST:
            logger.info(
                f"Session {self.session_id} lost ({reason}) at tick {self.tick_number} "
                f"with {self.score} points"
            )
        else:
            logger.info(f"Session {self.session_id} quit at tick {self.tick_number} with {self.score} points")
        logger.debug("Final board:\n" + self.get_current_state().print_board())

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            tick_number=self.tick_number,
            snake_positions=self.snake.positions(),
            snake_directions=self.snake.directions(),
            food=self.food,
            score=self.score,
            status=self.status,
            end_reason=self.end_reason,
            rows=self.rows,
            cols=self.cols
        )

    def __repr__(self):
        return f"<SnakeGame {self.session_id} status={self.status} score={self.score}>"


def run_game(game: SnakeGame, player, renderer) -> int:
    """
    Drive a session until it ends.

    Each tick asks the player for at most one move; a keyboard player's
    bounded wait for input is what paces the game.

    Returns:
        The final score.
    """
    if not game.started:
        renderer.apply(game.start())
    renderer.refresh()

    while not game.game_over:
        move = player.get_move(game.get_current_state())
        renderer.apply(game.tick(move))
        renderer.refresh()

    return game.score
