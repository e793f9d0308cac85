"""
Movement engine: direction propagation, head turns and the per-tick move.

These functions mutate a Snake and its Grid but know nothing about score or
session status; SnakeGame decides what a MoveResult means for the game.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .domain.constants import BODY, DELTAS, EMPTY, FOOD, OPPOSITE, VALID_MOVES
from .domain.snake import Snake
from .errors import ChainCapacityError

logger = logging.getLogger(__name__)


@dataclass
class MoveResult:
    """Outcome of one call to advance()."""
    collided: bool = False
    ate: bool = False
    grew: bool = False
    new_head: Optional[Tuple[int, int]] = None
    vacated: Optional[Tuple[int, int]] = None  # cell freed by the tail, if any


def step_position(position: Tuple[int, int], direction: str, rows: int, cols: int) -> Tuple[int, int]:
    """Move one cell in `direction`, wrapping each axis around the torus."""
    d_row, d_col = DELTAS[direction]
    row, col = position
    return (row + d_row) % rows, (col + d_col) % cols


def propagate_directions(snake: Snake) -> None:
    """
    Shift every non-head segment onto its predecessor's direction.

    Walks tail to head so each segment reads a value not yet overwritten
    this update.
    """
    for segment in snake.segments_reversed():
        if segment is snake.head():
            break
        segment.direction = snake.predecessor(segment).direction


def turn_head(snake: Snake, direction: Optional[str]) -> bool:
    """
    Point the head in `direction` unless it would reverse into the body.

    Returns True when the head direction changed.
    """
    if direction not in VALID_MOVES:
        return False
    head = snake.head()
    if direction == head.direction or direction == OPPOSITE[head.direction]:
        return False
    head.direction = direction
    return True


def advance(snake: Snake) -> MoveResult:
    """
    Move every segment one cell along its own direction.

    The head's destination is checked against the board as it stands before
    anything moves, so running into the cell the tail is about to leave
    still counts as a collision. On collision nothing is mutated.
    """
    grid = snake.grid
    head = snake.head()
    destination = step_position(head.position, head.direction, grid.rows, grid.cols)

    target = grid.get(destination)
    if target == BODY:
        return MoveResult(collided=True, new_head=destination)
    eat = target == FOOD

    tail = snake.tail()
    old_tail_position = tail.position
    old_tail_direction = tail.direction

    for segment in snake.segments():
        segment.position = step_position(segment.position, segment.direction, grid.rows, grid.cols)

    # Every segment lands where its predecessor was, so only the ends change.
    grid.set(old_tail_position, EMPTY)
    grid.set(destination, BODY)

    result = MoveResult(ate=eat, new_head=destination)
    if eat:
        try:
            snake.grow_at(old_tail_position, old_tail_direction)
            result.grew = True
        except ChainCapacityError as e:
            logger.warning(f"Could not grow snake, skipping growth this tick: {e}")
            result.vacated = old_tail_position
    else:
        result.vacated = old_tail_position

    return result
