"""
Tests for the movement engine: wraparound, propagation, turning, moving.
"""

import logging
import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from termsnake.domain.constants import (  # noqa: E402
    UP, DOWN, LEFT, RIGHT, OPPOSITE, BODY, EMPTY, FOOD,
)
from termsnake.domain.grid import Grid  # noqa: E402
from termsnake.domain.snake import Snake  # noqa: E402
from termsnake.engine import advance, propagate_directions, step_position, turn_head  # noqa: E402


def make_snake(rows=10, cols=10, center=(5, 5), length=3, capacity=None):
    grid = Grid(rows, cols)
    snake = Snake(grid, capacity=capacity)
    snake.initialize(center, length)
    return grid, snake


def tick(snake, move=None):
    """One engine step the way SnakeGame.tick runs it."""
    propagate_directions(snake)
    turn_head(snake, move)
    return advance(snake)


class TestStepPosition:
    """Tests for toroidal movement."""

    def test_up_from_top_row_wraps_to_bottom(self):
        assert step_position((0, 0), UP, 30, 120) == (29, 0)

    def test_down_from_bottom_row_wraps_to_top(self):
        assert step_position((29, 5), DOWN, 30, 120) == (0, 5)

    def test_left_from_first_column_wraps(self):
        assert step_position((3, 0), LEFT, 30, 120) == (3, 119)

    def test_right_from_last_column_wraps(self):
        assert step_position((3, 119), RIGHT, 30, 120) == (3, 0)

    def test_inside_the_board(self):
        assert step_position((10, 10), UP, 30, 120) == (9, 10)
        assert step_position((10, 10), RIGHT, 30, 120) == (10, 11)


class TestTurnHead:
    """Tests for head turns."""

    def test_perpendicular_turn_accepted(self):
        _, snake = make_snake()
        assert turn_head(snake, UP) is True
        assert snake.head().direction == UP

    @pytest.mark.parametrize("direction", [UP, DOWN, LEFT, RIGHT])
    def test_reverse_ignored(self, direction):
        _, snake = make_snake()
        snake.head().direction = direction
        assert turn_head(snake, OPPOSITE[direction]) is False
        assert snake.head().direction == direction

    def test_reverse_after_real_turn_ignored(self):
        _, snake = make_snake()
        tick(snake, UP)
        assert turn_head(snake, DOWN) is False
        assert snake.head().direction == UP

    def test_no_input_keeps_direction(self):
        _, snake = make_snake()
        assert turn_head(snake, None) is False
        assert snake.head().direction == RIGHT

    def test_turn_only_touches_head(self):
        _, snake = make_snake()
        turn_head(snake, DOWN)
        assert snake.directions() == [DOWN, RIGHT, RIGHT]


class TestPropagateDirections:
    """Tests for turns travelling down the body."""

    def test_each_segment_copies_its_predecessor(self):
        _, snake = make_snake(length=4)
        snake.head().direction = UP
        propagate_directions(snake)
        assert snake.directions() == [UP, UP, RIGHT, RIGHT]

    def test_turn_reaches_segment_i_after_i_ticks(self):
        _, snake = make_snake(length=4)

        tick(snake, UP)
        assert snake.directions() == [UP, RIGHT, RIGHT, RIGHT]
        tick(snake)
        assert snake.directions() == [UP, UP, RIGHT, RIGHT]
        tick(snake)
        assert snake.directions() == [UP, UP, UP, RIGHT]
        tick(snake)
        assert snake.directions() == [UP, UP, UP, UP]

    def test_single_segment_unchanged(self):
        _, snake = make_snake(length=1)
        propagate_directions(snake)
        assert snake.directions() == [RIGHT]


class TestAdvance:
    """Tests for the per-tick move."""

    def test_straight_move(self):
        grid, snake = make_snake(length=3)
        result = advance(snake)

        assert snake.positions() == [(5, 6), (5, 5), (5, 4)]
        assert result.new_head == (5, 6)
        assert result.vacated == (5, 3)
        assert result.ate is False
        assert grid.get((5, 6)) == BODY
        assert grid.get((5, 3)) == EMPTY
        assert grid.count_free() == 100 - 3

    def test_body_follows_turn_without_gaps(self):
        _, snake = make_snake(length=4)
        tick(snake, UP)
        assert snake.positions() == [(4, 5), (5, 5), (5, 4), (5, 3)]
        tick(snake, LEFT)
        assert snake.positions() == [(4, 4), (4, 5), (5, 5), (5, 4)]

    def test_head_wraps_through_top_edge(self):
        _, snake = make_snake(rows=30, cols=120, center=(0, 0), length=3)
        tick(snake, UP)
        assert snake.head().position == (29, 0)

    def test_eating_grows_at_old_tail(self):
        grid, snake = make_snake(rows=5, cols=5, center=(2, 2), length=3)
        grid.set((2, 3), FOOD)

        result = advance(snake)

        assert result.ate is True
        assert result.grew is True
        assert result.vacated is None
        assert snake.length() == 4
        # Existing segments moved as usual; the new one sits where the tail was
        assert snake.positions() == [(2, 3), (2, 2), (2, 1), (2, 0)]
        assert grid.get((2, 0)) == BODY
        assert grid.get((2, 3)) == BODY

    def test_self_collision_leaves_board_untouched(self):
        grid, snake = make_snake(length=5)
        tick(snake, UP)
        tick(snake, LEFT)
        before = snake.positions()
        free_before = grid.count_free()

        result = tick(snake, DOWN)

        assert result.collided is True
        assert result.new_head == (5, 4)
        assert snake.positions() == before
        assert grid.count_free() == free_before

    def test_stepping_onto_current_tail_cell_is_collision(self):
        """The tail would move away this tick, but the head still may not enter it."""
        _, snake = make_snake(length=4)
        tick(snake, UP)
        tick(snake, LEFT)
        assert snake.tail().position == (5, 4)

        result = tick(snake, DOWN)

        assert result.collided is True
        assert result.new_head == snake.tail().position

    def test_growth_failure_degrades_to_plain_move(self, caplog):
        grid, snake = make_snake(rows=5, cols=5, center=(2, 2), length=3, capacity=3)
        grid.set((2, 3), FOOD)

        with caplog.at_level(logging.WARNING, logger="termsnake.engine"):
            result = advance(snake)

        assert result.ate is True
        assert result.grew is False
        assert result.vacated == (2, 0)
        assert snake.positions() == [(2, 3), (2, 2), (2, 1)]
        assert grid.get((2, 0)) == EMPTY
        assert "Could not grow snake" in caplog.text
