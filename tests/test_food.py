"""
Tests for food placement.
"""

import os
import random
import sys
from collections import Counter

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from termsnake.domain.constants import BODY, EMPTY, FOOD  # noqa: E402
from termsnake.domain.grid import Grid  # noqa: E402
from termsnake.food import place_food  # noqa: E402


class TestPlaceFood:
    """Tests for place_food."""

    def test_marks_chosen_cell(self):
        grid = Grid(3, 3)
        cell = place_food(grid, random.Random(7))
        assert cell is not None
        assert grid.get(cell) == FOOD
        assert grid.count_free() == 8

    def test_never_lands_on_body(self):
        for seed in range(200):
            rng = random.Random(seed)
            grid = Grid(6, 6)
            for cell in rng.sample([(r, c) for r in range(6) for c in range(6)], 30):
                grid.set(cell, BODY)

            food = place_food(grid, rng)

            assert food is not None
            assert grid.get(food) == FOOD

    def test_only_free_cell_is_chosen(self):
        grid = Grid(1, 4)
        for col in range(3):
            grid.set((0, col), BODY)
        assert place_food(grid, random.Random(0)) == (0, 3)

    def test_full_board_returns_none(self):
        grid = Grid(2, 2)
        for cell in [(0, 0), (0, 1), (1, 0), (1, 1)]:
            grid.set(cell, BODY)
        assert place_food(grid, random.Random(0)) is None
        assert grid.count_free() == 0

    def test_uniform_over_free_cells(self):
        """Free cells are equally likely no matter how the body is arranged."""
        grid = Grid(1, 6)
        for col in (0, 1, 3):
            grid.set((0, col), BODY)
        rng = random.Random(1234)

        counts = Counter()
        for _ in range(6000):
            cell = place_food(grid, rng)
            counts[cell] += 1
            grid.set(cell, EMPTY)

        assert set(counts) == {(0, 2), (0, 4), (0, 5)}
        for cell, count in counts.items():
            assert 1750 < count < 2250, (cell, count)

    def test_uses_module_random_without_rng(self):
        grid = Grid(2, 2)
        assert place_food(grid) in {(0, 0), (0, 1), (1, 0), (1, 1)}
