"""
Food placement.
"""

import logging
import random
from typing import Optional, Tuple

from .domain.constants import FOOD
from .domain.grid import Grid

logger = logging.getLogger(__name__)


def place_food(grid: Grid, rng: Optional[random.Random] = None) -> Optional[Tuple[int, int]]:
    """
    Put food on a uniformly random empty cell.

    Free cells are enumerated from the grid, so every empty cell has the same
    chance regardless of where the body lies.

    Returns:
        The chosen (row, col), or None if the board has no empty cell.
    """
    rng = rng or random
    free = grid.free_cells()
    if not free:
        logger.debug("No free cell left for food")
        return None

    cell = free[rng.randrange(len(free))]
    grid.set(cell, FOOD)
    logger.debug(f"Placed food at {cell} ({len(free)} free cells)")
    return cell
