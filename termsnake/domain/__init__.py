"""
Domain entities for the termsnake game engine.

This module contains the core game entities that are independent of
terminal concerns (curses windows, key codes, etc.).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, QUIT,
    EMPTY, BODY, FOOD,
    RUNNING, LOST, QUIT_REQUESTED,
    SELF_COLLISION, BOARD_FULL,
)
from .grid import Grid
from .snake import Segment, Snake
from .commands import DrawCell, DrawScore
from .game_state import GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'QUIT',
    'EMPTY', 'BODY', 'FOOD',
    'RUNNING', 'LOST', 'QUIT_REQUESTED',
    'SELF_COLLISION', 'BOARD_FULL',
    'Grid',
    'Segment',
    'Snake',
    'DrawCell',
    'DrawScore',
    'GameState',
]
