"""
termsnake - Snake on a wrap-around grid, rendered with curses.
"""

from .game import SnakeGame, run_game

__version__ = "0.1.0"

__all__ = ['SnakeGame', 'run_game', '__version__']
