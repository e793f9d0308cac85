"""
Keyboard player - reads arrow keys from a curses window.
"""

import curses
from typing import Dict, Optional

from ..domain.constants import UP, DOWN, LEFT, RIGHT, QUIT
from ..domain.game_state import GameState
from .base import Player


def default_key_map() -> Dict[int, str]:
    return {
        curses.KEY_UP: UP,
        curses.KEY_DOWN: DOWN,
        curses.KEY_LEFT: LEFT,
        curses.KEY_RIGHT: RIGHT,
        curses.KEY_F2: QUIT,
        ord('q'): QUIT,
    }


class KeyboardPlayer(Player):
    """
    Polls one key per tick.

    The window's input timeout (see services.terminal) bounds the wait, so
    getch() returning -1 just means no key was pressed this tick. With an
    autopilot, ticks without a mapped key are handed to it instead.
    """

    def __init__(self, window, key_map: Optional[Dict[int, str]] = None, autopilot: Optional[Player] = None):
        self.window = window
        self.key_map = key_map if key_map is not None else default_key_map()
        self.autopilot = autopilot

    def get_move(self, game_state: GameState) -> Optional[str]:
        key = self.window.getch()
        move = self.key_map.get(key) if key != -1 else None
        if move is None and self.autopilot is not None:
            return self.autopilot.get_move(game_state)
        return move
