"""
Scripted player - replays a fixed list of moves.
"""

from typing import Iterable, Optional

from ..domain.constants import QUIT
from ..domain.game_state import GameState
from .base import Player


class ScriptedPlayer(Player):
    """
    Returns the given moves in order, one per tick.

    Once the script runs out it keeps returning None, or QUIT when
    `quit_when_done` is set so a loop driven by it always terminates.
    """

    def __init__(self, moves: Iterable[Optional[str]], quit_when_done: bool = False):
        self.moves = list(moves)
        self.quit_when_done = quit_when_done
        self.position = 0

    def get_move(self, game_state: GameState) -> Optional[str]:
        if self.position >= len(self.moves):
            return QUIT if self.quit_when_done else None
        move = self.moves[self.position]
        self.position += 1
        return move
