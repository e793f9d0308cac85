"""
Base player interface for the game engine.
"""

from typing import Optional

from ..domain.game_state import GameState


class Player:
    """
    Base class/interface for input sources.

    A player is polled once per tick and answers with at most one move.
    """

    def get_move(self, game_state: GameState) -> Optional[str]:
        """
        Return the input for this tick given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of "UP", "DOWN", "LEFT", "RIGHT", "QUIT", or None to keep going
        """
        raise NotImplementedError
