"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from ..domain.constants import OPPOSITE, VALID_MOVES
from ..domain.game_state import GameState
from ..engine import step_position
from .base import Player


class RandomPlayer(Player):
    """
    An autopilot that picks a random direction avoiding its own body.

    Used for the demo mode. The board wraps, so there are no walls to avoid.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_move(self, game_state: GameState) -> str:
        snake_positions = game_state.snake_positions
        current = game_state.head_direction

        # The tail cell counts as blocked: it is only freed after the head moves
        occupied = set(snake_positions)

        valid_moves: List[str] = []
        for move in sorted(VALID_MOVES):
            if move == OPPOSITE[current]:
                continue
            target = step_position(game_state.head, move, game_state.rows, game_state.cols)
            if target in occupied:
                continue
            valid_moves.append(move)

        # If no valid moves, keep going (we'll die anyway)
        if not valid_moves:
            return current

        return self.rng.choice(valid_moves)
