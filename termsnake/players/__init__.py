"""
Player implementations for termsnake.

This module contains the input sources that steer the snake: the
keyboard for real games, a scripted list of moves, and a random autopilot
for the demo mode.
"""

from .base import Player
from .keyboard_player import KeyboardPlayer
from .random_player import RandomPlayer
from .scripted_player import ScriptedPlayer

__all__ = [
    'Player',
    'KeyboardPlayer',
    'RandomPlayer',
    'ScriptedPlayer',
]
