"""
Terminal services: the curses screen and render sinks.
"""

from .renderer import Renderer, CursesRenderer
from .terminal import TerminalScreen, terminal_screen, required_size

__all__ = [
    'Renderer',
    'CursesRenderer',
    'TerminalScreen',
    'terminal_screen',
    'required_size',
]
