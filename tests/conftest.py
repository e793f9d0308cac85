"""
Shared fixtures.
"""

import curses
from unittest.mock import MagicMock

import pytest


@pytest.fixture
def fake_curses(monkeypatch):
    """Replace the curses calls terminal_screen and CursesRenderer make."""
    stdscr = MagicMock()
    fakes = {
        "initscr": MagicMock(return_value=stdscr),
        "raw": MagicMock(),
        "noraw": MagicMock(),
        "noecho": MagicMock(),
        "echo": MagicMock(),
        "curs_set": MagicMock(),
        "endwin": MagicMock(),
        "doupdate": MagicMock(),
        "has_colors": MagicMock(return_value=False),
    }
    for name, fake in fakes.items():
        monkeypatch.setattr(curses, name, fake)
    fakes["stdscr"] = stdscr
    return fakes
