"""
Terminal screen setup and teardown.

Provides a context manager that owns the curses session and handles:
- Checking the terminal is large enough for the field
- Building the bordered field and score windows
- Restoring the terminal on every exit path
"""

import curses
import logging
import random
import time
from contextlib import contextmanager
from typing import Generator

from ..errors import DisplayTooSmallError
from .renderer import BORDER_COLOR, FOOD_COLOR, SCORE_COLOR, SCORE_LABEL, SNAKE_COLOR

logger = logging.getLogger(__name__)

# Rows below the field: score window (4) plus breathing room
SCORE_ROWS = 4
EXTRA_ROWS = SCORE_ROWS + 2
EXTRA_COLS = 2

HELP_TEXT = "F2 anytime to quit. Arrow keys to move."


def required_size(rows: int, cols: int):
    """Terminal (rows, cols) needed to show a rows x cols field."""
    return rows + EXTRA_ROWS, cols + EXTRA_COLS


class TerminalScreen:
    """
    The curses windows used by one game session.

    Attributes:
        stdscr: the full terminal
        field: bordered window holding the grid
        score: bordered window at the bottom with points and help
        use_color: whether the terminal supports colour pairs
    """

    def __init__(self, stdscr, rows: int, cols: int, tick_ms: int):
        self.stdscr = stdscr
        self.rows = rows
        self.cols = cols
        self.total_rows, self.total_cols = stdscr.getmaxyx()

        need_rows, need_cols = required_size(rows, cols)
        if self.total_rows < need_rows or self.total_cols < need_cols:
            raise DisplayTooSmallError(need_rows, need_cols, self.total_rows, self.total_cols)

        self.use_color = curses.has_colors()
        if self.use_color:
            curses.start_color()
            curses.init_pair(FOOD_COLOR, curses.COLOR_RED, curses.COLOR_BLACK)
            curses.init_pair(SNAKE_COLOR, curses.COLOR_GREEN, curses.COLOR_BLACK)
            curses.init_pair(SCORE_COLOR, curses.COLOR_YELLOW, curses.COLOR_BLACK)
            curses.init_pair(BORDER_COLOR, curses.COLOR_CYAN, curses.COLOR_BLACK)

        # Field centered in the space above the score window
        self.field = stdscr.subwin(
            rows + 2,
            cols + 2,
            (self.total_rows - EXTRA_ROWS - rows) // 2,
            (self.total_cols - cols - 2) // 2,
        )
        self.score = stdscr.subwin(SCORE_ROWS, self.total_cols, self.total_rows - SCORE_ROWS, 0)

        self.field.keypad(True)
        self.field.timeout(tick_ms)
        self._draw_frame()

    def _color(self, pair: int) -> int:
        return curses.color_pair(pair) if self.use_color else curses.A_NORMAL

    def _draw_frame(self) -> None:
        self.field.attron(self._color(BORDER_COLOR))
        self.field.border('|', '|', '-', '-', '+', '+', '+', '+')
        self.field.attroff(self._color(BORDER_COLOR))
        self.score.attron(self._color(SCORE_COLOR))
        self.score.border('|', '|', '-', '-', '+', '+', '+', '+')

        self.score.addstr(2, 1, HELP_TEXT)
        self.score.addstr(1, 1, f"{SCORE_LABEL}0")
        self.score.attroff(self._color(SCORE_COLOR))

        self.field.addstr(0, 0, "Snake", self._color(BORDER_COLOR) | curses.A_BOLD)
        self.score.addstr(0, 0, "Score", self._color(SCORE_COLOR) | curses.A_BOLD)
        self.score.refresh()
        self.field.refresh()

    def farewell(self, message: str, seconds: float = 1.0) -> None:
        """Clear the game windows and show `message` centered for a moment."""
        self.field.clear()
        self.score.clear()
        self.stdscr.clear()
        attr = curses.A_BOLD
        if self.use_color:
            attr |= curses.color_pair(random.randint(1, 4))
        col = max(0, (self.total_cols - len(message)) // 2)
        self.stdscr.addstr(self.total_rows // 2, col, message[:self.total_cols - 1], attr)
        self.stdscr.refresh()
        time.sleep(seconds)


@contextmanager
def terminal_screen(rows: int, cols: int, tick_ms: int) -> Generator[TerminalScreen, None, None]:
    """
    Context manager for the curses session.

    Yields:
        A TerminalScreen ready for drawing.

    Raises:
        DisplayTooSmallError: the terminal cannot fit the field. The terminal
            is already restored when this propagates.

    Example:
        with terminal_screen(30, 120, 30) as screen:
            renderer = CursesRenderer(screen.field, screen.score)
    """
    stdscr = curses.initscr()
    try:
        curses.raw()
        curses.noecho()
        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Terminal does not support hiding the cursor")
        yield TerminalScreen(stdscr, rows, cols, tick_ms)
    finally:
        curses.noraw()
        curses.echo()
        curses.endwin()
