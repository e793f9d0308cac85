"""
Render sinks for draw commands.
"""

import curses
from typing import Iterable

from ..domain.commands import DrawCell, DrawScore
from ..domain.constants import BODY, EMPTY, FOOD


# Colour pair numbers, registered by services.terminal
FOOD_COLOR = 1
SNAKE_COLOR = 2
SCORE_COLOR = 3
BORDER_COLOR = 4

SNAKE_CHAR = "O"
FOOD_CHAR = "*"
EMPTY_CHAR = " "

SCORE_LABEL = "Points: "


class Renderer:
    """
    Base class for anything that can show the game.

    Subclasses implement draw_cell/draw_score; apply() dispatches a batch of
    commands from the engine.
    """

    def draw_cell(self, row: int, col: int, cell: str) -> None:
        raise NotImplementedError

    def draw_score(self, score: int) -> None:
        raise NotImplementedError

    def refresh(self) -> None:
        pass

    def apply(self, commands: Iterable) -> None:
        for command in commands:
            if isinstance(command, DrawCell):
                self.draw_cell(command.row, command.col, command.cell)
            elif isinstance(command, DrawScore):
                self.draw_score(command.score)
            else:
                raise TypeError(f"Unknown draw command {command!r}")


class CursesRenderer(Renderer):
    """
    Draws into the bordered field window and the score window.

    Grid cell (row, col) lives at (row + 1, col + 1) inside the field border.
    """

    GLYPHS = {
        EMPTY: (EMPTY_CHAR, 0),
        BODY: (SNAKE_CHAR, SNAKE_COLOR),
        FOOD: (FOOD_CHAR, FOOD_COLOR),
    }

    def __init__(self, field, score, use_color: bool = True):
        self.field = field
        self.score = score
        self.use_color = use_color

    def _attr(self, color: int) -> int:
        if not self.use_color or color == 0:
            return curses.A_NORMAL
        return curses.color_pair(color)

    def draw_cell(self, row: int, col: int, cell: str) -> None:
        char, color = self.GLYPHS[cell]
        self.field.addstr(row + 1, col + 1, char, self._attr(color))

    def draw_score(self, score: int) -> None:
        self.score.addstr(1, 1, f"{SCORE_LABEL}{score}", self._attr(SCORE_COLOR) | curses.A_BOLD)
        self.score.noutrefresh()

    def refresh(self) -> None:
        self.field.noutrefresh()
        curses.doupdate()
