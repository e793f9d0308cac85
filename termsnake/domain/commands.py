"""
Draw commands emitted by the engine for a render sink.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DrawCell:
    """Set the glyph at (row, col) to match `cell` (EMPTY, BODY or FOOD)."""
    row: int
    col: int
    cell: str


@dataclass(frozen=True)
class DrawScore:
    """Update the score display."""
    score: int
