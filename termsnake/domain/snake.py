"""
Snake entity for the game engine.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .constants import BODY, EMPTY, RIGHT, VALID_MOVES
from .grid import Grid
from ..errors import ChainCapacityError, SegmentOverlapError


@dataclass
class Segment:
    """
    One cell of the body.

    next/previous are arena indices. The head's previous is the tail, the
    tail's next is None.
    """
    position: Tuple[int, int]
    direction: str
    next: Optional[int] = None
    previous: Optional[int] = None


class Snake:
    """
    Represents the snake on the board.

    Segments are stored in an arena sized for the whole grid, so growing
    never needs more room than the board can hold. The head is always
    arena slot 0.

    Attributes:
        grid: the occupancy map this snake marks
        capacity: maximum number of segments
    """

    HEAD = 0

    def __init__(self, grid: Grid, capacity: Optional[int] = None):
        self.grid = grid
        self.capacity = grid.size if capacity is None else capacity
        self._arena: List[Optional[Segment]] = [None] * self.capacity
        self._used = 0

    def initialize(self, center: Tuple[int, int], length: int, direction: str = RIGHT) -> None:
        """
        Lay out `length` segments in a row, extending leftward from `center`.

        Raises:
            ValueError: length < 1 or unknown direction
            SegmentOverlapError: a segment would land on an occupied cell
        """
        if length < 1:
            raise ValueError(f"Snake length must be at least 1, got {length}.")
        if direction not in VALID_MOVES:
            raise ValueError(f"Unknown direction {direction!r}.")
        if length > self.capacity:
            raise SegmentOverlapError(
                f"A snake of length {length} does not fit in {self.capacity} cells."
            )

        row, col = center
        positions = [(row % self.grid.rows, (col - i) % self.grid.cols) for i in range(length)]
        if len(set(positions)) != length:
            raise SegmentOverlapError(f"Starting body overlaps itself: {positions}.")
        for position in positions:
            if self.grid.get(position) != EMPTY:
                raise SegmentOverlapError(f"Starting cell {position} is already occupied.")

        for index, position in enumerate(positions):
            self._arena[index] = Segment(
                position=position,
                direction=direction,
                next=index + 1 if index + 1 < length else None,
                previous=index - 1 if index > 0 else length - 1,
            )
            self.grid.set(position, BODY)
        self._used = length

    def head(self) -> Segment:
        return self._arena[self.HEAD]

    def tail(self) -> Segment:
        return self._arena[self.head().previous]

    def grow_at(self, position: Tuple[int, int], direction: str) -> Segment:
        """
        Append a segment after the current tail and mark its cell.

        Raises:
            ChainCapacityError: the arena is full; the chain is unchanged
        """
        if self._used >= self.capacity:
            raise ChainCapacityError(f"Snake already holds {self.capacity} segments.")

        head = self.head()
        old_tail_index = head.previous
        new_index = self._used
        self._arena[new_index] = Segment(
            position=position,
            direction=direction,
            next=None,
            previous=old_tail_index,
        )
        self._arena[old_tail_index].next = new_index
        head.previous = new_index
        self._used += 1
        self.grid.set(position, BODY)
        return self._arena[new_index]

    def segments(self) -> Iterator[Segment]:
        """Walk the chain from head to tail."""
        index = self.HEAD if self._used else None
        while index is not None:
            segment = self._arena[index]
            yield segment
            index = segment.next

    def segments_reversed(self) -> Iterator[Segment]:
        """Walk the chain from tail to head."""
        if not self._used:
            return
        index = self.head().previous
        while True:
            segment = self._arena[index]
            yield segment
            if index == self.HEAD:
                break
            index = segment.previous

    def predecessor(self, segment: Segment) -> Segment:
        """The segment one step closer to the head (the head's is the tail)."""
        return self._arena[segment.previous]

    def length(self) -> int:
        count = 0
        for _ in self.segments():
            count += 1
        return count

    def __len__(self):
        return self.length()

    def positions(self) -> List[Tuple[int, int]]:
        return [segment.position for segment in self.segments()]

    def directions(self) -> List[str]:
        return [segment.direction for segment in self.segments()]

    def __repr__(self):
        return f"<Snake length={self.length()}, head={self.head().position if self._used else None}>"
