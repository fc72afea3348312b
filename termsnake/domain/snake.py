"""
Snake entity for the game engine.
"""

from collections import deque
from dataclasses import dataclass
from typing import Iterable, List

from .constants import Direction
from .geometry import Point, advance

GLYPHS = {
    Direction.UP: "^",
    Direction.DOWN: "v",
    Direction.LEFT: "<",
    Direction.RIGHT: ">",
}


@dataclass(frozen=True)
class BodySegment:
    """One cell of the snake and the heading it had when it was placed."""

    pos: Point
    heading: Direction

    @classmethod
    def at(cls, row: int, col: int, heading: Direction) -> "BodySegment":
        return cls(Point(row, col), heading)

    def __str__(self) -> str:
        return GLYPHS[self.heading]


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        body: deque of BodySegment from head at index 0 to tail at the end
    """

    def __init__(self, segments: Iterable[BodySegment]):
        self.body = deque(segments)
        if not self.body:
            raise ValueError("A snake needs at least one segment.")

    def __len__(self) -> int:
        return len(self.body)

    @property
    def head(self) -> BodySegment:
        """Return the head segment (first element)."""
        return self.body[0]

    @property
    def tail(self) -> BodySegment:
        return self.body[-1]

    @property
    def heading(self) -> Direction:
        return self.head.heading

    def positions(self) -> List[Point]:
        return [seg.pos for seg in self.body]

    def advance_head(self, direction: Direction) -> None:
        # Bounds and collisions are the engine's job
        self.body.appendleft(BodySegment(advance(self.head.pos, direction), direction))

    def retract_tail(self) -> BodySegment:
        return self.body.pop()

    def grow(self, segment: BodySegment) -> None:
        self.body.append(segment)

    def move(self, direction: Direction) -> None:
        self.advance_head(direction)
        self.retract_tail()
