"""
OpenSpace - the interior cells the snake does not occupy.

Food is always placed on one of these cells.
"""

import random
from typing import Iterable, Iterator, Set

from .geometry import Point


class OpenSpace:
    def __init__(self, cells: Iterable[Point] = ()):
        self._cells: Set[Point] = set(cells)

    @classmethod
    def for_grid(cls, height: int, width: int, excluded: Iterable[Point] = ()) -> "OpenSpace":
        """Every interior cell of a height x width grid except those in excluded."""
        space = cls(
            Point(row, col)
            for row in range(1, height - 1)
            for col in range(1, width - 1)
        )
        for point in excluded:
            space.remove(point)
        return space

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, point: object) -> bool:
        return point in self._cells

    def __iter__(self) -> Iterator[Point]:
        return iter(self._cells)

    def is_empty(self) -> bool:
        return not self._cells

    def remove(self, point: Point) -> None:
        self._cells.discard(point)

    def insert(self, point: Point) -> None:
        self._cells.add(point)

    def pick_random(self, rng: random.Random) -> Point:
        """
        Pick a cell uniformly at random.

        Cells are enumerated in (row, col) order before indexing so a seeded
        rng always yields the same cell for the same board.

        Raises:
            ValueError: if there are no open cells.
        """
        if not self._cells:
            raise ValueError("No open cells left to place food on.")
        ordered = sorted(self._cells)
        return ordered[rng.randrange(len(ordered))]
