"""
Grid coordinates and movement.

Rows grow downwards and columns grow to the right, with (0, 0) at the
top-left corner of the terminal. Row 0 and column 0 are border cells.
"""

from typing import NamedTuple

from .constants import Direction


class Point(NamedTuple):
    row: int
    col: int


_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


def is_opposite(a: Direction, b: Direction) -> bool:
    """True when a and b lie on the same axis and point away from each other."""
    return a.opposite is b


def advance(point: Point, direction: Direction) -> Point:
    """
    Return the neighbour of point one step along direction.

    Raises:
        ValueError: if the step would leave the grid through row 0 or col 0.
    """
    d_row, d_col = _DELTAS[direction]
    row, col = point.row + d_row, point.col + d_col
    if row < 0 or col < 0:
        raise ValueError(f"Cannot move {direction.value} from {tuple(point)}: off the grid.")
    return Point(row, col)
