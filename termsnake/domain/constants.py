"""
Game constants for termsnake.
"""

from enum import Enum


class Direction(Enum):
    """Movement directions on the grid."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

# Shorthands, matching how the rest of the codebase names moves
UP = Direction.UP
DOWN = Direction.DOWN
LEFT = Direction.LEFT
RIGHT = Direction.RIGHT
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Game settings
TICK_SECONDS = 0.0625
APPLE_SCORE = 100

# Starting layout as (row, col, heading), head first
START_BODY = [(1, 2, RIGHT), (1, 1, RIGHT)]
START_APPLE = (1, 5)

# Smallest terminal that fits START_BODY and START_APPLE inside the border
MIN_HEIGHT = 3
MIN_WIDTH = 7
