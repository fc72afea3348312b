"""
SnakeGame - the single-player game engine.
"""

import logging
import random
from typing import Optional

from termsnake.domain import (
    APPLE_SCORE,
    BodySegment,
    Direction,
    GameState,
    OpenSpace,
    Point,
    Snake,
)
from termsnake.domain.constants import MIN_HEIGHT, MIN_WIDTH, START_APPLE, START_BODY

logger = logging.getLogger(__name__)


class SnakeGame:
    """
    Manages:
      - Board (height, width), border included
      - The snake
      - Open cells and the apple
      - Score
    """

    def __init__(self, height: int, width: int, rng: Optional[random.Random] = None):
        if height < MIN_HEIGHT or width < MIN_WIDTH:
            raise ValueError(
                f"Terminal too small: {height}x{width}, need at least {MIN_HEIGHT}x{MIN_WIDTH}."
            )
        self.height = height
        self.width = width
        self.rng = rng or random.Random()
        self.score = 0
        self.ticks = 0
        self.state = GameState.CONTINUE

        self.snake = Snake(BodySegment.at(row, col, heading) for row, col, heading in START_BODY)
        self.open_space = OpenSpace.for_grid(height, width, excluded=self.snake.positions())

        self.apple = Point(*START_APPLE)
        if self.apple not in self.open_space:
            raise ValueError(f"Initial apple {tuple(self.apple)} is not on an open cell.")

    def is_border(self, point: Point) -> bool:
        return (
            point.row == 0 or point.row >= self.height - 1
            or point.col == 0 or point.col >= self.width - 1
        )

    def _place_apple(self) -> None:
        self.apple = self.open_space.pick_random(self.rng)

    def update(self, direction: Direction) -> GameState:
        """
        Advance the game by one tick in the given direction.

        Collisions and a full board are reported through the returned
        GameState, never raised.
        """
        self.ticks += 1
        old_tail = self.snake.tail
        self.snake.move(direction)
        head = self.snake.head.pos
        self.open_space.remove(head)

        # a) wall collision
        if self.is_border(head):
            return self._finish(GameState.OVER, "wall")

        # b) self collision
        if any(seg.pos == head for seg in list(self.snake.body)[1:]):
            return self._finish(GameState.OVER, "self")

        if head == self.apple:
            if self.open_space.is_empty():
                return self._finish(GameState.WIN, "board filled")
            # grow: keep the tail
            self.snake.grow(old_tail)
            self.score += APPLE_SCORE
            self._place_apple()
            logger.debug("Apple eaten at %s, score %d, next apple at %s", head, self.score, self.apple)
        elif old_tail.pos != head:
            # the head may have stepped straight into the cell the tail left
            self.open_space.insert(old_tail.pos)

        return GameState.CONTINUE

    def _finish(self, state: GameState, reason: str) -> GameState:
        self.state = state
        logger.info("Game finished after %d ticks: %s (%s), score %d",
                    self.ticks, state.value, reason, self.score)
        return state

    def __repr__(self):
        return (
            f"<SnakeGame {self.height}x{self.width}, length={len(self.snake)}, "
            f"apple={tuple(self.apple)}, score={self.score}>"
        )
