"""
GameState - the outcome of a single tick.
"""

from enum import Enum


class GameState(Enum):
    CONTINUE = "continue"
    OVER = "over"    # hit the border or its own body
    WIN = "win"      # no open cell left after eating the last apple

    @property
    def finished(self) -> bool:
        return self is not GameState.CONTINUE
