"""
Base player interface for the game loop.
"""

from termsnake.domain import Direction


class Player:
    """
    Base class/interface for whatever steers the snake.

    The game loop asks the player once per tick for the direction it wants.
    """

    def get_move(self, current: Direction, tick_seconds: float) -> Direction:
        """
        Return the requested direction for the coming tick.

        Args:
            current: Direction that was applied on the previous tick
            tick_seconds: How long the player may take to decide

        Returns:
            The direction to try next; the loop still guards against reversals.
        """
        raise NotImplementedError
