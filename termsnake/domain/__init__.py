"""
Domain entities for the termsnake game engine.

This module contains the core game entities that are independent of
terminal I/O and timing.
"""

from .constants import (
    Direction, UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    APPLE_SCORE, TICK_SECONDS,
)
from .geometry import Point, advance, is_opposite
from .snake import BodySegment, Snake
from .open_space import OpenSpace
from .game_state import GameState

__all__ = [
    'Direction', 'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'APPLE_SCORE', 'TICK_SECONDS',
    'Point', 'advance', 'is_opposite',
    'BodySegment', 'Snake',
    'OpenSpace',
    'GameState',
]
