"""
Player implementations for termsnake.

This module contains the player abstraction and the keyboard-driven
implementation that steers the snake.
"""

from .base import Player
from .keyboard_player import InputRelay, KeyboardPlayer, UserInput, decode_key

__all__ = [
    'Player',
    'InputRelay',
    'KeyboardPlayer',
    'UserInput',
    'decode_key',
]
