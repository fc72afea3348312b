"""
Keyboard input: a relay thread that reads keys and a player that consumes them.
"""

import logging
import queue
import threading
import time
from enum import Enum
from typing import Optional

from termsnake.domain import Direction
from .base import Player

logger = logging.getLogger(__name__)


class UserInput(Enum):
    UNKNOWN = "UNKNOWN"
    PAUSE = "PAUSE"
    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def direction(self) -> Optional[Direction]:
        """The Direction this command steers towards, or None for PAUSE/UNKNOWN."""
        return _DIRECTIONS.get(self)


_DIRECTIONS = {
    UserInput.UP: Direction.UP,
    UserInput.DOWN: Direction.DOWN,
    UserInput.LEFT: Direction.LEFT,
    UserInput.RIGHT: Direction.RIGHT,
}

KEY_MAP = {
    "KEY_UP": UserInput.UP,
    "KEY_DOWN": UserInput.DOWN,
    "KEY_LEFT": UserInput.LEFT,
    "KEY_RIGHT": UserInput.RIGHT,
    "KEY_ESCAPE": UserInput.PAUSE,
}


def decode_key(keystroke) -> UserInput:
    """Map a blessed Keystroke onto a command; anything unmapped is UNKNOWN."""
    name = getattr(keystroke, "name", None)
    return KEY_MAP.get(name, UserInput.UNKNOWN)


class InputRelay(threading.Thread):
    """
    Daemon thread that blocks on the terminal for key presses and forwards
    decoded commands to the game loop.

    It is never stopped explicitly and ends with the process. If reading
    fails, the error is put on the queue for the loop to raise and the
    relay exits.
    """

    def __init__(self, terminal, commands: queue.Queue):
        super().__init__(name="input-relay", daemon=True)
        self.terminal = terminal
        self.commands = commands

    def run(self) -> None:
        while True:
            try:
                key = self.terminal.read_key()
                if not key:
                    # blessed returns an empty keystroke without a tty or at EOF
                    raise OSError("keyboard input closed")
            except OSError as e:
                logger.error(f"Key read failed, stopping input relay: {e}")
                self.commands.put(e)
                return
            self.commands.put(decode_key(key))


class KeyboardPlayer(Player):
    """
    Consumes the relay's queue. Within each tick the most recent directional
    command wins; PAUSE and UNKNOWN are dropped.
    """

    def __init__(self, commands: queue.Queue):
        self.commands = commands

    def get_move(self, current: Direction, tick_seconds: float) -> Direction:
        deadline = time.monotonic() + tick_seconds
        latest = current
        while True:
            remaining = deadline - time.monotonic()
            try:
                if remaining > 0:
                    command = self.commands.get(timeout=remaining)
                else:
                    command = self.commands.get_nowait()
            except queue.Empty:
                return latest

            if isinstance(command, BaseException):
                raise command
            # TODO: PAUSE is decoded but the loop has no paused state yet
            if command.direction is not None:
                latest = command.direction
