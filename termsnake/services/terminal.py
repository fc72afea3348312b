"""
Terminal I/O for the game, built on blessed.

One Terminal handle is created at start-up and passed explicitly to the
renderer, the game loop and the input relay. Writes and key reads are
independent, so the relay thread can block in read_key() while the main
thread draws.
"""

import contextlib
import logging
from typing import Iterator, Optional, Tuple

import blessed
from blessed.keyboard import Keystroke

logger = logging.getLogger(__name__)


class Terminal:
    def __init__(self, term: Optional[blessed.Terminal] = None):
        self._term = term or blessed.Terminal()

    def size(self) -> Tuple[int, int]:
        """Return (height, width) in character cells."""
        return self._term.height, self._term.width

    def clear_screen(self) -> None:
        self.write(self._term.home + self._term.clear)

    def move_cursor_to(self, col: int, row: int) -> None:
        self.write(self._term.move_xy(col, row))

    def write(self, text: str) -> None:
        """Queue text for the screen; nothing appears until flush()."""
        self._term.stream.write(text)

    def flush(self) -> None:
        # OSError propagates: a broken terminal ends the game
        self._term.stream.flush()

    def read_key(self) -> Keystroke:
        """Block until the next key press."""
        return self._term.inkey()

    def style(self, name: str, text: str) -> str:
        """Wrap text in a blessed formatting string such as 'green_on_white'."""
        return getattr(self._term, name)(text)

    @contextlib.contextmanager
    def session(self) -> Iterator["Terminal"]:
        """Raw-ish key input and a hidden cursor for the duration of a game."""
        with self._term.cbreak(), self._term.hidden_cursor():
            logger.debug("Terminal session started at %dx%d", *self.size())
            try:
                yield self
            finally:
                self.write(self._term.normal + "\n")
                self.flush()
