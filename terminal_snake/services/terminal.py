"""
Terminal collaborator: key polling and character drawing.

The game only talks to the Terminal interface below. CursesTerminal backs it
with a curses window; tests use a mock with the same methods.
"""

import curses
import logging
from enum import Enum
from typing import Optional

from terminal_snake.domain.constants import WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH

logger = logging.getLogger(__name__)

ESCAPE_KEY = 27
ENTER_KEYS = {curses.KEY_ENTER, 10, 13}
ESC_DELAY_MS = 25


class KeyType(Enum):
    ARROW_UP = "arrow_up"
    ARROW_DOWN = "arrow_down"
    ARROW_LEFT = "arrow_left"
    ARROW_RIGHT = "arrow_right"
    ENTER = "enter"
    ESCAPE = "escape"
    OTHER = "other"


ARROW_KEYS = {
    curses.KEY_UP: KeyType.ARROW_UP,
    curses.KEY_DOWN: KeyType.ARROW_DOWN,
    curses.KEY_LEFT: KeyType.ARROW_LEFT,
    curses.KEY_RIGHT: KeyType.ARROW_RIGHT,
}


class KeyEvent:
    """A single key press, classified."""

    def __init__(self, key_type: KeyType, code: Optional[int] = None):
        self.key_type = key_type
        self.code = code

    @classmethod
    def from_code(cls, code: int) -> "KeyEvent":
        if code in ARROW_KEYS:
            return cls(ARROW_KEYS[code], code)
        if code in ENTER_KEYS:
            return cls(KeyType.ENTER, code)
        if code == ESCAPE_KEY:
            return cls(KeyType.ESCAPE, code)
        return cls(KeyType.OTHER, code)

    def __repr__(self):
        return f"<KeyEvent {self.key_type.name} code={self.code}>"


class TerminalTooSmallError(RuntimeError):
    """Raised when the terminal cannot fit the game window."""


class Terminal:
    """
    Base class/interface for the terminal the game draws on.
    """

    def poll_input(self) -> Optional[KeyEvent]:
        """Return the next pending key press, or None without blocking."""
        raise NotImplementedError

    def clear_screen(self) -> None:
        raise NotImplementedError

    def draw_char(self, x: int, y: int, char: str) -> None:
        raise NotImplementedError

    def draw_string(self, x: int, y: int, text: str) -> None:
        raise NotImplementedError

    def park_cursor(self) -> None:
        """Move the cursor out of the way of the board."""
        raise NotImplementedError

    def flush(self) -> None:
        raise NotImplementedError


class CursesTerminal(Terminal):
    """Terminal backed by a curses window (as handed over by curses.wrapper)."""

    def __init__(self, window, width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT):
        self.window = window
        self.width = width
        self.height = height

        rows, columns = window.getmaxyx()
        if rows < height or columns < width:
            raise TerminalTooSmallError(
                f"Terminal is {columns}x{rows}, the game needs at least {width}x{height}."
            )

        curses.set_escdelay(ESC_DELAY_MS)
        curses.curs_set(0)
        window.nodelay(True)
        window.keypad(True)
        # xterm title escape; ignored by terminals that don't support it
        print(f"\33]0;{WINDOW_TITLE}\a", end="", flush=True)
        logger.debug("Curses terminal ready (%sx%s available)", columns, rows)

    def poll_input(self) -> Optional[KeyEvent]:
        code = self.window.getch()
        if code == curses.ERR:
            return None
        return KeyEvent.from_code(code)

    def clear_screen(self) -> None:
        self.window.erase()

    def draw_char(self, x: int, y: int, char: str) -> None:
        self.window.addstr(y, x, char)

    def draw_string(self, x: int, y: int, text: str) -> None:
        self.window.addstr(y, x, text)

    def park_cursor(self) -> None:
        self.window.move(self.height - 1, self.width - 1)

    def flush(self) -> None:
        self.window.refresh()
