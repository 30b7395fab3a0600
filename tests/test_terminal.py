"""
Tests for services/terminal.py - key classification and the curses wrapper.
"""

import curses
from unittest.mock import MagicMock, patch

import pytest

from terminal_snake.services.terminal import (
    CursesTerminal,
    KeyEvent,
    KeyType,
    Terminal,
    TerminalTooSmallError,
)


def make_window(rows=24, columns=80):
    window = MagicMock()
    window.getmaxyx.return_value = (rows, columns)
    return window


@pytest.fixture
def curses_setup():
    with patch("terminal_snake.services.terminal.curses.set_escdelay") as set_escdelay, \
            patch("terminal_snake.services.terminal.curses.curs_set") as curs_set:
        yield set_escdelay, curs_set


class TestKeyEvent:
    """Tests for KeyEvent.from_code()."""

    @pytest.mark.parametrize("code, key_type", [
        (curses.KEY_UP, KeyType.ARROW_UP),
        (curses.KEY_DOWN, KeyType.ARROW_DOWN),
        (curses.KEY_LEFT, KeyType.ARROW_LEFT),
        (curses.KEY_RIGHT, KeyType.ARROW_RIGHT),
        (10, KeyType.ENTER),
        (13, KeyType.ENTER),
        (curses.KEY_ENTER, KeyType.ENTER),
        (27, KeyType.ESCAPE),
        (ord("q"), KeyType.OTHER),
    ])
    def test_codes_are_classified(self, code, key_type):
        """Raw key codes map onto key types."""
        event = KeyEvent.from_code(code)
        assert event.key_type == key_type
        assert event.code == code


class TestTerminalInterface:
    """Tests for the Terminal base class."""

    def test_base_methods_are_abstract(self):
        """The base class only defines the contract."""
        terminal = Terminal()
        with pytest.raises(NotImplementedError):
            terminal.poll_input()
        with pytest.raises(NotImplementedError):
            terminal.draw_char(0, 0, "x")


class TestCursesTerminal:
    """Tests for CursesTerminal on a mocked window."""

    def test_setup_configures_window(self, curses_setup):
        """The window is made non-blocking with keypad and hidden cursor."""
        set_escdelay, curs_set = curses_setup
        window = make_window()

        CursesTerminal(window)

        window.nodelay.assert_called_once_with(True)
        window.keypad.assert_called_once_with(True)
        curs_set.assert_called_once_with(0)
        set_escdelay.assert_called_once()

    def test_small_terminal_raises(self, curses_setup):
        """A terminal smaller than the game window is rejected."""
        with pytest.raises(TerminalTooSmallError):
            CursesTerminal(make_window(rows=10, columns=80))

    def test_poll_input_without_key_returns_none(self, curses_setup):
        """No pending key means None."""
        window = make_window()
        window.getch.return_value = curses.ERR
        assert CursesTerminal(window).poll_input() is None

    def test_poll_input_classifies_key(self, curses_setup):
        """A pending key is returned as a KeyEvent."""
        window = make_window()
        window.getch.return_value = curses.KEY_LEFT
        event = CursesTerminal(window).poll_input()
        assert event.key_type == KeyType.ARROW_LEFT

    def test_draw_uses_row_column_order(self, curses_setup):
        """draw_char(x, y) becomes addstr(y, x)."""
        window = make_window()
        terminal = CursesTerminal(window)

        terminal.draw_char(3, 7, "o")
        terminal.draw_string(1, 2, "hi")

        window.addstr.assert_any_call(7, 3, "o")
        window.addstr.assert_any_call(2, 1, "hi")

    def test_clear_park_and_flush(self, curses_setup):
        """Screen maintenance calls go to the window."""
        window = make_window()
        terminal = CursesTerminal(window)

        terminal.clear_screen()
        terminal.park_cursor()
        terminal.flush()

        window.erase.assert_called_once_with()
        window.move.assert_called_once_with(19, 29)
        window.refresh.assert_called_once_with()

    def test_draw_errors_propagate(self, curses_setup):
        """curses errors are not swallowed."""
        window = make_window()
        window.addstr.side_effect = curses.error("out of range")
        terminal = CursesTerminal(window)

        with pytest.raises(curses.error):
            terminal.draw_char(0, 0, "x")
