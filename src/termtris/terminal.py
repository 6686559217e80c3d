"""Curses-backed display and keyboard."""

from __future__ import annotations

import curses
from typing import Optional

from .keys import KeyEvent, decode_key
from .render import LINE_END


class CursesTerminal:
    """Draw frames to a curses window and read keys without blocking.

    The window is expected to come from :func:`curses.wrapper`, which restores
    the terminal's original mode however the game ends.
    """

    def __init__(self, stdscr: "curses.window") -> None:
        self.stdscr = stdscr
        self._pending: Optional[int] = None
        self._setup()

    def _setup(self) -> None:
        self.stdscr.nodelay(True)
        self.stdscr.keypad(True)
        # Cosmetic or unsupported on some terminals; play on regardless.
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        try:
            curses.raw()
        except curses.error:
            pass

    def draw(self, text: str) -> None:
        self.stdscr.erase()
        for y, row in enumerate(text.split(LINE_END)):
            if not row:
                continue
            try:
                self.stdscr.addstr(y, 0, row)
            except curses.error:
                # Terminal smaller than the board: show what fits.
                pass
        self.stdscr.refresh()

    def poll(self) -> bool:
        if self._pending is None:
            ch = self.stdscr.getch()
            if ch == -1:
                return False
            self._pending = ch
        return True

    def read(self) -> KeyEvent:
        if self._pending is None:
            raise RuntimeError("read() called with no pending key; call poll() first")
        ch, self._pending = self._pending, None
        return decode_key(ch)
