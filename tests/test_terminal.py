import curses

import pytest

from termtris import terminal as term
from termtris.keys import KeyCode, KeyEvent


class FakeScreen:
    def __init__(self, keys=(), rows=24) -> None:
        self.keys = list(keys)
        self.rows = rows
        self.lines: dict[int, str] = {}
        self.refreshed = 0

    def nodelay(self, flag):
        self.nodelay_flag = flag

    def keypad(self, flag):
        pass

    def erase(self):
        self.lines.clear()

    def addstr(self, y, x, text):
        if y >= self.rows:
            raise curses.error("addstr() returned ERR")
        self.lines[y] = text

    def refresh(self):
        self.refreshed += 1

    def getch(self):
        return self.keys.pop(0) if self.keys else -1


@pytest.fixture(autouse=True)
def no_curses_setup(monkeypatch):
    monkeypatch.setattr(term.curses, "curs_set", lambda _v: None)
    monkeypatch.setattr(term.curses, "raw", lambda: None)


def test_draw_writes_each_row_and_skips_what_does_not_fit():
    screen = FakeScreen(rows=2)
    terminal = term.CursesTerminal(screen)
    terminal.draw("ab\r\ncd\r\nef\r\n")
    assert screen.lines == {0: "ab", 1: "cd"}
    assert screen.refreshed == 1
    assert screen.nodelay_flag is True


def test_poll_then_read_returns_decoded_keys():
    screen = FakeScreen(keys=[curses.KEY_LEFT, 3])
    terminal = term.CursesTerminal(screen)
    assert terminal.poll()
    assert terminal.poll()  # peeking does not consume
    assert terminal.read() == KeyEvent(KeyCode.LEFT)
    assert terminal.poll()
    assert terminal.read() == KeyEvent(KeyCode.CHAR, "c", ctrl=True)
    assert not terminal.poll()


def test_read_without_pending_key_raises():
    terminal = term.CursesTerminal(FakeScreen())
    with pytest.raises(RuntimeError):
        terminal.read()


def test_setup_errors_are_ignored(monkeypatch):
    def fail(*_args):
        raise curses.error("unsupported")

    monkeypatch.setattr(term.curses, "curs_set", fail)
    monkeypatch.setattr(term.curses, "raw", fail)
    term.CursesTerminal(FakeScreen())
