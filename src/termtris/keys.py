"""Key events and their mapping to game actions."""

from __future__ import annotations

import curses
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class KeyCode(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    CHAR = "char"
    OTHER = "other"


class Action(Enum):
    ROTATE = "rotate"
    LEFT = "left"
    RIGHT = "right"
    DOWN = "down"
    QUIT = "quit"


@dataclass(frozen=True)
class KeyEvent:
    """A single key press, with ``char`` set for character keys."""

    code: KeyCode
    char: Optional[str] = None
    ctrl: bool = False


_CURSES_ARROWS = {
    curses.KEY_UP: KeyCode.UP,
    curses.KEY_DOWN: KeyCode.DOWN,
    curses.KEY_LEFT: KeyCode.LEFT,
    curses.KEY_RIGHT: KeyCode.RIGHT,
}

_ARROW_ACTIONS = {
    KeyCode.UP: Action.ROTATE,
    KeyCode.LEFT: Action.LEFT,
    KeyCode.RIGHT: Action.RIGHT,
    KeyCode.DOWN: Action.DOWN,
}


def decode_key(ch: int) -> KeyEvent:
    """Translate a ``getch`` code into a :class:`KeyEvent`.

    In raw mode Ctrl-A through Ctrl-Z arrive as codes 1-26; those are reported
    as the matching lowercase letter with ``ctrl`` set.
    """

    if ch in _CURSES_ARROWS:
        return KeyEvent(_CURSES_ARROWS[ch])
    if 1 <= ch <= 26 and ch not in (9, 10, 13):  # tab, newline, return
        return KeyEvent(KeyCode.CHAR, chr(ch + ord("a") - 1), ctrl=True)
    if 32 <= ch < 127:
        return KeyEvent(KeyCode.CHAR, chr(ch))
    return KeyEvent(KeyCode.OTHER)


def action_for(event: KeyEvent) -> Optional[Action]:
    """Return the action bound to ``event``, or ``None`` if it is unbound.

    Up rotates clockwise rather than moving the piece.  ``q`` and Ctrl-C quit.
    """

    if event.code in _ARROW_ACTIONS:
        return _ARROW_ACTIONS[event.code]
    if event.code is KeyCode.CHAR:
        if event.char == "c" and event.ctrl:
            return Action.QUIT
        if event.char in ("q", "Q") and not event.ctrl:
            return Action.QUIT
    return None
