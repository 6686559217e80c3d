import curses

import pytest

from termtris.keys import Action, KeyCode, KeyEvent, action_for, decode_key


@pytest.mark.parametrize(
    "ch, code",
    [
        (curses.KEY_UP, KeyCode.UP),
        (curses.KEY_DOWN, KeyCode.DOWN),
        (curses.KEY_LEFT, KeyCode.LEFT),
        (curses.KEY_RIGHT, KeyCode.RIGHT),
    ],
)
def test_decode_arrows(ch, code):
    assert decode_key(ch) == KeyEvent(code)


def test_decode_control_and_printable_characters():
    assert decode_key(3) == KeyEvent(KeyCode.CHAR, "c", ctrl=True)
    assert decode_key(ord("q")) == KeyEvent(KeyCode.CHAR, "q")
    assert decode_key(10) == KeyEvent(KeyCode.OTHER)
    assert decode_key(curses.KEY_F1) == KeyEvent(KeyCode.OTHER)


def test_arrow_actions_with_up_as_rotate():
    assert action_for(KeyEvent(KeyCode.UP)) is Action.ROTATE
    assert action_for(KeyEvent(KeyCode.LEFT)) is Action.LEFT
    assert action_for(KeyEvent(KeyCode.RIGHT)) is Action.RIGHT
    assert action_for(KeyEvent(KeyCode.DOWN)) is Action.DOWN


def test_quit_keys():
    assert action_for(KeyEvent(KeyCode.CHAR, "c", ctrl=True)) is Action.QUIT
    assert action_for(KeyEvent(KeyCode.CHAR, "q")) is Action.QUIT
    assert action_for(KeyEvent(KeyCode.CHAR, "c")) is None
    assert action_for(KeyEvent(KeyCode.OTHER)) is None
