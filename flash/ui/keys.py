"""
keys.py - Keyboard input adapter
Single responsibility: turn curses key codes into the key events the
navigation state machine understands.
"""
import curses
from enum import Enum


class Key(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ENTER = "enter"
    ESC = "esc"
    BACKSPACE = "backspace"
    CTRL_A = "ctrl-a"
    CTRL_D = "ctrl-d"


# A key event is a Key member or a single printable character.
KeyEvent = Key | str

_SPECIAL_CODES = {
    curses.KEY_UP: Key.UP,
    curses.KEY_DOWN: Key.DOWN,
    curses.KEY_LEFT: Key.LEFT,
    curses.KEY_RIGHT: Key.RIGHT,
    curses.KEY_ENTER: Key.ENTER,
    curses.KEY_BACKSPACE: Key.BACKSPACE,
    10: Key.ENTER,
    13: Key.ENTER,
    27: Key.ESC,
    127: Key.BACKSPACE,
    8: Key.BACKSPACE,
    1: Key.CTRL_A,
    4: Key.CTRL_D,
}


def translate(code: int | str) -> KeyEvent | None:
    """
    Map a curses code (int from getch, int or str from get_wch) to a key
    event. Unknown codes map to None.
    """
    if isinstance(code, str):
        if len(code) != 1:
            return None
        if code.isprintable():
            return code
        code = ord(code)
    key = _SPECIAL_CODES.get(code)
    if key is not None:
        return key
    # get_wch delivers non-ASCII text as str; ints above 126 are function keys
    if 32 <= code < 127:
        return chr(code)
    return None


def is_printable(event: KeyEvent | None) -> bool:
    return isinstance(event, str)
