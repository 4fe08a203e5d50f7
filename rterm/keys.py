"""Translation of terminal keystrokes into the key events the shells handle."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any


class KeyCode(enum.Enum):
    """Keys the interactive loops react to."""

    ESC = "esc"
    ENTER = "enter"
    CHAR = "char"
    BACKSPACE = "backspace"
    UP = "up"
    DOWN = "down"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    OTHER = "other"


@dataclass(frozen=True)
class KeyPress:
    """A single key press, with its character for printable keys."""

    code: KeyCode
    char: str = ""
    ctrl: bool = False


_CTRL_SEQUENCES = {
    "\x1b[1;5A": KeyCode.UP,
    "\x1b[1;5B": KeyCode.DOWN,
    "\x1b[5A": KeyCode.UP,
    "\x1b[5B": KeyCode.DOWN,
    "\x1bOa": KeyCode.UP,
    "\x1bOb": KeyCode.DOWN,
}

_CTRL_NAMES = {
    "KEY_CTRL_UP": KeyCode.UP,
    "KEY_CTRL_DOWN": KeyCode.DOWN,
}

_NAMES = {
    "KEY_ESCAPE": KeyCode.ESC,
    "KEY_ENTER": KeyCode.ENTER,
    "KEY_BACKSPACE": KeyCode.BACKSPACE,
    "KEY_UP": KeyCode.UP,
    "KEY_DOWN": KeyCode.DOWN,
    "KEY_PGUP": KeyCode.PAGE_UP,
    "KEY_PGDOWN": KeyCode.PAGE_DOWN,
}

_PLAIN = {
    "\x1b": KeyCode.ESC,
    "\r": KeyCode.ENTER,
    "\n": KeyCode.ENTER,
    "\x7f": KeyCode.BACKSPACE,
    "\x08": KeyCode.BACKSPACE,
}


def from_keystroke(keystroke: Any) -> KeyPress | None:
    """Map a keystroke (a string, optionally with a ``name``) to a KeyPress.

    Returns None for an empty keystroke, as produced by a read that timed out.
    """
    text = str(keystroke)
    if not text:
        return None

    if text in _CTRL_SEQUENCES:
        return KeyPress(_CTRL_SEQUENCES[text], ctrl=True)

    name = getattr(keystroke, "name", None)
    if name:
        if name in _CTRL_NAMES:
            return KeyPress(_CTRL_NAMES[name], ctrl=True)
        return KeyPress(_NAMES.get(name, KeyCode.OTHER))

    if text in _PLAIN:
        return KeyPress(_PLAIN[text])
    if len(text) == 1 and text.isprintable():
        return KeyPress(KeyCode.CHAR, char=text)
    return KeyPress(KeyCode.OTHER)