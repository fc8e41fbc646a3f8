"""Key bindings for menu sessions."""

from enum import Enum
from typing import Optional

import readchar


class KeyIntent(Enum):
    """What a keypress asks the session to do."""

    UP = "up"
    DOWN = "down"
    FIRST = "first"
    LAST = "last"
    CONFIRM = "confirm"
    BACK = "back"
    CANCEL = "cancel"
    INTERRUPT = "interrupt"


BINDINGS: dict[str, KeyIntent] = {
    readchar.key.UP: KeyIntent.UP,
    "k": KeyIntent.UP,
    readchar.key.DOWN: KeyIntent.DOWN,
    "j": KeyIntent.DOWN,
    readchar.key.TAB: KeyIntent.DOWN,
    readchar.key.HOME: KeyIntent.FIRST,
    "g": KeyIntent.FIRST,
    readchar.key.END: KeyIntent.LAST,
    "G": KeyIntent.LAST,
    readchar.key.ENTER: KeyIntent.CONFIRM,
    readchar.key.LF: KeyIntent.CONFIRM,
    readchar.key.CR: KeyIntent.CONFIRM,
    readchar.key.RIGHT: KeyIntent.CONFIRM,
    "l": KeyIntent.CONFIRM,
    readchar.key.LEFT: KeyIntent.BACK,
    "h": KeyIntent.BACK,
    readchar.key.BACKSPACE: KeyIntent.BACK,
    readchar.key.ESC: KeyIntent.BACK,
    "q": KeyIntent.CANCEL,
    readchar.key.CTRL_C: KeyIntent.INTERRUPT,
}

# Legend shown on the menu border
LEGEND = "[q] Quit | [←] Back"


def resolve_key(key: str) -> Optional[KeyIntent]:
    """Map a key from readchar.readkey() to an intent, None if unbound."""
    return BINDINGS.get(key)


def is_escape(key: str) -> bool:
    """Esc cancels when there is no parent level to go back to."""
    return key == readchar.key.ESC
