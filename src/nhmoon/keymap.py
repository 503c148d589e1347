from __future__ import annotations
from typing import Dict, Optional

from .core.types import Command, Digit, Input

CALENDAR_KEYS: Dict[str, Command] = {
    "j": Command.SCROLL_WEEK_DOWN,
    "down": Command.SCROLL_WEEK_DOWN,
    "k": Command.SCROLL_WEEK_UP,
    "up": Command.SCROLL_WEEK_UP,
    "z": Command.SCROLL_PAGE_DOWN,
    "pagedown": Command.SCROLL_PAGE_DOWN,
    "w": Command.SCROLL_PAGE_UP,
    "pageup": Command.SCROLL_PAGE_UP,
    "0": Command.JUMP_TODAY,
    "home": Command.JUMP_TODAY,
    "g": Command.OPEN_PROMPT,
    "?": Command.SHOW_HELP,
    "q": Command.QUIT,
    "esc": Command.QUIT,
    "ctrl-c": Command.QUIT,
}

PROMPT_KEYS: Dict[str, Command] = {
    "-": Command.TOGGLE_SIGN,
    "+": Command.POSITIVE_SIGN,
    "backspace": Command.BACKSPACE,
    "delete": Command.BACKSPACE,
    "enter": Command.COMMIT,
    "q": Command.CANCEL,
    "g": Command.CANCEL,
    "esc": Command.CANCEL,
}

HELP_TEXT = (
    ("j, DOWN", "Scroll down one week"),
    ("k, UP", "Scroll up one week"),
    ("z, PAGE DOWN", "Scroll down one page"),
    ("w, PAGE UP", "Scroll up one page"),
    ("0, HOME", "Jump to today"),
    ("g", "Input date to jump to"),
    ("?", "Show this help"),
    ("q, ESC", "Quit"),
)


def translate(key: str, *, editing: bool = False) -> Optional[Input]:
    """Map a key name to a command; None for keys with no binding in this mode."""
    k = key if len(key) == 1 else key.lower()
    if editing:
        if len(k) == 1 and k in "0123456789":
            return Digit(int(k))
        return PROMPT_KEYS.get(k)
    return CALENDAR_KEYS.get(k)
