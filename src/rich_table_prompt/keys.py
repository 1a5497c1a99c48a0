"""Keyboard input helpers for rich_table_prompt.

Small predicates over the strings returned by ``readchar.readkey()`` so
the prompt loop and strategies read as plain conditionals.
"""

from __future__ import annotations

import readchar


def is_enter(key: str) -> bool:
    """Check if key is Enter/Return."""
    return key in (readchar.key.ENTER, readchar.key.CR, readchar.key.LF)


def is_space(key: str) -> bool:
    """Check if key is space."""
    return key == readchar.key.SPACE


def is_up(key: str) -> bool:
    return key == readchar.key.UP


def is_down(key: str) -> bool:
    return key == readchar.key.DOWN


def is_home(key: str) -> bool:
    return key == readchar.key.HOME


def is_end(key: str) -> bool:
    return key == readchar.key.END


def is_page_up(key: str) -> bool:
    return key == readchar.key.PAGE_UP


def is_page_down(key: str) -> bool:
    return key == readchar.key.PAGE_DOWN


def is_backspace(key: str) -> bool:
    """Check if key is backspace (handles terminal variations)."""
    return key in (readchar.key.BACKSPACE, "\x7f", "\b")


def is_printable(key: str) -> bool:
    """Check if key is a single printable character (search input)."""
    return len(key) == 1 and key.isprintable()
