"""Markup helpers for table cells.

Column values are Rich markup strings. ``highlight`` marks the first
case-insensitive occurrence of the search text; later occurrences are left
alone so each cell shows a single match.
"""

from __future__ import annotations

import re

from rich.style import Style
from rich.text import Text

TextLike = str | Text


def to_text(value: TextLike) -> Text:
    """Return a fresh Text for a markup string or a Text."""
    if isinstance(value, Text):
        return value.copy()
    return Text.from_markup(value)


def remove_markup(value: TextLike) -> str:
    """Return the plain text of a markup string."""
    return to_text(value).plain


def plain_text(value: TextLike) -> Text:
    """Strip all styling, keeping only the characters."""
    return Text(remove_markup(value))


def find_match(text: str, search_text: str) -> tuple[int, int] | None:
    """Span of the first case-insensitive match of ``search_text``, if any."""
    if not search_text:
        return None
    match = re.search(re.escape(search_text), text, re.IGNORECASE)
    if match is None:
        return None
    return match.span()


def contains(text: str, search_text: str) -> bool:
    return find_match(text, search_text) is not None


def highlight(value: TextLike, search_text: str, style: str | Style | None = None) -> Text:
    """Apply ``style`` to the first match of ``search_text`` in ``value``.

    Args:
        value: Markup string or Text to search in.
        search_text: Text typed by the user. Empty means no highlight.
        style: Style for the matched span; ``None`` leaves the text unstyled.

    Returns:
        A new Text; the input is never modified.
    """
    text = to_text(value)
    span = find_match(text.plain, search_text)
    if span is None or style is None:
        return text
    text.stylize(style, *span)
    return text


__all__ = [
    "contains",
    "find_match",
    "highlight",
    "plain_text",
    "remove_markup",
    "to_text",
]
