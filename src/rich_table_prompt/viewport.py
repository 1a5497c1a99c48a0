"""Page sizing: how many item rows fit around the prompt chrome."""

from __future__ import annotations

# Smallest page size a caller may request.
PAGE_SIZE_MINIMUM = 3
# Never render fewer rows than this, even on a very short terminal.
MIN_PAGE_SIZE = 1

TITLE_LINES = 2
SEARCH_LINES = 1
SPACER_LINES = 1
INSTRUCTIONS_LINES = 1
SCROLL_HINT_LINES = 1


def reserved_lines(
    total_item_count: int,
    requested_page_size: int,
    *,
    has_title: bool,
    search_enabled: bool = False,
    multi_select: bool = False,
) -> int:
    """Count the chrome lines shown around the table."""
    scrollable = total_item_count > requested_page_size
    reserved = TITLE_LINES if has_title else 0

    if multi_select:
        reserved += SPACER_LINES + INSTRUCTIONS_LINES
    else:
        if search_enabled or scrollable:
            reserved += SPACER_LINES
        if search_enabled:
            reserved += SEARCH_LINES

    if scrollable:
        reserved += SCROLL_HINT_LINES
    return reserved


def calculate_page_size(
    terminal_height: int,
    total_item_count: int,
    requested_page_size: int,
    *,
    has_title: bool,
    search_enabled: bool = False,
    multi_select: bool = False,
) -> int:
    """Return the number of rows that fit in ``terminal_height``.

    Never larger than ``requested_page_size`` and never below
    ``MIN_PAGE_SIZE``.
    """
    reserved = reserved_lines(
        total_item_count,
        requested_page_size,
        has_title=has_title,
        search_enabled=search_enabled,
        multi_select=multi_select,
    )
    available = terminal_height - reserved
    return max(MIN_PAGE_SIZE, min(requested_page_size, available))
