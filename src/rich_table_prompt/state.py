"""Cursor, search and scroll window state for a running prompt."""

from __future__ import annotations

from typing import Callable

from .keys import (
    is_backspace,
    is_down,
    is_end,
    is_home,
    is_page_down,
    is_page_up,
    is_printable,
    is_up,
)
from .markup import contains
from .tree import ItemNode, SelectionMode

SearchKey = Callable[[ItemNode], list[str]]


def _default_search_key(node: ItemNode) -> list[str]:
    return [str(node.value)]


class ListPromptState:
    """Mutable state of one prompt session.

    Holds the flattened item list, the cursor index, the page size and the
    search text. Cursor movement and search typing are handled here; the
    confirm and toggle keys belong to the prompt strategies.

    Args:
        items: Every node of the tree in display order.
        page_size: Rows per page (already fitted to the terminal).
        wrap_around: Whether moving past an edge wraps to the other end.
        mode: Selection granularity.
        skip_unselectable: Keep the cursor on leaves in leaf mode.
        search_enabled: Whether printable keys feed the search text.
        search_key: Texts a node is searched by; each is matched on its own.
    """

    def __init__(
        self,
        items: list[ItemNode],
        page_size: int,
        wrap_around: bool = False,
        mode: SelectionMode = SelectionMode.LEAF,
        skip_unselectable: bool = False,
        search_enabled: bool = False,
        search_key: SearchKey | None = None,
    ):
        if not items:
            raise ValueError("Prompt state needs at least one item")

        self.items = items
        self.page_size = page_size
        self.wrap_around = wrap_around
        self.mode = mode
        self.skip_unselectable = skip_unselectable
        self.search_enabled = search_enabled
        self.search_key = search_key or _default_search_key
        self.search_text = ""
        self._leaf_indexes = [i for i, node in enumerate(items) if node.is_leaf]

        self.index = self._leaf_indexes[0] if self._skips_groups else 0

    @property
    def _skips_groups(self) -> bool:
        return self.skip_unselectable and self.mode is SelectionMode.LEAF

    @property
    def item_count(self) -> int:
        return len(self.items)

    @property
    def current(self) -> ItemNode:
        return self.items[self.index]

    def is_selectable(self, node: ItemNode) -> bool:
        return not (node.is_group and self.mode is SelectionMode.LEAF)

    def _move_over_leaves(self, key: str) -> int:
        leaves = self._leaf_indexes
        position = leaves.index(self.index)

        if is_up(key):
            if position > 0:
                return leaves[position - 1]
            return leaves[-1] if self.wrap_around else self.index
        if is_down(key):
            if position < len(leaves) - 1:
                return leaves[position + 1]
            return leaves[0] if self.wrap_around else self.index
        if is_home(key):
            return leaves[0]
        if is_end(key):
            return leaves[-1]
        if is_page_up(key):
            return leaves[max(position - self.page_size, 0)]
        if is_page_down(key):
            return leaves[min(position + self.page_size, len(leaves) - 1)]
        return self.index

    def _move(self, key: str) -> int:
        if is_up(key):
            return self.index - 1
        if is_down(key):
            return self.index + 1
        if is_home(key):
            return 0
        if is_end(key):
            return self.item_count - 1
        if is_page_up(key):
            return self.index - self.page_size
        if is_page_down(key):
            return self.index + self.page_size
        return self.index

    def find_search_match(self, search_text: str) -> int | None:
        """Index of the first selectable node matching ``search_text``."""
        for i, node in enumerate(self.items):
            if self.is_selectable(node) and any(
                contains(text, search_text) for text in self.search_key(node)
            ):
                return i
        return None

    def update(self, key: str) -> bool:
        """Apply a navigation or search key.

        Returns:
            True when the cursor or the search text changed.
        """
        index = self._move_over_leaves(key) if self._skips_groups else self._move(key)

        search = self.search_text
        if self.search_enabled:
            if is_backspace(key):
                search = search[:-1]
            elif is_printable(key):
                search = search + key
            if search != self.search_text and search:
                match = self.find_search_match(search)
                if match is not None:
                    index = match

        if self.wrap_around:
            index %= self.item_count
        else:
            index = max(0, min(index, self.item_count - 1))

        if index != self.index or search != self.search_text:
            self.index = index
            self.search_text = search
            return True
        return False

    def visible_window(self) -> tuple[bool, list[tuple[int, ItemNode]]]:
        """Return whether the list scrolls and the visible ``(index, node)`` pairs.

        The cursor is kept in the middle of the page where possible.
        """
        scrollable = self.item_count > self.page_size
        if not scrollable:
            return False, list(enumerate(self.items))

        start = self.index - self.page_size // 2
        start = max(0, min(start, self.item_count - self.page_size))
        end = start + self.page_size
        return True, [(i, self.items[i]) for i in range(start, end)]
