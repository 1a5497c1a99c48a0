"""Tests for cursor movement, search jumps and the visible window."""

from __future__ import annotations

import pytest
import readchar

from rich_table_prompt import ItemTree, ListPromptState, SelectionMode


def _grouped_nodes():
    tree = ItemTree()
    tree.add("Berries").add_children("Blueberry", "Mulberry")
    tree.add("Citrus").add_children("Lemon", "Lime")
    tree.add("Apple")
    # Berries, Blueberry, Mulberry, Citrus, Lemon, Lime, Apple
    return list(tree)


def _flat_nodes(count: int):
    tree = ItemTree()
    for value in range(count):
        tree.add(f"item {value}")
    return list(tree)


def _values(state):
    return state.current.value


class TestMovement:
    def test_starts_on_first_item(self):
        state = ListPromptState(_grouped_nodes(), page_size=5)
        assert state.index == 0

    def test_starts_on_first_leaf_when_skipping_groups(self):
        state = ListPromptState(_grouped_nodes(), page_size=5, skip_unselectable=True)
        assert _values(state) == "Blueberry"

    def test_down_skips_groups(self):
        state = ListPromptState(_grouped_nodes(), page_size=5, skip_unselectable=True)
        state.update(readchar.key.DOWN)
        state.update(readchar.key.DOWN)
        assert _values(state) == "Lemon"

    def test_independent_mode_does_not_skip_groups(self):
        state = ListPromptState(
            _grouped_nodes(),
            page_size=5,
            mode=SelectionMode.INDEPENDENT,
            skip_unselectable=True,
        )
        assert _values(state) == "Berries"
        state.update(readchar.key.DOWN)
        assert _values(state) == "Blueberry"

    def test_clamped_without_wrap(self):
        state = ListPromptState(_grouped_nodes(), page_size=5)
        assert state.update(readchar.key.UP) is False
        assert state.index == 0
        state.update(readchar.key.END)
        assert state.update(readchar.key.DOWN) is False
        assert _values(state) == "Apple"

    def test_wraps_around(self):
        state = ListPromptState(_grouped_nodes(), page_size=5, wrap_around=True)
        state.update(readchar.key.UP)
        assert _values(state) == "Apple"
        state.update(readchar.key.DOWN)
        assert _values(state) == "Berries"

    def test_wraps_around_over_leaves(self):
        state = ListPromptState(
            _grouped_nodes(), page_size=5, wrap_around=True, skip_unselectable=True
        )
        state.update(readchar.key.UP)
        assert _values(state) == "Apple"
        state.update(readchar.key.DOWN)
        assert _values(state) == "Blueberry"

    def test_home_end_and_paging(self):
        state = ListPromptState(_flat_nodes(20), page_size=5)
        state.update(readchar.key.PAGE_DOWN)
        assert state.index == 5
        state.update(readchar.key.END)
        assert state.index == 19
        state.update(readchar.key.PAGE_UP)
        assert state.index == 14
        state.update(readchar.key.HOME)
        assert state.index == 0

    def test_paging_over_leaves(self):
        state = ListPromptState(_grouped_nodes(), page_size=3, skip_unselectable=True)
        state.update(readchar.key.PAGE_DOWN)
        assert _values(state) == "Lime"
        state.update(readchar.key.PAGE_UP)
        assert _values(state) == "Blueberry"

    def test_unknown_key_changes_nothing(self):
        state = ListPromptState(_grouped_nodes(), page_size=5)
        assert state.update("x") is False

    def test_empty_items_rejected(self):
        with pytest.raises(ValueError):
            ListPromptState([], page_size=5)


class TestSearch:
    def test_typing_jumps_to_first_selectable_match(self):
        state = ListPromptState(
            _grouped_nodes(), page_size=5, skip_unselectable=True, search_enabled=True
        )
        assert state.update("l") is True
        assert state.search_text == "l"
        # "Blueberry" contains an l and is the first selectable match
        assert _values(state) == "Blueberry"
        state.update("i")
        assert _values(state) == "Lime"

    def test_groups_never_matched_in_leaf_mode(self):
        state = ListPromptState(
            _grouped_nodes(), page_size=5, skip_unselectable=True, search_enabled=True
        )
        state.update("c")
        state.update("i")
        assert state.search_text == "ci"
        assert _values(state) == "Blueberry"

    def test_backspace_shortens_search(self):
        state = ListPromptState(_grouped_nodes(), page_size=5, search_enabled=True)
        for key in "lem":
            state.update(key)
        assert _values(state) == "Lemon"
        state.update("\x7f")
        assert state.search_text == "le"

    def test_search_ignored_when_disabled(self):
        state = ListPromptState(_grouped_nodes(), page_size=5)
        assert state.update("a") is False
        assert state.search_text == ""

    def test_custom_search_key(self):
        state = ListPromptState(
            _grouped_nodes(),
            page_size=5,
            search_enabled=True,
            search_key=lambda node: [str(node.value)[::-1]],
        )
        state.update("n")
        state.update("o")
        state.update("m")
        assert _values(state) == "Lemon"

    def test_each_search_text_matched_on_its_own(self):
        state = ListPromptState(
            _grouped_nodes(),
            page_size=5,
            search_enabled=True,
            search_key=lambda node: [str(node.value), str(len(str(node.value)))],
        )
        for key in "e 5":
            state.update(key)
        assert state.search_text == "e 5"
        # "Apple" and "5" would only match "e 5" if joined
        assert _values(state) == "Blueberry"


class TestVisibleWindow:
    def test_not_scrollable_when_everything_fits(self):
        nodes = _flat_nodes(4)
        scrollable, window = ListPromptState(nodes, page_size=5).visible_window()
        assert scrollable is False
        assert [index for index, _ in window] == [0, 1, 2, 3]

    def test_cursor_kept_in_middle(self):
        state = ListPromptState(_flat_nodes(20), page_size=5)
        state.index = 10
        scrollable, window = state.visible_window()
        assert scrollable is True
        assert [index for index, _ in window] == [8, 9, 10, 11, 12]

    def test_window_pinned_at_edges(self):
        state = ListPromptState(_flat_nodes(20), page_size=5)
        assert [index for index, _ in state.visible_window()[1]] == [0, 1, 2, 3, 4]
        state.index = 19
        assert [index for index, _ in state.visible_window()[1]] == [15, 16, 17, 18, 19]
