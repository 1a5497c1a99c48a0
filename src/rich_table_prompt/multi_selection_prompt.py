"""Multi selection table prompt with cascading group selection."""

from __future__ import annotations

import logging
from typing import Any, Iterable

from rich.console import Console, Group
from rich.text import Text

from . import selection
from .keys import is_enter, is_space
from .state import ListPromptState
from .strategy import InputResult
from .table_prompt import TablePrompt
from .tree import ItemNode, SelectionMode

logger = logging.getLogger(__name__)


class TableMultiSelectionPrompt(TablePrompt):
    """Pick any number of values from a (possibly grouped) table.

    Space toggles the row under the cursor, Enter accepts. In leaf mode,
    toggling a group toggles its whole subtree and a group shows as selected
    only while every descendant is selected.

    Example:
        prompt = TableMultiSelectionPrompt(title="Favorite fruits?")
        prompt.add_choice_group("Berries", ["Blueberry", "Mulberry"])
        prompt.add_choices("Apple", "Banana")
        prompt.select("Apple")
        fruits = prompt.show()  # ["Apple", "Blueberry"]

    Args:
        required: Refuse to accept an empty selection.
        instructions_text: Line shown below the table.
        **options: See ``TablePrompt``.
    """

    multi_select = True

    def __init__(
        self,
        *,
        required: bool = True,
        instructions_text: str | None = None,
        **options: Any,
    ):
        super().__init__(**options)
        self.required = required
        self.instructions_text = instructions_text

    def select(self, value: Any) -> TableMultiSelectionPrompt:
        """Preselect ``value`` (and its subtree in leaf mode).

        Raises:
            ItemNotFoundError: ``value`` is not in the tree.
        """
        selection.set_selected(self.tree.get(value), True, self.mode)
        return self

    def get_parents(self, value: Any) -> list[Any]:
        """Return every ancestor value of ``value``, top-level first.

        Raises:
            ItemNotFoundError: ``value`` is not in the tree.
        """
        return self.tree.parents_of(value)

    def get_parent(self, value: Any) -> Any | None:
        """Return the direct parent value of ``value`` or None at the top level."""
        parents = self.get_parents(value)
        return parents[-1] if parents else None

    def handle_input(self, key: str, state: ListPromptState) -> InputResult:
        if is_enter(key):
            if self.required and not any(node.is_selected for node in state.items):
                logger.debug("Refusing to submit an empty selection")
                return InputResult.NONE
            return InputResult.SUBMIT

        if is_space(key):
            selection.toggle(state.current, self.mode)
            return InputResult.REFRESH

        return InputResult.NONE

    def header_left_padding(self, min_depth: int) -> int:
        return super().header_left_padding(min_depth) + self.theme.checkbox_width + 1

    def _row(self, node: ItemNode, current: bool) -> list[Text]:
        style = self._or_theme(self.highlight_style, self.theme.highlight_style) if current else ""
        values = self._cell_values(node, current)
        cascaded = node.is_group and self.mode is SelectionMode.LEAF

        first = self._row_prefix(node, current, style)
        first.append_text(self.theme.checkbox(node.is_selected, cascaded=cascaded))
        first.append(" ")
        first.append_text(values[0])
        rest = values[1:]
        if current:
            for value in rest:
                value.style = style
        return [first, *rest]

    def render(
        self,
        console: Console,
        scrollable: bool,
        cursor_index: int,
        items: Iterable[tuple[int, ItemNode]],
        search_text: str = "",
    ) -> Group:
        self._ensure_columns()
        items = list(items)
        renderables = []

        if self.title is not None:
            renderables.append(Text.from_markup(self.title))

        table = self._new_table()
        for index, node in items:
            table.add_row(*self._row(node, index == cursor_index))
        self._align_first_header(table, items)
        renderables.append(table)
        renderables.append(Text(""))

        if scrollable:
            more = self._or_theme(self.more_choices_text, self.theme.more_choices_text)
            renderables.append(Text.from_markup(more))

        instructions = self._or_theme(self.instructions_text, self.theme.instructions_text)
        renderables.append(Text.from_markup(instructions))

        return Group(*renderables)

    def selected_values(self) -> list[Any]:
        """Values the prompt would return now, in tree order."""
        nodes = self.tree.selected()
        if self.mode is SelectionMode.LEAF:
            nodes = [node for node in nodes if node.is_leaf]
        return [node.value for node in nodes]

    def _result(self, state: ListPromptState) -> list[Any]:
        return self.selected_values()
