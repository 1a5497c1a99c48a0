"""Single selection table prompt."""

from __future__ import annotations

from typing import Any, Iterable

from rich.console import Console, Group
from rich.text import Text

from .keys import is_enter, is_space
from .markup import highlight
from .state import ListPromptState
from .strategy import InputResult
from .table_prompt import TablePrompt
from .tree import ItemNode, SelectionMode


class TableSelectionPrompt(TablePrompt):
    """Pick one value from a (possibly grouped) table.

    In leaf mode groups are shown disabled and the cursor skips them.
    With search enabled, typing jumps to the first matching row and
    highlights the match in every column.

    Example:
        prompt = TableSelectionPrompt(title="Pick a [green]fruit[/green]")
        prompt.add_column("Name", str)
        prompt.add_column("Letters", lambda fruit: str(len(fruit)), justify="right")
        prompt.add_choices("Apple", "Banana", "Grape")
        prompt.enable_search()
        fruit = prompt.show()

    Args:
        disabled_style: Style of groups that cannot be chosen in leaf mode.
        search_enabled: Whether typing searches the list.
        search_highlight_style: Style of the matched search text.
        search_placeholder_text: Search line shown before anything is typed.
        **options: See ``TablePrompt``.
    """

    skip_unselectable = True

    def __init__(
        self,
        *,
        disabled_style: str | None = None,
        search_enabled: bool = False,
        search_highlight_style: str | None = None,
        search_placeholder_text: str | None = None,
        **options: Any,
    ):
        super().__init__(**options)
        self.disabled_style = disabled_style
        self.search_enabled = search_enabled
        self.search_highlight_style = search_highlight_style
        self.search_placeholder_text = search_placeholder_text

    def enable_search(self) -> TableSelectionPrompt:
        self.search_enabled = True
        return self

    def disable_search(self) -> TableSelectionPrompt:
        self.search_enabled = False
        return self

    def handle_input(self, key: str, state: ListPromptState) -> InputResult:
        if is_enter(key) or is_space(key):
            # Groups are not choosable in leaf mode
            if state.current.is_group and self.mode is SelectionMode.LEAF:
                return InputResult.NONE
            return InputResult.SUBMIT
        return InputResult.NONE

    def _row(self, node: ItemNode, current: bool, search_text: str) -> list[Text]:
        theme = self.theme
        disabled = node.is_group and self.mode is SelectionMode.LEAF
        if disabled:
            style = self._or_theme(self.disabled_style, theme.disabled_style)
        elif current:
            style = self._or_theme(self.highlight_style, theme.highlight_style)
        else:
            style = ""

        values = self._cell_values(node, current)
        if search_text and not disabled:
            search_style = self._or_theme(self.search_highlight_style, theme.search_highlight_style)
            values = [highlight(value, search_text, search_style) for value in values]

        first = self._row_prefix(node, current, style)
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
            table.add_row(*self._row(node, index == cursor_index, search_text))
        self._align_first_header(table, items)
        renderables.append(table)

        if self.search_enabled or scrollable:
            renderables.append(Text(""))

        if self.search_enabled:
            if search_text:
                renderables.append(Text(search_text))
            else:
                placeholder = self._or_theme(
                    self.search_placeholder_text, self.theme.search_placeholder_text
                )
                renderables.append(Text.from_markup(placeholder))

        if scrollable:
            more = self._or_theme(self.more_choices_text, self.theme.more_choices_text)
            renderables.append(Text.from_markup(more))

        return Group(*renderables)

    def _result(self, state: ListPromptState) -> Any:
        return state.current.value
