"""Configuration, choices and shared rendering for table prompts.

``TablePrompt`` holds everything the two variants have in common: the item
tree, the columns, the page size and the styling overrides. Subclasses add
their own key handling, chrome and result shape.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from typing import Any, Callable, Iterable

from rich.console import Console
from rich.table import Table
from rich.text import Text

from . import viewport
from .columns import SelectionTableColumn, ValueGetter, default_column
from .exceptions import ConfigurationError
from .markup import plain_text, remove_markup, to_text
from .prompt import ListPrompt
from .state import ListPromptState
from .strategy import ListPromptStrategy
from .themes import Theme, get_theme
from .tree import Comparer, ItemNode, ItemTree, SelectionMode

logger = logging.getLogger(__name__)

INDENT_WIDTH = 2

TableConfigurator = Callable[[Table], None]


class TablePrompt(ListPromptStrategy):
    """Common base for single and multi selection table prompts.

    Args:
        title: Optional title markup shown above the table.
        page_size: Requested number of rows per page (at least 3).
        wrap_around: Wrap the cursor when moving past either end.
        mode: Leaf-only or independent selection.
        highlight_style: Style of the row under the cursor.
        more_choices_text: Hint shown when the list scrolls.
        configure_table: Callback receiving the ``rich.table.Table`` before
            columns are added (borders, expand, box, ...).
        theme: Theme providing default styles, glyphs and texts.
        comparer: Equality used to look values up in the tree.
    """

    multi_select = False
    skip_unselectable = False
    search_enabled = False

    def __init__(
        self,
        *,
        title: str | None = None,
        page_size: int = 10,
        wrap_around: bool = False,
        mode: SelectionMode = SelectionMode.LEAF,
        highlight_style: str | None = None,
        more_choices_text: str | None = None,
        configure_table: TableConfigurator | None = None,
        theme: Theme | None = None,
        comparer: Comparer | None = None,
    ):
        self.tree = ItemTree(comparer)
        self.columns: list[SelectionTableColumn] = []
        self.title = title
        self.page_size = page_size
        self.wrap_around = wrap_around
        self.mode = SelectionMode(mode)
        self.highlight_style = highlight_style
        self.more_choices_text = more_choices_text
        self.configure_table = configure_table
        self.theme = theme or get_theme()

    @property
    def page_size(self) -> int:
        return self._page_size

    @page_size.setter
    def page_size(self, value: int) -> None:
        if value < viewport.PAGE_SIZE_MINIMUM:
            raise ConfigurationError(
                f"Page size must be greater or equal to {viewport.PAGE_SIZE_MINIMUM}, got {value}"
            )
        self._page_size = value

    # ── choices ───────────────────────────────────────────────────────────

    def add_choice(self, value: Any) -> ItemNode:
        """Add a top-level choice and return its node (for ``add_child``)."""
        return self.tree.add(value)

    def add_choices(self, *values: Any) -> TablePrompt:
        """Add top-level choices; nothing is added if any value is a duplicate."""
        self.tree.check_new(values)
        for value in values:
            self.tree.add(value)
        return self

    def add_choice_group(self, group: Any, choices: Iterable[Any]) -> TablePrompt:
        """Add ``group`` as a top-level node with ``choices`` as its children.

        Raises:
            DuplicateItemError: ``group`` or a choice is already present, or
                repeats another value in the call. The tree is left unchanged.
        """
        choices = list(choices)
        self.tree.check_new([group, *choices])
        node = self.tree.add(group)
        for choice in choices:
            node.add_child(choice)
        return self

    def add_column(self, header: str, value_getter: ValueGetter, **options: Any) -> TablePrompt:
        """Add a column; ``options`` go to ``rich.table.Table.add_column``."""
        self.columns.append(SelectionTableColumn(header, value_getter, options))
        return self

    # ── rendering helpers ─────────────────────────────────────────────────

    def _ensure_columns(self) -> None:
        if not self.columns:
            self.columns.append(default_column())

    def _or_theme(self, override: str | None, fallback: str) -> str:
        return override if override is not None else fallback

    def search_key(self, node: ItemNode) -> list[str]:
        """Plain text of each column of ``node``, searched one by one."""
        self._ensure_columns()
        return [remove_markup(column.value_for(node.value)) for column in self.columns]

    def _new_table(self) -> Table:
        table = Table()
        if self.configure_table is not None:
            self.configure_table(table)
        for column in self.columns:
            table.add_column(column.header, **column.options)
        return table

    def _cell_values(self, node: ItemNode, current: bool) -> list[Text]:
        """Column texts for a row; plain on the current row."""
        values = [column.value_for(node.value) for column in self.columns]
        if current:
            return [plain_text(value) for value in values]
        return [to_text(value) for value in values]

    def _marker(self, current: bool) -> str:
        arrow = self.theme.arrow
        return arrow if current else " " * self.theme.arrow_width

    def _row_prefix(self, node: ItemNode, current: bool, style: str) -> Text:
        """Indentation plus cursor slot, styled as the row."""
        indent = " " * (node.depth * INDENT_WIDTH)
        return Text(f"{indent}{self._marker(current)} ", style=style)

    def header_left_padding(self, min_depth: int) -> int:
        """Cells the first column header is shifted by to line up with values."""
        return min_depth * INDENT_WIDTH + self.theme.arrow_width + 1

    def _align_first_header(self, table: Table, items: list[tuple[int, ItemNode]]) -> None:
        if not table.columns:
            return
        min_depth = min((node.depth for _, node in items), default=0)
        column = table.columns[0]
        padding = Text(" " * self.header_left_padding(min_depth))
        column.header = Text.assemble(padding, to_text(column.header))

    def calculate_page_size(
        self, console: Console, total_item_count: int, requested_page_size: int
    ) -> int:
        page_size = viewport.calculate_page_size(
            console.height,
            total_item_count,
            requested_page_size,
            has_title=self.title is not None,
            search_enabled=self.search_enabled,
            multi_select=self.multi_select,
        )
        if page_size != requested_page_size:
            logger.debug(
                "Page size reduced from %d to %d for terminal height %d",
                requested_page_size,
                page_size,
                console.height,
            )
        return page_size

    # ── running ───────────────────────────────────────────────────────────

    def _result(self, state: ListPromptState) -> Any:
        raise NotImplementedError

    def _show(self, console: Console | None, cancel_event: threading.Event | None) -> Any:
        console = console or Console()
        self._ensure_columns()
        state = ListPrompt(console, self).show(
            self.tree,
            self.mode,
            self.skip_unselectable,
            self.search_enabled,
            self.page_size,
            self.wrap_around,
            search_key=self.search_key,
            cancel_event=cancel_event,
        )
        return self._result(state)

    def show(self, console: Console | None = None) -> Any:
        """Display the prompt and block until the user submits."""
        return self._show(console, None)

    async def show_async(self, console: Console | None = None) -> Any:
        """Run ``show`` in a worker thread.

        Cancelling the awaiting task stops the prompt at the next keystroke.
        """
        cancel_event = threading.Event()
        try:
            return await asyncio.to_thread(self._show, console, cancel_event)
        except asyncio.CancelledError:
            cancel_event.set()
            raise
