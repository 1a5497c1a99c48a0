"""The contract between the prompt loop and a prompt variant.

A variant sizes the page, reacts to confirm/toggle keys and renders a frame.
There are exactly two variants: single and multi selection.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from rich.console import Console, RenderableType

from .state import ListPromptState
from .tree import ItemNode


class InputResult(str, Enum):
    """Outcome of a keystroke as seen by a prompt variant."""

    NONE = "none"
    REFRESH = "refresh"
    SUBMIT = "submit"

    def __str__(self) -> str:
        return self.value


class ListPromptStrategy:
    """Base class for prompt variants driven by ``ListPrompt``."""

    def calculate_page_size(
        self, console: Console, total_item_count: int, requested_page_size: int
    ) -> int:
        """Return how many rows fit on ``console`` around the prompt chrome."""
        raise NotImplementedError

    def handle_input(self, key: str, state: ListPromptState) -> InputResult:
        """React to a keystroke before the loop applies cursor movement."""
        raise NotImplementedError

    def render(
        self,
        console: Console,
        scrollable: bool,
        cursor_index: int,
        items: Iterable[tuple[int, ItemNode]],
        search_text: str = "",
    ) -> RenderableType:
        """Render the visible ``(index, node)`` window as one frame."""
        raise NotImplementedError
