"""Keystroke loop shared by both table prompt variants.

Reads keys with readchar, lets the strategy react first (confirm/toggle),
then applies navigation and search to the state and redraws with Rich.Live.
"""

from __future__ import annotations

import logging
import threading

import readchar
from rich.console import Console, RenderableType
from rich.live import Live

from .exceptions import EmptyPromptError, NotInteractiveError, PromptCancelledError
from .state import ListPromptState, SearchKey
from .strategy import InputResult, ListPromptStrategy
from .tree import ItemTree, SelectionMode

logger = logging.getLogger(__name__)


class ListPrompt:
    """Run one interactive prompt session on a console.

    Args:
        console: Console to draw on; must be a terminal.
        strategy: Prompt variant that sizes, handles keys and renders.
    """

    def __init__(self, console: Console, strategy: ListPromptStrategy):
        self.console = console
        self.strategy = strategy

    def _fit_page_size(self, state: ListPromptState, requested_page_size: int) -> None:
        state.page_size = self.strategy.calculate_page_size(
            self.console, state.item_count, requested_page_size
        )

    def _build(self, state: ListPromptState, requested_page_size: int) -> RenderableType:
        # Re-fit every frame so a resized terminal is picked up
        self._fit_page_size(state, requested_page_size)
        scrollable, window = state.visible_window()
        return self.strategy.render(
            self.console, scrollable, state.index, window, state.search_text
        )

    @staticmethod
    def _check_cancelled(cancel_event: threading.Event | None) -> None:
        if cancel_event is not None and cancel_event.is_set():
            logger.debug("Prompt cancelled between keystrokes")
            raise PromptCancelledError("Prompt was cancelled")

    def show(
        self,
        tree: ItemTree,
        mode: SelectionMode,
        skip_unselectable: bool,
        search_enabled: bool,
        page_size: int,
        wrap_around: bool,
        search_key: SearchKey | None = None,
        cancel_event: threading.Event | None = None,
    ) -> ListPromptState:
        """Block until the strategy submits; return the final state.

        Raises:
            NotInteractiveError: The console is not a terminal.
            EmptyPromptError: The tree has no nodes.
            PromptCancelledError: ``cancel_event`` was set.
        """
        if not self.console.is_terminal:
            raise NotInteractiveError(
                "Cannot show selection prompt since the current terminal isn't interactive."
            )

        nodes = list(tree.traverse())
        if not nodes:
            raise EmptyPromptError()

        state = ListPromptState(
            nodes,
            page_size,
            wrap_around=wrap_around,
            mode=mode,
            skip_unselectable=skip_unselectable,
            search_enabled=search_enabled,
            search_key=search_key,
        )

        with Live(
            self._build(state, page_size),
            console=self.console,
            auto_refresh=False,
            transient=True,
        ) as live:
            while True:
                self._check_cancelled(cancel_event)
                key = readchar.readkey()
                self._check_cancelled(cancel_event)

                result = self.strategy.handle_input(key, state)
                if result is InputResult.SUBMIT:
                    break
                if state.update(key) or result is InputResult.REFRESH:
                    live.update(self._build(state, page_size), refresh=True)

        return state
