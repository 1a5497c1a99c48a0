"""Pytest fixtures for rich-table-prompt tests."""

from __future__ import annotations

import io
from typing import Callable, Iterable

import pytest
import readchar
from rich.console import Console

from rich_table_prompt import TableMultiSelectionPrompt, TableSelectionPrompt
from rich_table_prompt.themes import THEME_ENV_VAR


@pytest.fixture
def terminal_console():
    """Console that claims to be an interactive terminal, writing to a buffer."""
    return Console(
        file=io.StringIO(),
        force_terminal=True,
        color_system=None,
        width=100,
        height=24,
    )


@pytest.fixture
def make_console() -> Callable[..., Console]:
    """Factory for buffered consoles of a given height."""

    def _make(height: int = 24, width: int = 100, terminal: bool = True) -> Console:
        return Console(
            file=io.StringIO(),
            force_terminal=terminal,
            color_system=None,
            width=width,
            height=height,
        )

    return _make


@pytest.fixture
def press_keys(monkeypatch) -> Callable[[Iterable[str]], None]:
    """Script the keys returned by readchar.readkey()."""

    def _press(keys: Iterable[str]) -> None:
        remaining = iter(keys)

        def _readkey() -> str:
            try:
                return next(remaining)
            except StopIteration:
                raise AssertionError("Prompt asked for more keys than scripted") from None

        monkeypatch.setattr(readchar, "readkey", _readkey)

    return _press


@pytest.fixture
def berries_prompt() -> TableMultiSelectionPrompt:
    """Multi-select with a Berries group of two and three top-level fruits."""
    prompt = TableMultiSelectionPrompt()
    prompt.add_choice_group("Berries", ["Blueberry", "Mulberry"])
    prompt.add_choices("Apple", "Banana", "Cherry")
    return prompt


@pytest.fixture
def search_prompt() -> TableSelectionPrompt:
    """Single-select with search over three fruits."""
    prompt = TableSelectionPrompt(search_enabled=True)
    prompt.add_column("Name", str)
    prompt.add_column("Upper", lambda fruit: fruit.upper())
    prompt.add_choices("Apple", "Banana", "Grape")
    return prompt


@pytest.fixture(autouse=True)
def _default_theme(monkeypatch):
    """Keep a user's theme override out of rendering assertions."""
    monkeypatch.delenv(THEME_ENV_VAR, raising=False)
