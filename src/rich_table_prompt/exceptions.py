"""Errors raised by rich_table_prompt.

Configuration mistakes surface at setup time as ``ConfigurationError``.
A refused confirm keystroke is never an error; see ``InputResult.NONE``.
"""

from __future__ import annotations

from typing import Any


class TablePromptError(RuntimeError):
    """Base error for table prompt operations."""


class ConfigurationError(TablePromptError, ValueError):
    """Raised when a prompt is configured with an invalid value."""


class DuplicateItemError(ConfigurationError):
    """Raised when a value equal to an existing node is added to a tree."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Item already present in tree: {value!r}")


class ItemNotFoundError(TablePromptError, LookupError):
    """Raised when a lookup references a value that is not in the tree."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Item not found in tree: {value!r}")


class EmptyPromptError(TablePromptError):
    """Raised when a prompt is shown without any choices."""

    def __init__(self):
        super().__init__(
            "Cannot show an empty selection prompt. Add choices with add_choice() first."
        )


class NotInteractiveError(TablePromptError):
    """Raised when the console is not attached to an interactive terminal."""


class PromptCancelledError(TablePromptError):
    """Raised when a running prompt is cancelled between keystrokes."""


class DetachedNodeError(TablePromptError):
    """Raised when children are added to a node whose tree no longer exists."""
