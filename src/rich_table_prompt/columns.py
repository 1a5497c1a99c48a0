"""Column definitions for table prompts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from rich.markup import escape

ValueGetter = Callable[[Any], str]


@dataclass
class SelectionTableColumn:
    """One table column.

    Attributes:
        header: Header markup.
        value_getter: Returns the cell markup for an item's value.
        options: Keyword arguments forwarded to ``Table.add_column``
            (``justify``, ``style``, ``no_wrap``, ...).
    """

    header: str
    value_getter: ValueGetter
    options: dict[str, Any] = field(default_factory=dict)

    def value_for(self, value: Any) -> str:
        return self.value_getter(value)


def _stringify(value: Any) -> str:
    return escape(str(value))


def default_column() -> SelectionTableColumn:
    """Column used when a prompt defines none: the escaped ``str()`` of the value."""
    return SelectionTableColumn("Value", _stringify)
