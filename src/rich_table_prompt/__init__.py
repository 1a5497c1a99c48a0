"""Rich table-based selection prompts.

Single and multi selection prompts that show hierarchical choices as a
multi-column Rich table, with optional search and cascading group selection.

Example:
    from rich_table_prompt import TableMultiSelectionPrompt

    prompt = TableMultiSelectionPrompt(title="What are your favorite fruits?")
    prompt.add_column("Name", str)
    prompt.add_column("Letters", lambda fruit: str(len(fruit)), justify="right")
    prompt.add_choice_group("Berries", ["Blueberry", "Mulberry"])
    prompt.add_choices("Apple", "Banana")
    fruits = prompt.show()  # ["Blueberry", "Apple"]
"""

from .columns import SelectionTableColumn, default_column
from .exceptions import (
    ConfigurationError,
    DetachedNodeError,
    DuplicateItemError,
    EmptyPromptError,
    ItemNotFoundError,
    NotInteractiveError,
    PromptCancelledError,
    TablePromptError,
)
from .markup import highlight, remove_markup
from .multi_selection_prompt import TableMultiSelectionPrompt
from .prompt import ListPrompt
from .selection import set_selected, toggle
from .selection_prompt import TableSelectionPrompt
from .state import ListPromptState
from .strategy import InputResult, ListPromptStrategy
from .themes import DEFAULT_THEME, UNICODE_THEME, Theme, get_theme
from .tree import ItemNode, ItemTree, SelectionMode
from .viewport import PAGE_SIZE_MINIMUM, calculate_page_size

__version__ = "0.1.0"

__all__ = [
    # Prompts
    "TableSelectionPrompt",
    "TableMultiSelectionPrompt",
    "SelectionTableColumn",
    "default_column",
    "SelectionMode",
    # Tree
    "ItemNode",
    "ItemTree",
    "set_selected",
    "toggle",
    # Loop contract
    "ListPrompt",
    "ListPromptState",
    "ListPromptStrategy",
    "InputResult",
    "calculate_page_size",
    "PAGE_SIZE_MINIMUM",
    # Markup
    "highlight",
    "remove_markup",
    # Theming
    "Theme",
    "DEFAULT_THEME",
    "UNICODE_THEME",
    "get_theme",
    # Errors
    "TablePromptError",
    "ConfigurationError",
    "DetachedNodeError",
    "DuplicateItemError",
    "ItemNotFoundError",
    "EmptyPromptError",
    "NotInteractiveError",
    "PromptCancelledError",
]
