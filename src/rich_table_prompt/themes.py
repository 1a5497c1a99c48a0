"""Configurable themes for table prompts.

This module provides theming support for prompt styling. The Theme dataclass
holds every configurable visual element (styles, glyphs, chrome texts).
Per-prompt overrides such as ``highlight_style`` take precedence over the theme.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from rich.cells import cell_len
from rich.text import Text

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

THEME_ENV_VAR = "TABLE_PROMPT_THEME"


@dataclass(frozen=True)
class Theme:
    """Visual theme for table prompts.

    Styles use Rich style syntax (e.g. "blue", "bold on yellow", "grey50").
    Texts use Rich markup.

    Attributes:
        name: Theme identifier used by ``get_theme``.
        highlight_style: Style of the row under the cursor.
        disabled_style: Style of groups that cannot be chosen in leaf mode.
        search_highlight_style: Style applied to the matched search substring.
        checkbox_mark_style: Style of the mark inside a selected checkbox.
        group_mark_style: Style of the mark inside a selected group checkbox.

        arrow: Cursor marker shown at the start of the current row.
        checkbox_open: Left bracket of the checkbox glyph.
        checkbox_close: Right bracket of the checkbox glyph.
        checkbox_mark: Mark shown inside a selected checkbox.

        instructions_text: Multi-select instructions line.
        more_choices_text: Hint shown when the list is scrollable.
        search_placeholder_text: Shown on the search line before typing.
    """

    name: str = "default"

    # Styles
    highlight_style: str = "blue"
    disabled_style: str = "grey50"
    search_highlight_style: str = "bold default on yellow"
    checkbox_mark_style: str = "blue"
    group_mark_style: str = "grey50"

    # Glyphs
    arrow: str = ">"
    checkbox_open: str = "["
    checkbox_close: str = "]"
    checkbox_mark: str = "X"

    # Chrome
    instructions_text: str = (
        "[grey50](Press [blue]<space>[/blue] to toggle a choice and "
        "[green]<enter>[/green] to accept)[/grey50]"
    )
    more_choices_text: str = "[grey50](Move up and down to reveal more choices)[/grey50]"
    search_placeholder_text: str = "[grey50](Type to search)[/grey50]"

    def __post_init__(self):
        if cell_len(self.checkbox_mark) != 1:
            raise ConfigurationError(
                f"Checkbox mark must be one cell wide, got {self.checkbox_mark!r}"
            )
        if not self.arrow:
            raise ConfigurationError("Cursor arrow must not be empty")

    @property
    def arrow_width(self) -> int:
        return cell_len(self.arrow)

    @property
    def checkbox_width(self) -> int:
        return cell_len(self.checkbox_open) + 1 + cell_len(self.checkbox_close)

    def checkbox(self, selected: bool, cascaded: bool = False) -> Text:
        """Return the checkbox glyph for a row.

        Args:
            selected: Whether the row is selected.
            cascaded: Whether the row is a group whose state is derived
                from its children (leaf mode).
        """
        if not selected:
            return Text(f"{self.checkbox_open} {self.checkbox_close}")
        mark_style = self.group_mark_style if cascaded else self.checkbox_mark_style
        return Text.assemble(
            self.checkbox_open, (self.checkbox_mark, mark_style), self.checkbox_close
        )


DEFAULT_THEME = Theme()

UNICODE_THEME = Theme(
    name="unicode",
    highlight_style="bold cyan",
    checkbox_mark_style="green",
    arrow="❯",
    checkbox_mark="✓",
    instructions_text=(
        "[dim]space toggle · ↵ accept · ↑↓ navigate[/dim]"
    ),
    more_choices_text="[dim]↑↓ more choices[/dim]",
    search_placeholder_text="[dim]type to search[/dim]",
)

_THEMES: dict[str, Theme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    UNICODE_THEME.name: UNICODE_THEME,
}


def _normalize_theme_key(value: str) -> str:
    return value.strip().lower().replace("_", "-")


def available_themes() -> list[str]:
    return sorted(_THEMES)


def get_theme(name: str | None = None) -> Theme:
    """Resolve a theme by name (or env override).

    ``TABLE_PROMPT_THEME`` wins over ``name``. Unknown names fall back to the
    default theme with a warning.
    """
    requested = os.environ.get(THEME_ENV_VAR) or name
    if not requested:
        return DEFAULT_THEME

    key = _normalize_theme_key(requested)
    theme = _THEMES.get(key)
    if theme is None:
        logger.warning("Unknown theme %r, using %r", requested, DEFAULT_THEME.name)
        return DEFAULT_THEME
    return theme
