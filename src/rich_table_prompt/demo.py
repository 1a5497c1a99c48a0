"""Fruit picker demo: ``python -m rich_table_prompt``."""

from __future__ import annotations

import argparse
import logging
import sys

from rich import box
from rich.console import Console
from rich.table import Table

from . import __version__
from .exceptions import TablePromptError
from .multi_selection_prompt import TableMultiSelectionPrompt
from .selection_prompt import TableSelectionPrompt
from .themes import available_themes, get_theme
from .tree import SelectionMode

BERRIES = [
    "Blackcurrant", "Blueberry", "Cloudberry",
    "Elderberry", "Honeyberry", "Mulberry",
]

FRUITS = [
    "Apple", "Apricot", "Avocado", "Banana",
    "Cherry", "Cocunut", "Date", "Dragonfruit", "Durian",
    "Egg plant", "Fig", "Grape", "Guava",
    "Jackfruit", "Jambul", "Kiwano", "Kiwifruit", "Lime", "Lylo",
    "Lychee", "Melon", "Nectarine", "Orange", "Olive",
]


def letter_count(fruit: str) -> str:
    """Letter count, emphasised for long names."""
    if len(fruit) > 5:
        return f"[red bold]{len(fruit)}[/red bold]"
    return str(len(fruit))


def _heavy_border(table: Table) -> None:
    table.box = box.SIMPLE_HEAVY
    table.border_style = "yellow"
    table.expand = True


def build_favorites_prompt(args: argparse.Namespace) -> TableMultiSelectionPrompt:
    prompt = TableMultiSelectionPrompt(
        title="What are your [green]favorite fruits[/green]?",
        page_size=args.page_size,
        wrap_around=args.wrap,
        mode=SelectionMode(args.mode),
        required=not args.optional,
        configure_table=_heavy_border,
        theme=get_theme(args.theme),
        more_choices_text="[grey50](Move up and down to reveal more fruits)[/grey50]",
        instructions_text=(
            "[grey50](Press [blue]<space>[/blue] to toggle a fruit, "
            "[green]<enter>[/green] to accept)[/grey50]"
        ),
    )
    prompt.add_column("[bold]Name[/bold]", str)
    prompt.add_column("[bold]Nb Letters[/bold]", letter_count, justify="right")
    prompt.add_choice_group("Berries", BERRIES)
    prompt.add_choices(*FRUITS)
    return prompt


def build_single_prompt(args: argparse.Namespace, fruits: list[str]) -> TableSelectionPrompt:
    prompt = TableSelectionPrompt(
        title="Ok, but if you could only choose [green]one[/green]?",
        page_size=args.page_size,
        wrap_around=args.wrap,
        search_enabled=True,
        configure_table=lambda table: setattr(table, "box", box.SIMPLE_HEAVY),
        theme=get_theme(args.theme),
        more_choices_text="[grey50](Move up and down to reveal more fruits)[/grey50]",
    )
    prompt.add_column("Name", str)
    prompt.add_column("Nb letters", letter_count, justify="right")
    prompt.add_choices(*fruits)
    return prompt


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rich-table-prompt",
        description="Pick fruits from a Rich table prompt",
    )
    parser.add_argument("--version", action="version", version=f"rich-table-prompt {__version__}")
    parser.add_argument("--page-size", type=int, default=10, help="Rows per page (min 3)")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in SelectionMode],
        default=SelectionMode.LEAF.value,
        help="Selection granularity for the multi-select",
    )
    parser.add_argument("--optional", action="store_true", help="Allow accepting no fruit")
    parser.add_argument("--wrap", action="store_true", help="Wrap the cursor around the list")
    parser.add_argument("--theme", choices=available_themes(), help="Visual theme")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    console = Console()
    try:
        favorites = build_favorites_prompt(args).show(console)
        fruit = favorites[0] if len(favorites) == 1 else None
        if not fruit:
            if not favorites:
                console.print("[yellow]No fruit selected.[/yellow]")
                return 0
            fruit = build_single_prompt(args, favorites).show(console)
    except TablePromptError as e:
        console.print(f"[red]Error:[/red] {e}")
        return 1
    except KeyboardInterrupt:
        console.print()
        return 130

    console.print(f"You selected: [yellow]{fruit}[/yellow]")
    return 0


if __name__ == "__main__":
    sys.exit(main())
