# mynl/ui/help.py
# Branded help screen for the numbering command w/ Rich panels & tables

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table

from ..core.constants import (
    DEFAULT_COMMENT_COLUMN,
    DEFAULT_LANGUAGE,
    DEFAULT_START_LINE,
    DEFAULT_TAB_SIZE,
    LANGUAGE_SYMBOLS,
    MAX_COMMENT_COLUMN,
    MAX_TAB,
)
from ..mynl_io.console import console

# (flags, argument, meaning, default)
HELP_OPTIONS: list[tuple[str, str, str, str]] = [
    ("-c, --column", "int", f"column at which line numbers will be added (1-{MAX_COMMENT_COLUMN})", str(DEFAULT_COMMENT_COLUMN)),
    ("-l, --line", "int", "starting line number", str(DEFAULT_START_LINE)),
    ("-s, --symbols", "string", "specifies symbols for comments (see below)", DEFAULT_LANGUAGE),
    ("-t, --tab-size", "int", f"tab size (0-{MAX_TAB - 1})", str(DEFAULT_TAB_SIZE)),
    ("-f, --file", "path", "read this file instead of standard input", "stdin"),
    ("-v, --verbose", "none", "log diagnostics on stderr", ""),
    ("-q, --quiet", "none", "suppress warnings (errors are still shown)", ""),
    ("--log-file", "path", "also write diagnostics to a file", ""),
    ("-h, --help", "none", "prints this help and exits", ""),
]


def _options_table() -> Table:
    table = Table(show_header=True, header_style="bold cyan", box=None, padding=(0, 2))
    table.add_column("Option", style="bold", no_wrap=True)
    table.add_column("Argument", style="dim")
    table.add_column("Meaning")
    table.add_column("Default", style="dim")
    for flags, arg, meaning, default in HELP_OPTIONS:
        table.add_row(flags, arg, meaning, default)
    return table


def _languages_table() -> Table:
    table = Table(show_header=True, header_style="bold cyan", box=None, padding=(0, 2))
    table.add_column("Language", style="bold")
    table.add_column("Start")
    table.add_column("End")
    for name, (start, end) in LANGUAGE_SYMBOLS.items():
        table.add_row(name, start, end or "-")
    return table


# * Render the main help screen
def show_main_help() -> None:
    console.print()
    console.print(
        "[bold]mynl[/] - a tool to add TRAILING line numbers suitable for preparing "
        "code or other text for inclusion in documentation or code blocks "
        "such as those used in github markdown."
    )
    console.print()
    console.print(
        Panel(
            "[bold]mynl[/] [dim]<options>[/] [dim]< input[/]\n"
            "[bold]mynl config[/] [dim]<command>[/]",
            title="Usage",
            title_align="left",
            border_style="cyan",
        )
    )
    console.print(_options_table())
    console.print()
    console.print("[bold]Supported languages[/] (strings to follow [bold]-s[/]):")
    console.print(_languages_table())
    console.print()
    console.print(
        "If a line is long, a space will be added if needed to set the line number."
    )
    console.print(
        "[dim]Defaults can be changed w/[/] [bold]mynl config set <key> <value>[/]"
    )
    console.print()
