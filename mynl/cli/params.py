# mynl/cli/params.py
# CLI option definitions for the numbering command
# * Numeric options are taken as raw strings & parsed w/ safe_int so bad input
# * becomes a sentinel checked by range validation instead of a usage error

from __future__ import annotations

from typing import Any

import typer


def ColumnOpt() -> Any:
    return typer.Option(
        None,
        "--column",
        "-c",
        help="Column at which line numbers are added (1-120)",
        metavar="INT",
        show_default=False,
    )


def TabSizeOpt() -> Any:
    return typer.Option(
        None,
        "--tab-size",
        "-t",
        help="Spaces each tab expands to (0-39)",
        metavar="INT",
        show_default=False,
    )


def LineOpt() -> Any:
    return typer.Option(
        None,
        "--line",
        "-l",
        help="Starting line number",
        metavar="INT",
        show_default=False,
    )


def SymbolsOpt() -> Any:
    return typer.Option(
        None,
        "--symbols",
        "-s",
        help="Comment symbols to use: python, c or cpp",
        metavar="LANG",
        show_default=False,
    )


def FileOpt() -> Any:
    # existence is checked when the file is opened so the error can be reported
    return typer.Option(
        None,
        "--file",
        "-f",
        help="Read this file instead of standard input",
        show_default=False,
    )


def HelpOpt() -> Any:
    return typer.Option(False, "--help", "-h", help="Show help message & exit.")


def VerboseOpt() -> Any:
    return typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging on stderr"
    )


def LogFileOpt() -> Any:
    return typer.Option(
        None, "--log-file", help="Write verbose logs to file (enables verbose mode)"
    )


def QuietOpt() -> Any:
    return typer.Option(
        False, "--quiet", "-q", help="Suppress warnings (errors are still shown)"
    )
