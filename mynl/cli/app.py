# mynl/cli/app.py
# Root Typer application: numbering options on the root callback & command registration

from __future__ import annotations

from contextlib import ExitStack
from pathlib import Path
from typing import Optional, TextIO

import typer
from dotenv import load_dotenv

# load environment variables once at startup (MYNL_CONFIG may live in .env)
load_dotenv()

from ..config.settings import settings_manager, get_settings, MynlSettings
from ..core.constants import EXIT_CODE
from ..core.exceptions import FileReadError, OptionsError
from ..core.formatter import format_line, iter_records
from ..core.output import get_output_manager
from ..core.types import FormatConfig
from ..core.validation import build_format_config, safe_int
from ..core.verbose import dlog_record, init_verbose, vlog_config, vlog_stage, warn
from ..mynl_io.source import open_source, read_lines, to_output_bytes
from .decorators import handle_mynl_error
from .params import (
    ColumnOpt,
    FileOpt,
    HelpOpt,
    LineOpt,
    LogFileOpt,
    QuietOpt,
    SymbolsOpt,
    TabSizeOpt,
    VerboseOpt,
)


app = typer.Typer(
    rich_markup_mode="rich",
    add_completion=False,
    no_args_is_help=False,
    context_settings={"help_option_names": ["--help", "-h"]},
)


# * Merge CLI values over settings & validate everything before reading input
def resolve_format_config(
    settings: MynlSettings,
    column: Optional[str],
    tab_size: Optional[str],
    line: Optional[str],
    symbols: Optional[str],
) -> FormatConfig:
    comment_column = safe_int(column) if column is not None else settings.comment_column
    tabs = safe_int(tab_size) if tab_size is not None else settings.tab_size
    # start line is never range checked; unparsable input numbers from -1
    start_line = safe_int(line) if line is not None else settings.start_line

    cfg, warnings = build_format_config(
        comment_column=comment_column,
        tab_size=tabs,
        start_line_number=start_line,
        language=symbols,
        default_symbols=settings.symbols,
    )
    for message in warnings:
        warn(message)
    return cfg


# * Number every line of the input & write it to stdout
def run_numbering(cfg: FormatConfig, stream: TextIO) -> int:
    vlog_config(cfg)
    count = 0
    for record in iter_records(read_lines(stream), cfg.start_line_number):
        dlog_record(record)
        formatted = format_line(record.raw_text, cfg, record.line_number)
        # bytes bypass ANSI stripping & restore undecodable input bytes
        typer.echo(to_output_bytes(formatted))
        count += 1
    vlog_stage("Done", f"{count} lines")
    return count


# * Load settings, then number input unless a subcommand was given
@app.callback(invoke_without_command=True)
@handle_mynl_error
def main_callback(
    ctx: typer.Context,
    column: Optional[str] = ColumnOpt(),
    tab_size: Optional[str] = TabSizeOpt(),
    line: Optional[str] = LineOpt(),
    symbols: Optional[str] = SymbolsOpt(),
    file: Optional[Path] = FileOpt(),
    help: bool = HelpOpt(),
    verbose: bool = VerboseOpt(),
    log_file: Optional[Path] = LogFileOpt(),
    quiet: bool = QuietOpt(),
) -> None:
    # respect injected ctx.obj from tests/embedding; only load if absent
    if getattr(ctx, "obj", None) is None:
        ctx.obj = settings_manager.load()
    settings = get_settings(ctx)

    # log_file implies verbose mode
    init_verbose(
        enabled=verbose or log_file is not None,
        log_file=log_file,
        dev_mode=settings.dev_mode,
        quiet=quiet,
    )
    ctx.call_on_close(get_output_manager().end_session)

    if help:
        from ..ui.help import show_main_help

        show_main_help()
        raise typer.Exit(EXIT_CODE)

    if ctx.invoked_subcommand is not None:
        return

    # option & file errors are collected so one run reports all of them
    errors: list[str] = []
    cfg: Optional[FormatConfig] = None
    try:
        cfg = resolve_format_config(settings, column, tab_size, line, symbols)
    except OptionsError as e:
        errors.extend(e.errors)

    with ExitStack() as stack:
        try:
            stream = stack.enter_context(open_source(file))
        except FileReadError as e:
            errors.append(str(e))
        if errors or cfg is None:
            raise OptionsError(errors)

        vlog_stage("Numbering", "stdin" if file is None else str(file))
        run_numbering(cfg, stream)


# ! import command modules here to avoid circular import w/ app object
from .commands import config as _config  # noqa: F401, E402
