# mynl/core/verbose.py
# Verbose logging utilities - delegates to unified OutputManager w/ structured logging for stages, file I/O & resolved options

from __future__ import annotations

from pathlib import Path

from .output import get_output_manager, set_output_manager, OutputLevel
from .types import FormatConfig, LineRecord


# * Initialize verbose logging for a session
def init_verbose(
    enabled: bool = False,
    log_file: Path | None = None,
    dev_mode: bool = False,
    quiet: bool = False,
) -> None:
    if enabled and dev_mode:
        requested_level = OutputLevel.DEBUG
    elif enabled:
        requested_level = OutputLevel.VERBOSE
    else:
        requested_level = OutputLevel.NORMAL

    from ..cli.output_manager import OutputManager

    manager = OutputManager()
    manager.initialize(
        requested_level=requested_level,
        dev_mode=dev_mode,
        quiet=quiet,
        log_file=log_file,
    )
    set_output_manager(manager)


# * Core verbose logging function
def vlog(category: str, message: str, detail: str | None = None) -> None:
    get_output_manager().verbose(message, category, detail)


# * Log file read operation
def vlog_file_read(path: Path, size: int | None = None) -> None:
    size_str = f" ({size:,} bytes)" if size is not None else ""
    get_output_manager().verbose(f"Read: {path}{size_str}", "FILE")


# * Log file write operation
def vlog_file_write(path: Path, size: int | None = None) -> None:
    size_str = f" ({size:,} bytes)" if size is not None else ""
    get_output_manager().verbose(f"Write: {path}{size_str}", "FILE")


# * Log pipeline stage start
def vlog_stage(stage: str, description: str | None = None) -> None:
    if description:
        get_output_manager().verbose(f"{stage}: {description}", "STAGE")
    else:
        get_output_manager().verbose(stage, "STAGE")


# * Log the resolved formatting options for this run
def vlog_config(cfg: FormatConfig) -> None:
    manager = get_output_manager()
    if not manager.is_verbose_enabled():
        return
    detail = (
        f"Column: {cfg.comment_column}, Tab size: {cfg.tab_size}, "
        f"Symbols: {cfg.start_symbol!r} {cfg.end_symbol!r}, "
        f"Start line: {cfg.start_line_number}"
    )
    manager.verbose("Resolved options", "CONFIG", detail)


# * Print a warning (shown at NORMAL level & above)
def warn(message: str) -> None:
    get_output_manager().warning(message)


# * Trace one input line & its assigned number (dev mode only)
def dlog_record(record: LineRecord) -> None:
    manager = get_output_manager()
    if manager.is_debug_enabled():
        manager.debug(f"{record.line_number}: {record.raw_text!r}", "LINE")
