# mynl/cli/output_manager.py
# Unified output management implementation for debug, verbose & quiet modes

# * Real implementation w/ Rich console output on stderr & file logging
# * Registered via set_output_manager() at CLI startup
# * Respects layering: this module can import from mynl_io, config

from __future__ import annotations

import time
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from rich.markup import escape

from ..core.output import OutputLevel


class OutputManager:
    # Real output manager w/ console & file logging support
    # Implements OutputInterface protocol for use w/ core registry
    # Diagnostics go to stderr so stdout carries only numbered lines

    def __init__(self) -> None:
        self._level = OutputLevel.NORMAL
        self._dev_mode = False
        self._session_start: float | None = None
        self._log_file_path: Path | None = None
        self._log_file_handle: Any = None

    def initialize(
        self,
        requested_level: OutputLevel = OutputLevel.NORMAL,
        dev_mode: bool = False,
        quiet: bool = False,
        log_file: Path | None = None,
    ) -> None:
        # Args: requested_level (desired output level), dev_mode (required for DEBUG),
        # quiet (forces QUIET level), log_file (optional path to write logs)
        self._dev_mode = dev_mode
        self._level = self._compute_effective_level(requested_level, dev_mode, quiet)
        self._session_start = time.time()
        self._setup_log_file(log_file)
        self._start_session()

    def _compute_effective_level(
        self, requested: OutputLevel, dev_mode: bool, quiet: bool
    ) -> OutputLevel:
        # Precedence: 1. quiet overrides everything -> QUIET
        # 2. DEBUG requires dev_mode -> cap at VERBOSE if not dev_mode
        # 3. Otherwise use requested level
        if quiet:
            return OutputLevel.QUIET
        max_allowed = OutputLevel.DEBUG if dev_mode else OutputLevel.VERBOSE
        return min(requested, max_allowed)

    # OutputInterface implementation

    def get_level(self) -> OutputLevel:
        return self._level

    def is_debug_enabled(self) -> bool:
        return self._level >= OutputLevel.DEBUG

    def is_verbose_enabled(self) -> bool:
        return self._level >= OutputLevel.VERBOSE

    def debug(self, msg: str, category: str = "DEBUG", **kwargs: Any) -> None:
        if self._level >= OutputLevel.DEBUG:
            from ..mynl_io.console import err_console

            err_console.print(f"[magenta]\\[{category}][/] {escape(msg)}", **kwargs)
            self._write_to_file(f"[{self._elapsed()}] [{category}] {msg}")

    def verbose(
        self,
        msg: str,
        category: str = "INFO",
        detail: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        if self._level >= OutputLevel.VERBOSE:
            from ..mynl_io.console import err_console

            prefix = f"[dim]\\[{self._elapsed()}][/] [bold cyan]\\[{category}][/]"
            err_console.print(f"{prefix} {escape(msg)}", soft_wrap=True, **kwargs)
            if detail:
                for line in detail.split("\n"):
                    err_console.print(f"  [dim]{escape(line)}[/]")
            # File logging (plain text)
            self._write_to_file(f"[{self._elapsed()}] [{category}] {msg}")
            if detail:
                for line in detail.split("\n"):
                    self._write_to_file(f"  {line}")

    def warning(self, msg: str, **kwargs: Any) -> None:
        if self._level >= OutputLevel.NORMAL:
            from ..mynl_io.console import err_console

            err_console.print(f"[yellow]Warning:[/] {escape(msg)}", soft_wrap=True, **kwargs)
        self._write_to_file(f"[{self._elapsed()}] [WARN] {msg}")

    def end_session(self) -> None:
        if self._log_file_handle:
            self._write_to_file(f"\n{'='*60}")
            self._write_to_file(f"Session Ended: {datetime.now().isoformat()}")
            self._write_to_file(f"{'='*60}\n")
        self.cleanup()

    # File logging

    def _start_session(self) -> None:
        if self._log_file_handle:
            self._write_to_file(f"\n{'='*60}")
            self._write_to_file(f"Session Started: {datetime.now().isoformat()}")
            self._write_to_file(f"Level: {self._level.name}")
            if self._dev_mode:
                self._write_to_file("Mode: Developer (dev_mode enabled)")
            self._write_to_file(f"{'='*60}\n")

    def _elapsed(self) -> str:
        if self._session_start is None:
            return "0.00s"
        return f"{time.time() - self._session_start:.2f}s"

    def _setup_log_file(self, log_file: Path | None) -> None:
        self.cleanup()
        self._log_file_path = log_file
        if log_file is not None:
            try:
                log_file.parent.mkdir(parents=True, exist_ok=True)
                self._log_file_handle = open(log_file, "a", encoding="utf-8")
            except OSError as e:
                from ..mynl_io.console import err_console

                err_console.print(
                    f"[yellow]Warning:[/] could not open log file {escape(str(log_file))}: {escape(str(e))}"
                )
                self._log_file_path = None
                self._log_file_handle = None

    def _write_to_file(self, msg: str) -> None:
        if self._log_file_handle is not None:
            self._log_file_handle.write(f"{msg}\n")
            self._log_file_handle.flush()

    def cleanup(self) -> None:
        if self._log_file_handle is not None:
            self._log_file_handle.close()
            self._log_file_handle = None
