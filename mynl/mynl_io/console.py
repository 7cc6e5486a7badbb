# mynl/mynl_io/console.py
# Centralized console management for the entire mynl application

# Two consoles are shared by every module:
# - `console` writes to stdout (help text, config listings)
# - `err_console` writes to stderr (errors, warnings & verbose logs) so
#   numbered output on stdout stays clean for piping
#
# The _ConsoleProxy pattern allows reconfiguring/resetting without breaking
# module-level references. Tests: use reset_console() for isolation.

from __future__ import annotations
from typing import Any
from rich.console import Console


# proxy delegating to underlying Console instance; all Console methods forwarded via __getattr__
class _ConsoleProxy:
    __slots__ = ("_console",)

    def __init__(self, stderr: bool = False) -> None:
        self._console = Console(stderr=stderr)

    def __getattr__(self, name: str) -> Any:
        return getattr(self._console, name)

    def _set_console(self, new_console: Console) -> None:
        self._console = new_console

    def _get_console(self) -> Console:
        return self._console


console = _ConsoleProxy()
err_console = _ConsoleProxy(stderr=True)


# * Reset both consoles to default configuration (useful for tests)
def reset_console() -> Console:
    console._set_console(Console())
    err_console._set_console(Console(stderr=True))
    return console._get_console()


__all__ = [
    "console",
    "err_console",
    "reset_console",
]
