# mynl/mynl_io/__init__.py
# I/O helpers: console, JSON persistence & input sources

from .console import console, err_console
from .generics import read_json_safe, write_json_safe, ensure_parent
from .source import open_source, read_lines, to_output_bytes

__all__ = [
    "console",
    "err_console",
    "read_json_safe",
    "write_json_safe",
    "ensure_parent",
    "open_source",
    "read_lines",
    "to_output_bytes",
]
