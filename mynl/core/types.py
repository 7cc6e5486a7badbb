# mynl/core/types.py
# Shared data types for the line formatter

from __future__ import annotations

from dataclasses import dataclass


# * Formatting parameters fixed for the whole run
@dataclass(frozen=True)
class FormatConfig:
    comment_column: int
    tab_size: int
    start_symbol: str
    end_symbol: str
    start_line_number: int = 1


# * One input line paired w/ its assigned line number
@dataclass(frozen=True)
class LineRecord:
    raw_text: str
    line_number: int
