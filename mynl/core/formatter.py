# mynl/core/formatter.py
# Per-line formatting policy: tab expansion, column padding & trailing line-number comment
# * Pure functions only; reading input & writing output live in the CLI layer

from __future__ import annotations

from typing import Iterable, Iterator

from .types import FormatConfig, LineRecord


# * Replace every tab w/ a fixed run of spaces (not tab-stop expansion)
def expand_tabs(raw: str, tab_size: int) -> str:
    # leftmost-first replacement; each tab becomes exactly tab_size spaces
    return raw.replace("\t", " " * tab_size)


# * Pad text on the right to the comment column; never truncates
def align_to_column(text: str, comment_column: int) -> str:
    aligned = text.ljust(comment_column)
    # overflowing lines still need a separator before the comment
    if len(aligned) > comment_column and not aligned.endswith(" "):
        aligned += " "
    return aligned


# * Build the trailing comment, e.g. "// 12 " or "/* 12 */"
def annotation(cfg: FormatConfig, line_number: int) -> str:
    return f"{cfg.start_symbol} {line_number} {cfg.end_symbol}"


# * Format a single raw line (without terminator) for output
def format_line(raw: str, cfg: FormatConfig, line_number: int) -> str:
    expanded = expand_tabs(raw, cfg.tab_size)
    return align_to_column(expanded, cfg.comment_column) + annotation(cfg, line_number)


# * Pair raw lines w/ consecutive line numbers starting at `start`
def iter_records(lines: Iterable[str], start: int = 1) -> Iterator[LineRecord]:
    for line_number, raw in enumerate(lines, start=start):
        yield LineRecord(raw_text=raw, line_number=line_number)


# * Format every line of an input stream, numbering from cfg.start_line_number
def number_lines(lines: Iterable[str], cfg: FormatConfig) -> Iterator[str]:
    for record in iter_records(lines, cfg.start_line_number):
        yield format_line(record.raw_text, cfg, record.line_number)
