# mynl/mynl_io/source.py
# Input sources: a named file or standard input, read line by line
# * Lines split on "\n" only & undecodable bytes round-trip via surrogateescape

from __future__ import annotations

import io
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, TextIO

from ..core.exceptions import FileReadError
from ..core.verbose import vlog, vlog_file_read

ENCODING = "utf-8"
ERRORS = "surrogateescape"


# * Open the input for a run; stdin is used (and left open) when path is None
@contextmanager
def open_source(path: Optional[Path]) -> Iterator[TextIO]:
    if path is None:
        vlog("FILE", "Reading from standard input")
        buffer = getattr(sys.stdin, "buffer", None)
        if buffer is None:
            # already a text stream w/o bytes underneath (embedding, tests)
            yield sys.stdin
            return
        wrapper = io.TextIOWrapper(buffer, encoding=ENCODING, errors=ERRORS, newline="\n")
        try:
            yield wrapper
        finally:
            # detach so closing the wrapper never closes stdin
            wrapper.detach()
        return

    try:
        handle = open(path, "r", encoding=ENCODING, errors=ERRORS, newline="\n")
    except OSError as e:
        reason = e.strerror or str(e)
        raise FileReadError(f"File: {path} could not be opened.\n{path}: {reason}", path) from e

    size = path.stat().st_size if path.is_file() else None
    vlog_file_read(path, size)
    with handle:
        yield handle


# * Yield raw lines w/o terminators; a read failure ends input early
def read_lines(stream: TextIO) -> Iterator[str]:
    try:
        for line in stream:
            yield line[:-1] if line.endswith("\n") else line
    except OSError as e:
        # mid-stream failures are treated as end-of-input
        vlog("FILE", f"Input ended early: {e}")


# * Encode a formatted line back to the input's bytes
def to_output_bytes(text: str) -> bytes:
    return text.encode(ENCODING, ERRORS)
