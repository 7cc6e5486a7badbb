# mynl/mynl_io/generics.py
# Generic utilities for JSON persistence & filesystem helpers

from pathlib import Path
from typing import Any, Union
import json

from ..core.exceptions import FileWriteError, JSONParsingError
from ..core.verbose import vlog_file_read, vlog_file_write


def ensure_parent(path: Union[Path, str]) -> None:
    # create parent directories for any file path
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)


# write JSON w/ UTF-8 encoding, creating parent dirs as needed
def write_json_safe(obj: dict[str, Any], path: Path) -> None:
    content = json.dumps(obj, indent=2)
    try:
        ensure_parent(path)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise FileWriteError(f"Could not write {path}: {e}", path) from e
    vlog_file_write(path, len(content))


# read JSON w/ UTF-8 encoding, return dict
def read_json_safe(path: Path) -> dict[str, Any]:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise JSONParsingError(f"Error reading JSON from {path}: {e}") from e
    vlog_file_read(path, len(text))
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        # show a trimmed, numbered snippet around the offending line
        lines = text.split("\n")
        line_num = e.lineno - 1
        snippet_start = max(0, line_num - 2)
        snippet_end = min(len(lines), line_num + 3)

        numbered_lines = []
        for i, line in enumerate(lines[snippet_start:snippet_end], start=snippet_start + 1):
            marker = ">>> " if i == e.lineno else "    "
            numbered_lines.append(f"{marker}{i:3}: {line}")

        snippet = "\n".join(numbered_lines)
        raise JSONParsingError(f"Invalid JSON in {path}:\n{snippet}\nError: {e.msg}") from e
    if not isinstance(data, dict):
        raise JSONParsingError(f"Expected a JSON object in {path}")
    return data
