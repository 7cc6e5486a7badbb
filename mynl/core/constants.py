# mynl/core/constants.py
# Limits, defaults & language comment symbols for line numbering

from typing import Dict, Tuple


# * Option limits (tab size upper bound is exclusive)
MAX_COMMENT_COLUMN = 120
MIN_COMMENT_COLUMN = 1
MAX_TAB = 40
MIN_TAB = 0

# * Built-in defaults used when neither CLI nor settings provide a value
DEFAULT_COMMENT_COLUMN = 72
DEFAULT_TAB_SIZE = 4
DEFAULT_START_LINE = 1
DEFAULT_LANGUAGE = "cpp"

# sentinel returned by safe_int for unparsable integers
BAD_INT = -1

# exit status for the numbering command, also used on force-exit
EXIT_CODE = 0


# * Language name -> (start symbol, end symbol)
LANGUAGE_SYMBOLS: Dict[str, Tuple[str, str]] = {
    "python": ("#", ""),
    "c": ("/*", "*/"),
    "cpp": ("//", ""),
}
