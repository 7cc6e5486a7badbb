# mynl/core/validation.py
# Pure validation logic for numbering options (no I/O)

import re
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .constants import (
    BAD_INT,
    LANGUAGE_SYMBOLS,
    MAX_COMMENT_COLUMN,
    MAX_TAB,
    MIN_COMMENT_COLUMN,
    MIN_TAB,
)
from .exceptions import OptionsError
from .types import FormatConfig

# leading optional whitespace & sign followed by digits; trailing text ignored
_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


# * Standard result type for validation operations (pure data, no I/O)
@dataclass
class ValidationResult:
    is_valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


# * Fallible integer parse returning a sentinel instead of raising
def safe_int(text: Optional[str], bad_value: int = BAD_INT) -> int:
    # accepts a leading integer prefix ("12px" -> 12); anything else -> bad_value
    if text is None:
        return bad_value
    match = _INT_PREFIX.match(text)
    if match is None:
        return bad_value
    value = int(match.group(1))
    if not _INT32_MIN <= value <= _INT32_MAX:
        return bad_value
    return value


# * Comment column bounds validation
def validate_comment_column(column: int) -> tuple[bool, Optional[str]]:
    if column < MIN_COMMENT_COLUMN or column > MAX_COMMENT_COLUMN:
        return False, (
            f"Invalid comment column: {column}\n"
            f"Must be in range of {MIN_COMMENT_COLUMN} to {MAX_COMMENT_COLUMN}"
        )
    return True, None


# * Tab size bounds validation (upper bound exclusive)
def validate_tab_size(tab_size: int) -> tuple[bool, Optional[str]]:
    if tab_size < MIN_TAB or tab_size >= MAX_TAB:
        return False, (
            f"Bad tab size. Minimum is {MIN_TAB} and maximum is {MAX_TAB}"
        )
    return True, None


# * Look up comment symbols for a language; unknown names keep `current`
def resolve_comment_symbols(
    language: str, current: Tuple[str, str]
) -> tuple[Tuple[str, str], bool]:
    symbols = LANGUAGE_SYMBOLS.get(language)
    if symbols is None:
        return current, False
    return symbols, True


# * Validate already-parsed option values & collect every problem found
def validate_options(
    comment_column: int,
    tab_size: int,
    language: Optional[str] = None,
) -> ValidationResult:
    result = ValidationResult(is_valid=True)

    ok, err = validate_tab_size(tab_size)
    if not ok and err:
        result.errors.append(err)

    ok, err = validate_comment_column(comment_column)
    if not ok and err:
        result.errors.append(err)

    if language is not None and language not in LANGUAGE_SYMBOLS:
        known = ", ".join(LANGUAGE_SYMBOLS)
        result.warnings.append(
            f"Unknown language '{language}' (supported: {known}); "
            "keeping current comment symbols"
        )

    result.is_valid = not result.errors
    return result


# * Build the run's FormatConfig & warnings, or raise OptionsError listing all bad values
def build_format_config(
    comment_column: int,
    tab_size: int,
    start_line_number: int,
    language: Optional[str],
    default_symbols: Tuple[str, str],
) -> tuple[FormatConfig, list[str]]:
    result = validate_options(comment_column, tab_size, language)
    if not result.is_valid:
        raise OptionsError(result.errors)

    symbols = default_symbols
    if language is not None:
        symbols, _ = resolve_comment_symbols(language, default_symbols)

    start_symbol, end_symbol = symbols
    config = FormatConfig(
        comment_column=comment_column,
        tab_size=tab_size,
        start_symbol=start_symbol,
        end_symbol=end_symbol,
        start_line_number=start_line_number,
    )
    return config, result.warnings
