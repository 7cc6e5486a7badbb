# mynl/config/settings.py
# Persisted defaults for line numbering (column, tab size, language, start line)

import os
from pathlib import Path
from typing import Dict, Any, Optional, Tuple, cast
import typer
from dataclasses import dataclass, asdict, fields, replace

from ..mynl_io.generics import read_json_safe, write_json_safe
from ..core.constants import (
    DEFAULT_COMMENT_COLUMN,
    DEFAULT_LANGUAGE,
    DEFAULT_START_LINE,
    DEFAULT_TAB_SIZE,
    LANGUAGE_SYMBOLS,
)
from ..core.exceptions import JSONParsingError, SettingsValidationError
from ..core.validation import validate_comment_column, validate_tab_size

# environment variable overriding the config file location
CONFIG_ENV_VAR = "MYNL_CONFIG"


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# * Default settings dataclass; used when CLI options are omitted
@dataclass
class MynlSettings:
    comment_column: int = DEFAULT_COMMENT_COLUMN
    tab_size: int = DEFAULT_TAB_SIZE
    # key into LANGUAGE_SYMBOLS
    language: str = DEFAULT_LANGUAGE
    start_line: int = DEFAULT_START_LINE

    # dev mode setting (allows DEBUG output w/ --verbose)
    dev_mode: bool = False

    def __post_init__(self) -> None:
        if not _is_int(self.comment_column):
            raise ValueError(
                f"comment_column must be an integer, got {type(self.comment_column).__name__}"
            )
        ok, err = validate_comment_column(self.comment_column)
        if not ok:
            raise ValueError(str(err).replace("\n", ". "))

        if not _is_int(self.tab_size):
            raise ValueError(
                f"tab_size must be an integer, got {type(self.tab_size).__name__}"
            )
        ok, err = validate_tab_size(self.tab_size)
        if not ok:
            raise ValueError(str(err))

        if self.language not in LANGUAGE_SYMBOLS:
            valid = ", ".join(sorted(LANGUAGE_SYMBOLS))
            raise ValueError(f"language must be one of {valid}, got '{self.language}'")

        if not _is_int(self.start_line):
            raise ValueError(
                f"start_line must be an integer, got {type(self.start_line).__name__}"
            )

        # strict bool validation (no coercion)
        if not isinstance(self.dev_mode, bool):
            raise ValueError(
                f"dev_mode must be a boolean (true/false), "
                f"got {type(self.dev_mode).__name__}: {self.dev_mode}"
            )

    @property
    def symbols(self) -> Tuple[str, str]:
        return LANGUAGE_SYMBOLS[self.language]


def _default_config_path() -> Path:
    override = os.getenv(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".mynl" / "config.json"


# * Settings management class w/ JSON persistence for loading, saving, & modifying settings
class SettingsManager:
    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = config_path or _default_config_path()
        self._settings: Optional[MynlSettings] = None

    # load settings from file or return defaults
    def load(self) -> MynlSettings:
        if self._settings is not None:
            return self._settings

        if self.config_path.exists():
            try:
                data = read_json_safe(self.config_path)
                self._settings = MynlSettings(**data)
            except (JSONParsingError, TypeError, ValueError) as e:
                typer.echo(f"Warning: Invalid config file {self.config_path}: {e}", err=True)
                typer.echo("Using default settings", err=True)
                self._settings = MynlSettings()
        else:
            self._settings = MynlSettings()

        return self._settings

    # save settings to file
    def save(self, settings: MynlSettings) -> None:
        write_json_safe(asdict(settings), self.config_path)
        self._settings = settings

    # get a specific setting value
    def get(self, key: str) -> Any:
        settings = self.load()
        return getattr(settings, key, None)

    # set a specific setting value; the whole settings object is re-validated
    def set(self, key: str, value: Any) -> None:
        if key not in known_keys():
            raise SettingsValidationError(f"Unknown setting: {key}", key, value)

        try:
            updated = replace(self.load(), **{key: value})
        except ValueError as e:
            raise SettingsValidationError(str(e), key, value) from e
        self.save(updated)

    # reset to default settings
    def reset(self) -> None:
        self.save(MynlSettings())

    # list all settings as a dictionary
    def list_settings(self) -> Dict[str, Any]:
        return asdict(self.load())


# * Names of all persisted settings
def known_keys() -> set[str]:
    return {f.name for f in fields(MynlSettings)}


# global settings manager instance
settings_manager = SettingsManager()


# * Retrieve settings preferring injected object from Typer context
def get_settings(
    ctx: typer.Context, provided: Optional[MynlSettings] = None
) -> MynlSettings:
    if provided is not None:
        return provided

    # search ctx, parent, & root for MynlSettings
    candidates: list[typer.Context] = [ctx]
    parent = cast(Optional[typer.Context], getattr(ctx, "parent", None))
    if parent is not None:
        candidates.append(parent)
    find_root = getattr(ctx, "find_root", None)
    root_ctx = (
        cast(Optional[typer.Context], find_root()) if callable(find_root) else None
    )
    if root_ctx is not None:
        candidates.append(root_ctx)

    for c in candidates:
        obj = getattr(c, "obj", None)
        if isinstance(obj, MynlSettings):
            return obj

    # fallback to loading from disk
    return settings_manager.load()
