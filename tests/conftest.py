# tests/conftest.py
# Pytest configuration w/ isolation fixtures for deterministic test runs

import json
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    # Patch Path.home() to isolated temp directory
    fake_home = tmp_path / "fake_home"
    fake_home.mkdir()

    mynl_dir = fake_home / ".mynl"
    mynl_dir.mkdir()

    # Create minimal config.json w/ test defaults
    config_data = {
        "comment_column": 72,
        "tab_size": 4,
        "language": "cpp",
        "start_line": 1,
        "dev_mode": False,
    }
    config_file = mynl_dir / "config.json"
    config_file.write_text(json.dumps(config_data, indent=2), encoding="utf-8")

    monkeypatch.setattr(Path, "home", lambda: fake_home)
    monkeypatch.delenv("MYNL_CONFIG", raising=False)

    # ! reset global settings_manager state & point it at the isolated location
    from mynl.config.settings import settings_manager

    settings_manager._settings = None
    settings_manager.config_path = config_file

    # ! reset output manager to NullOutputManager for test isolation
    from mynl.core.output import reset_output_manager

    reset_output_manager()

    # ! fresh consoles so captured streams are picked up
    from mynl.mynl_io.console import reset_console

    reset_console()

    yield fake_home

    reset_output_manager()


@pytest.fixture
def cli_env():
    # plain output for substring assertions
    return {"NO_COLOR": "1", "TERM": "dumb", "COLUMNS": "200"}


@pytest.fixture
def sample_source():
    # Provide a small snippet mixing tabs, blank lines & a long line
    return (
        "def main():\n"
        "\tprint('hello')\n"
        "\n"
        "\treturn some_function_with_a_very_long_name(argument_one, argument_two)\n"
    )
