# tests/integration/test_cli_config.py
# Integration tests for CLI config commands w/ isolated home

import json
from pathlib import Path

from typer.testing import CliRunner

from mynl.cli.app import app

runner = CliRunner()


# * Ensure config path command returns isolated temp config location
def test_config_path(isolate_config, cli_env):
    result = runner.invoke(app, ["config", "path"], env=cli_env)
    assert result.exit_code == 0

    config_path = Path(result.stdout.strip())
    assert config_path.name == "config.json"
    assert config_path.parent.name == ".mynl"
    assert config_path.exists()


# * Ensure config set key value → config get key returns same value
def test_config_set_get_round_trip(cli_env):
    result = runner.invoke(app, ["config", "set", "tab_size", "8"], env=cli_env)
    assert result.exit_code == 0

    result = runner.invoke(app, ["config", "get", "tab_size"], env=cli_env)
    assert result.exit_code == 0
    assert result.stdout.strip() == "8"

    result = runner.invoke(app, ["config", "set", "language", "c"], env=cli_env)
    assert result.exit_code == 0
    result = runner.invoke(app, ["config", "get", "language"], env=cli_env)
    assert result.stdout.strip() == '"c"'


# * Values are persisted to the JSON file
def test_config_set_persists(isolate_config, cli_env):
    runner.invoke(app, ["config", "set", "comment_column", "80"], env=cli_env)
    data = json.loads((isolate_config / ".mynl" / "config.json").read_text(encoding="utf-8"))
    assert data["comment_column"] == 80


# * Unknown keys are rejected
def test_config_unknown_key(cli_env):
    result = runner.invoke(app, ["config", "set", "theme", "dark"], env=cli_env)
    assert result.exit_code != 0
    result = runner.invoke(app, ["config", "get", "theme"], env=cli_env)
    assert result.exit_code != 0


# * Out-of-range values are rejected & not stored
def test_config_invalid_value(cli_env):
    result = runner.invoke(app, ["config", "set", "tab_size", "40"], env=cli_env)
    assert result.exit_code != 0

    result = runner.invoke(app, ["config", "get", "tab_size"], env=cli_env)
    assert result.stdout.strip() == "4"


# * list & bare config show every setting
def test_config_list(cli_env):
    runner.invoke(app, ["config", "set", "language", "python"], env=cli_env)
    for args in (["config"], ["config", "list"]):
        result = runner.invoke(app, args, env=cli_env)
        assert result.exit_code == 0
        assert "Current Configuration" in result.stdout
        assert "comment_column" in result.stdout
        assert '"python"' in result.stdout


# * reset restores defaults
def test_config_reset(cli_env):
    runner.invoke(app, ["config", "set", "start_line", "5"], env=cli_env)
    result = runner.invoke(app, ["config", "reset"], env=cli_env)
    assert result.exit_code == 0

    result = runner.invoke(app, ["config", "get", "start_line"], env=cli_env)
    assert result.stdout.strip() == "1"


# * config subcommands do not consume stdin
def test_config_ignores_input(cli_env):
    result = runner.invoke(app, ["config", "get", "language"], input="a\n", env=cli_env)
    assert "// 1" not in result.stdout
