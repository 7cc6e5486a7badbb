# mynl/cli/commands/config.py
# Settings mgmt subcommands (list/get/set/reset/path) w/ JSON-backed storage

from __future__ import annotations

import json
from typing import Any
import typer

from rich.markup import escape

from ...config.settings import settings_manager, known_keys
from ...core.exceptions import MynlError
from ...mynl_io.console import console
from ..app import app

# * Sub-app for config commands; registered on root app
config_app = typer.Typer(
    rich_markup_mode="rich",
    help="Manage mynl default settings",
    context_settings={"help_option_names": ["--help", "-h"]},
)
app.add_typer(config_app, name="config")


# coerce string value to JSON value (numbers, bools, null) or keep raw string
def _coerce_value(
    raw: str,
) -> str | int | float | bool | None | list[Any] | dict[str, Any]:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


# * Print current settings & config path
def _print_current_settings() -> None:
    data = settings_manager.list_settings()

    console.print()
    console.print("[bold cyan]Current Configuration[/]")
    console.print(f"[dim]Config file: {escape(str(settings_manager.config_path))}[/]", soft_wrap=True)
    console.print()

    width = max(len(key) for key in data)
    for key, value in data.items():
        console.print(f"  [bold]{key.ljust(width)}[/]  {escape(json.dumps(value))}")

    console.print()
    console.print("[dim]Use [/][cyan]mynl config --help[/][dim] to see available commands[/]")


# * default callback: show current settings when no subcommand provided
@config_app.callback(invoke_without_command=True)
def config_callback(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        _print_current_settings()


# * Get a specific setting value & print as JSON
@config_app.command()
def get(key: str) -> None:
    if key not in known_keys():
        raise typer.BadParameter(f"Unknown setting: {key}")
    value = settings_manager.get(key)
    # print JSON for consistency (strings quoted)
    console.print(escape(json.dumps(value)))


# * Set a specific setting value; values are JSON-coerced when possible
@config_app.command(name="set")
def set_cmd(key: str, value: str) -> None:
    if key not in known_keys():
        raise typer.BadParameter(f"Unknown setting: {key}")

    coerced = _coerce_value(value)
    try:
        settings_manager.set(key, coerced)
    except MynlError as e:
        raise typer.BadParameter(str(e))
    console.print(f"[green]✓[/] Set {key} [cyan]{escape(json.dumps(coerced))}[/]")


# * Reset all settings to defaults
@config_app.command()
def reset() -> None:
    settings_manager.reset()
    console.print("[green]✓[/] Reset settings to defaults")


# * Show the configuration file path
@config_app.command()
def path() -> None:
    console.print(escape(str(settings_manager.config_path)), soft_wrap=True)


# * Explicit 'list' command to show current settings
@config_app.command(name="list")
def list_cmd() -> None:
    _print_current_settings()
