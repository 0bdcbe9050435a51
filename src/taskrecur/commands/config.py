"""Configuration management commands."""

import typer
from pydantic import ValidationError

from taskrecur.config import get_config_manager
from taskrecur.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND
from taskrecur.utils.typer_helpers import SuggestingGroup
from taskrecur.utils.ui.console import get_console
from taskrecur.utils.ui.formatters import format_output, format_success

from .decorators import AppError, command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Configuration management commands")
console = get_console()


@app.command("view")
@command_wrapper
def view_config(
    profile: str = typer.Option("default", "--profile", help="Profile name"),
    output: str = typer.Option("table", "--output", "-o", help="Output format"),
) -> None:
    """View current configuration."""
    config_manager = get_config_manager(profile)
    format_output(config_manager.config.model_dump(), output)


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., preview.count)"),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """Get a configuration value."""
    value = get_config_manager(profile).get(key)
    if value is None:
        raise AppError(f"Configuration key '{key}' not found", ERROR_NOT_FOUND)
    console.print(value)


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., preview.count)"),
    value: str = typer.Argument(..., help="Configuration value"),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """Set a configuration value."""
    config_manager = get_config_manager(profile)
    try:
        config_manager.set(key, value)
    except KeyError as e:
        raise AppError(f"Configuration key '{key}' not found", ERROR_NOT_FOUND) from e
    except ValidationError as e:
        raise AppError(
            f"Invalid value for '{key}': {value}", ERROR_INVALID_ARGS
        ) from e
    format_success(f"Set {key} = {value}")


@app.command("reset")
@command_wrapper
def reset_config(
    key: str = typer.Argument(None, help="Configuration key to reset (all if omitted)"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """Reset configuration to defaults."""
    if not key and not yes:
        typer.confirm("Reset all settings to their defaults?", abort=True)
    get_config_manager(profile).reset(key)
    format_success(f"Reset {key}" if key else "Configuration reset to defaults")


@app.command("profiles")
@command_wrapper
def list_profiles(
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """List all configuration profiles."""
    profiles = get_config_manager(profile).list_profiles()
    if not profiles:
        console.print("[yellow]No saved profiles[/yellow]")
        return
    for name in sorted(profiles):
        console.print(name)
