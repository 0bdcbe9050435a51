"""Command 'presets' of taskrecur - list the simple recurrence presets."""

from typing import Optional

import typer

from taskrecur.config import get_config_manager
from taskrecur.services.rule_codec import rule_to_record
from taskrecur.utils.recurrence import RECURRENCE_PRESETS, describe_rule
from taskrecur.utils.ui.formatters import format_output

from .decorators import command_wrapper

app = typer.Typer()


@app.command("presets")
@command_wrapper
def presets_command(
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output format"),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """List the preset recurrences (usable wherever a rule is expected)."""
    rows = [
        {
            "name": name,
            "summary": describe_rule(rule),
            "unit": rule_to_record(rule)["intervalUnit"],
        }
        for name, rule in RECURRENCE_PRESETS.items()
    ]
    output = output or get_config_manager(profile).config.output.format
    format_output(rows, "table" if output == "pretty" else output)
