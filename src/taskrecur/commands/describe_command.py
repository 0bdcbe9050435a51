"""Command 'describe' of taskrecur - summarize a recurrence rule."""

from typing import Optional

import typer

from taskrecur.config import get_config_manager
from taskrecur.services.recurrence_engine import is_default_rule
from taskrecur.utils.recurrence import describe_rule, describe_rule_verbose, preset_name
from taskrecur.utils.ui.formatters import format_output

from .decorators import command_wrapper
from .utils import load_rule

app = typer.Typer()


@app.command("describe")
@command_wrapper
def describe_command(
    rule: str = typer.Argument(
        ..., help="Preset name, inline JSON, or path to a JSON/YAML rule file"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Include bounds and weekend policy"
    ),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Output format"),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """Describe a recurrence rule in plain words."""
    config = get_config_manager(profile).config
    recurrence = load_rule(rule)

    if verbose:
        summary = describe_rule_verbose(recurrence, config.ui.date_format)
    else:
        summary = describe_rule(recurrence)

    format_output(
        {
            "summary": summary,
            "default": is_default_rule(recurrence),
            "preset": preset_name(recurrence) or "custom",
        },
        output or config.output.format,
    )
