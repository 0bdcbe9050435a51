"""Command 'validate' of taskrecur - check a rule and print its normalized form."""

import typer

from taskrecur.services.rule_codec import dumps_rule
from taskrecur.utils.ui.formatters import format_success

from .decorators import command_wrapper
from .utils import load_rule

app = typer.Typer()


@app.command("validate")
@command_wrapper
def validate_command(
    rule: str = typer.Argument(
        ..., help="Preset name, inline JSON, or path to a JSON/YAML rule file"
    ),
    output: str = typer.Option(
        "json", "--output", "-o", help="Format of the normalized rule (json, yaml)"
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only set the exit code"),
) -> None:
    """Validate a recurrence rule.

    Exits with code 2 when the rule is invalid and 5 when the file is missing.
    """
    recurrence = load_rule(rule)
    if quiet:
        return
    format_success("Recurrence rule is valid")
    print(dumps_rule(recurrence, "yaml" if output == "yaml" else "json"))
