"""Command 'next' of taskrecur - preview upcoming occurrences of a rule."""

from typing import Optional

import typer

from taskrecur.config import get_config_manager
from taskrecur.services.recurrence_engine import iter_occurrences
from taskrecur.utils.dates import WEEKDAY_NAMES, weekday_index
from taskrecur.utils.exit_codes import ERROR_INVALID_ARGS
from taskrecur.utils.ui.formatters import format_info, format_output

from .decorators import AppError, command_wrapper
from .utils import load_rule, parse_date_option

app = typer.Typer()


@app.command("next")
@command_wrapper
def next_command(
    rule: str = typer.Argument(
        ..., help="Preset name, inline JSON, or path to a JSON/YAML rule file"
    ),
    from_date: str = typer.Option(
        ..., "--from", "-f", help="Previous occurrence (or completion) date, YYYY-MM-DD"
    ),
    count: Optional[int] = typer.Option(
        None, "--count", "-n", help="Number of occurrences to show"
    ),
    index: int = typer.Option(
        0, "--index", "-i", help="Occurrences already produced under this rule"
    ),
    output: Optional[str] = typer.Option(
        None, "--output", "-o", help="Output format (pretty, table, json, yaml, quiet)"
    ),
    profile: str = typer.Option("default", "--profile", help="Profile name"),
) -> None:
    """Show the next occurrences of a recurrence rule.

    Each occurrence is measured from the previous one's unadjusted date, so
    weekend adjustments never accumulate.
    """
    config = get_config_manager(profile).config
    count = count if count is not None else config.preview.count
    output = output or config.output.format

    if count < 1:
        raise AppError("--count must be at least 1", ERROR_INVALID_ARGS)
    if index < 0:
        raise AppError("--index must not be negative", ERROR_INVALID_ARGS)

    recurrence = load_rule(rule)
    start = parse_date_option(from_date, "--from")

    occurrences = [
        {
            "due": occurrence.due.isoformat(),
            "weekday": WEEKDAY_NAMES[weekday_index(occurrence.due)],
            "anchor": occurrence.anchor.isoformat(),
        }
        for occurrence in iter_occurrences(recurrence, start, index, limit=count)
    ]

    if not occurrences and output in ("pretty", "table"):
        format_info("The recurrence has ended; no further occurrences.")
        return
    format_output(occurrences, output)
