"""Helpers shared by the rule commands."""

from __future__ import annotations

from datetime import date
from pathlib import Path

from taskrecur.models.exceptions import RecurrenceRuleError
from taskrecur.models.recurrence import RecurrenceRule
from taskrecur.services.rule_codec import loads_rule
from taskrecur.utils.dates import parse_iso_date
from taskrecur.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND
from taskrecur.utils.recurrence import resolve_preset

from .decorators import AppError

_YAML_SUFFIXES = (".yaml", ".yml")


def load_rule(source: str) -> RecurrenceRule:
    """Load a rule from a preset name, inline JSON, or a JSON/YAML file path.

    Raises:
        AppError: ERROR_NOT_FOUND for a missing file, ERROR_INVALID_ARGS for
            an invalid rule
    """
    text = source.strip()
    preset = resolve_preset(text)
    if preset is not None:
        return preset

    if text.startswith("{"):
        fmt = "json"
    else:
        path = Path(source)
        if not path.is_file():
            raise AppError(f"Rule file not found: {source}", ERROR_NOT_FOUND)
        fmt = "yaml" if path.suffix.lower() in _YAML_SUFFIXES else "json"
        text = path.read_text(encoding="utf-8")

    try:
        return loads_rule(text, fmt)
    except RecurrenceRuleError as e:
        raise AppError(str(e), ERROR_INVALID_ARGS) from e


def parse_date_option(value: str, option: str) -> date:
    """Parse a YYYY-MM-DD command-line date.

    Raises:
        AppError: ERROR_INVALID_ARGS if the value is not an ISO date
    """
    try:
        return parse_iso_date(value)
    except ValueError as e:
        raise AppError(
            f"{option} expects a YYYY-MM-DD date, got: {value}", ERROR_INVALID_ARGS
        ) from e
