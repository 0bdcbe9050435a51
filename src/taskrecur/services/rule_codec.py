"""Flat-record serialization for recurrence rules.

Records mirror the task manager's persisted recurrence fields::

    {
        "intervalUnit": "month",
        "intervalLength": 1,
        "weekNumber": 5,
        "daysOfWeek": [5],
        "onWeekend": "no-change",
        "endDate": "2025-12-31"
    }

The anchor variant is tagged by which optional fields are present. Dates are
ISO calendar dates without a time component.
"""

from __future__ import annotations

import json
from datetime import date
from typing import Any

import yaml
from pydantic import ValidationError

from taskrecur.models.exceptions import RecurrenceRuleError
from taskrecur.models.recurrence import (
    INTERVAL_UNITS,
    MonthlyRule,
    RecurrenceRule,
    WeeklyRule,
    YearlyRule,
    parse_rule,
)
from taskrecur.utils.dates import parse_iso_date

_COMMON_KEYS = {
    "intervalUnit",
    "intervalLength",
    "startDate",
    "endDate",
    "maxCount",
    "onWeekend",
    "baseOnCompletion",
}

_ANCHOR_KEYS = {
    "day": set(),
    "week": {"daysOfWeek"},
    "month": {"dayOfMonth", "weekNumber", "daysOfWeek"},
    "year": {"month", "dayOfMonth"},
}

_DATE_KEYS = ("startDate", "endDate")

_FORMATS = ("json", "yaml")


def rule_to_record(rule: RecurrenceRule) -> dict[str, Any]:
    """Flatten a rule into a JSON-friendly record.

    Optional fields left at their defaults are omitted.
    """
    record: dict[str, Any] = {
        "intervalUnit": rule.interval_unit,
        "intervalLength": rule.interval_length,
    }

    if isinstance(rule, WeeklyRule) and rule.days_of_week is not None:
        record["daysOfWeek"] = list(rule.days_of_week)
    elif isinstance(rule, MonthlyRule):
        if rule.day_of_month is not None:
            record["dayOfMonth"] = rule.day_of_month
        elif rule.week_number is not None:
            record["weekNumber"] = rule.week_number
            record["daysOfWeek"] = [rule.day_of_week]
    elif isinstance(rule, YearlyRule) and rule.month is not None:
        record["month"] = rule.month
        record["dayOfMonth"] = rule.day_of_month

    if rule.start_date is not None:
        record["startDate"] = rule.start_date.isoformat()
    if rule.end_date is not None:
        record["endDate"] = rule.end_date.isoformat()
    if rule.max_count is not None:
        record["maxCount"] = rule.max_count
    if rule.on_weekend != "no-change":
        record["onWeekend"] = rule.on_weekend
    if rule.base_on_completion:
        record["baseOnCompletion"] = True

    return record


def rule_from_record(record: dict[str, Any]) -> RecurrenceRule:
    """Rebuild a rule from a flat record.

    Raises:
        RecurrenceRuleError: If the record has unknown or misplaced keys,
            unparseable dates, or describes an invalid rule
    """
    if not isinstance(record, dict):
        raise RecurrenceRuleError(
            f"Recurrence record must be a mapping, got {type(record).__name__}"
        )

    unit = record.get("intervalUnit")
    if unit not in INTERVAL_UNITS:
        raise RecurrenceRuleError(
            f"intervalUnit must be one of: {', '.join(INTERVAL_UNITS)}, got: {unit!r}"
        )

    allowed = _COMMON_KEYS | _ANCHOR_KEYS[unit]
    unexpected = sorted(str(key) for key in set(record) - allowed)
    if unexpected:
        raise RecurrenceRuleError(
            f"Fields not valid for a {unit} recurrence: {', '.join(unexpected)}"
        )

    fields: dict[str, Any] = {"interval_unit": unit}
    simple = {
        "intervalLength": "interval_length",
        "maxCount": "max_count",
        "onWeekend": "on_weekend",
        "baseOnCompletion": "base_on_completion",
        "dayOfMonth": "day_of_month",
        "weekNumber": "week_number",
        "month": "month",
    }
    for key, name in simple.items():
        if record.get(key) is not None:
            fields[name] = record[key]

    for key, name in zip(_DATE_KEYS, ("start_date", "end_date")):
        if record.get(key) is not None:
            fields[name] = _parse_record_date(key, record[key])

    days = record.get("daysOfWeek")
    if days is not None:
        if not isinstance(days, list):
            raise RecurrenceRuleError("daysOfWeek must be a list of weekday numbers")
        if unit == "month":
            if len(days) != 1:
                raise RecurrenceRuleError(
                    "A week-of-month recurrence takes exactly one weekday, "
                    f"got {len(days)}"
                )
            fields["day_of_week"] = days[0]
        else:
            fields["days_of_week"] = days

    try:
        return parse_rule(fields)
    except ValidationError as e:
        raise RecurrenceRuleError(f"Invalid {unit} recurrence: {e}") from e


def dumps_rule(rule: RecurrenceRule, fmt: str = "json") -> str:
    """Serialize a rule as JSON or YAML text."""
    record = rule_to_record(rule)
    if fmt == "json":
        return json.dumps(record, indent=2)
    if fmt == "yaml":
        return yaml.safe_dump(record, default_flow_style=False, sort_keys=False)
    raise ValueError(f"Unsupported format: {fmt} (expected one of {_FORMATS})")


def loads_rule(text: str, fmt: str = "json") -> RecurrenceRule:
    """Parse JSON or YAML text into a rule.

    Raises:
        RecurrenceRuleError: If the text is malformed or the rule invalid
    """
    try:
        if fmt == "json":
            record = json.loads(text)
        elif fmt == "yaml":
            record = yaml.safe_load(text)
        else:
            raise ValueError(f"Unsupported format: {fmt} (expected one of {_FORMATS})")
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise RecurrenceRuleError(f"Could not parse recurrence {fmt}: {e}") from e
    return rule_from_record(record)


def _parse_record_date(key: str, value: Any) -> date:
    # YAML loads unquoted ISO dates as date objects already
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise RecurrenceRuleError(f"{key} must be an ISO date string")
    try:
        return parse_iso_date(value)
    except ValueError as e:
        raise RecurrenceRuleError(f"{key} is not a valid ISO date: {value!r}") from e
