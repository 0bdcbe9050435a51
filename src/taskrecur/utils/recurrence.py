"""Recurrence presets and human-readable summaries."""

from __future__ import annotations

from taskrecur.models.recurrence import (
    DailyRule,
    MonthlyRule,
    RecurrenceRule,
    WeeklyRule,
    YearlyRule,
)
from taskrecur.services.recurrence_engine import is_default_rule
from taskrecur.utils.dates import MONTH_NAMES, WEEKDAY_NAMES

# Maps the simple preset names to their default rules.
RECURRENCE_PRESETS: dict[str, RecurrenceRule] = {
    "daily": DailyRule(),
    "weekly": WeeklyRule(),
    "monthly": MonthlyRule(),
    "yearly": YearlyRule(),
}

VALID_PRESETS = list(RECURRENCE_PRESETS.keys())

_PRESET_BY_UNIT = {rule.interval_unit: name for name, rule in RECURRENCE_PRESETS.items()}

_WEEKEND_SUFFIXES = {
    "previous-weekday": "previous weekday",
    "next-weekday": "next weekday",
    "nearest-weekday": "nearest weekday",
}


def ordinal(n: int) -> str:
    """Format an integer as an English ordinal (1st, 2nd, 11th, 23rd)."""
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def resolve_preset(name: str) -> RecurrenceRule | None:
    """Look up a preset rule by name (case-insensitive).

    Args:
        name: Preset name (e.g., "daily", "Weekly")

    Returns:
        The preset rule, or None if the name is not recognized
    """
    return RECURRENCE_PRESETS.get(name.lower())


def preset_name(rule: RecurrenceRule | None) -> str | None:
    """Return the preset a rule corresponds to.

    Returns:
        "none" for no rule, the preset name for a default rule, or None for
        a custom rule
    """
    if rule is None:
        return "none"
    if not is_default_rule(rule):
        return None
    return _PRESET_BY_UNIT[rule.interval_unit]


def describe_rule(rule: RecurrenceRule) -> str:
    """Summarize the interval and anchor of a rule, e.g. "Every 2 weeks on Monday"."""
    length = rule.interval_length

    if isinstance(rule, DailyRule):
        return "Daily" if length == 1 else f"Every {length} days"

    if isinstance(rule, WeeklyRule):
        text = "Weekly" if length == 1 else f"Every {length} weeks"
        if rule.days_of_week:
            if len(rule.days_of_week) == 7:
                text += " on all days"
            else:
                text += " on " + ", ".join(WEEKDAY_NAMES[d] for d in rule.days_of_week)
        return text

    if isinstance(rule, MonthlyRule):
        text = "Monthly" if length == 1 else f"Every {length} months"
        if rule.day_of_month is not None:
            text += f" on the {ordinal(rule.day_of_month)}"
        elif rule.week_number is not None:
            week = ordinal(rule.week_number) if rule.week_number < 5 else "last"
            text += f" on the {week} {WEEKDAY_NAMES[rule.day_of_week]}"
        return text

    if isinstance(rule, YearlyRule):
        text = "Annually" if length == 1 else f"Every {length} years"
        if rule.month is not None:
            text += f" on {MONTH_NAMES[rule.month]} {ordinal(rule.day_of_month)}"
        return text

    raise TypeError(f"Unsupported recurrence rule: {type(rule).__name__}")


def describe_rule_verbose(rule: RecurrenceRule, date_format: str = "%Y-%m-%d") -> str:
    """Like describe_rule, but including bounds, completion basis and weekend policy.

    Args:
        rule: Rule to describe
        date_format: strftime pattern used for start and end dates

    Returns:
        Human-readable description
    """
    text = describe_rule(rule)

    if rule.start_date is not None:
        text += f", from {rule.start_date.strftime(date_format)}"

    if rule.end_date is not None:
        text += f", until {rule.end_date.strftime(date_format)}"
    elif rule.max_count is not None:
        text += ", 1 time" if rule.max_count == 1 else f", {rule.max_count} times"

    if rule.base_on_completion:
        text += ", based on completion date"

    if rule.on_weekend in _WEEKEND_SUFFIXES:
        text += f", {_WEEKEND_SUFFIXES[rule.on_weekend]}"

    return text
