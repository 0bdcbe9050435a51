"""Recurrence engine - next-occurrence computation for recurring tasks.

Every function in this module is pure: it takes a rule and calendar dates and
returns calendar dates, never touching storage or presentation state.

The engine separates two dates for each occurrence:

- the *anchor*, the unadjusted date produced by the interval arithmetic,
  which is what the following occurrence is measured from;
- the *due* date, the anchor after the rule's weekend policy is applied.

Keeping them apart stops weekend adjustments from drifting a schedule.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import date, timedelta
from typing import NamedTuple

from taskrecur.models.recurrence import (
    DailyRule,
    MonthlyRule,
    RecurrenceRule,
    WeeklyRule,
    YearlyRule,
)
from taskrecur.utils.dates import (
    add_months,
    add_years,
    adjust_for_weekend,
    clamped_date,
    nth_weekday_of_month,
    week_start,
    weekday_index,
)

logger = logging.getLogger(__name__)

# Hard ceiling for the start-date search, whatever the interval.
MAX_SEARCH_ITERATIONS = 1000

_UNIT_DAYS = {"day": 1, "week": 7, "month": 31, "year": 366}


class Occurrence(NamedTuple):
    """A computed occurrence.

    Attributes:
        anchor: Unadjusted date; pass it back as ``previous_date`` to compute
            the following occurrence
        due: Date after weekend adjustment, the one a task is due on
    """

    anchor: date
    due: date


def compute_next_occurrence(
    rule: RecurrenceRule, previous_date: date, occurrence_index: int = 0
) -> date | None:
    """Compute the next due date of a recurrence.

    Args:
        rule: A validated recurrence rule
        previous_date: Prior occurrence anchor, or the completion date when
            ``rule.base_on_completion`` is set
        occurrence_index: Number of occurrences already produced under the rule

    Returns:
        The next due date, or None when the recurrence has ended
    """
    occurrence = compute_next(rule, previous_date, occurrence_index)
    return occurrence.due if occurrence else None


def compute_next(
    rule: RecurrenceRule, previous_date: date, occurrence_index: int = 0
) -> Occurrence | None:
    """Compute the next occurrence of a recurrence, anchor and due date.

    Returns None when ``max_count`` occurrences were already produced, when
    the occurrence would fall on or after ``end_date``, or when no date on or
    after ``start_date`` satisfies the rule within the search bound.

    Raises:
        ValueError: If ``occurrence_index`` is negative
    """
    if occurrence_index < 0:
        raise ValueError(f"occurrence_index must be >= 0, got {occurrence_index}")

    if rule.max_count is not None and occurrence_index >= rule.max_count:
        return None

    try:
        anchor = _advance(rule, previous_date)
        due = adjust_for_weekend(anchor, rule.on_weekend)

        if rule.start_date is not None and due < rule.start_date:
            anchor = _first_anchor_on_or_after(rule, previous_date, rule.start_date)
            if anchor is None:
                logger.debug(
                    "No %s occurrence found on or after %s within search bound",
                    rule.interval_unit,
                    rule.start_date,
                )
                return None
            due = adjust_for_weekend(anchor, rule.on_weekend)
    except (OverflowError, ValueError) as e:
        # date arithmetic ran past date.max (year 9999)
        logger.debug(
            "No %s occurrence after %s: %s", rule.interval_unit, previous_date, e
        )
        return None

    if rule.end_date is not None and due >= rule.end_date:
        return None

    return Occurrence(anchor=anchor, due=due)


def iter_occurrences(
    rule: RecurrenceRule,
    previous_date: date,
    occurrence_index: int = 0,
    limit: int | None = None,
) -> Iterator[Occurrence]:
    """Yield successive occurrences measured from ``previous_date``.

    Each anchor is fed back in as the next starting point, so this previews a
    schedule-based chain. Stops when the recurrence ends or after ``limit``
    occurrences.
    """
    produced = 0
    current = previous_date
    index = occurrence_index
    while limit is None or produced < limit:
        occurrence = compute_next(rule, current, index)
        if occurrence is None:
            return
        yield occurrence
        produced += 1
        index += 1
        current = occurrence.anchor


def is_default_rule(rule: RecurrenceRule | None) -> bool:
    """Check whether a rule is one of the simple presets.

    The presets are daily, weekly, monthly, yearly and none (no rule at all).
    A preset repeats every single unit with no explicit anchor, no bounds,
    no weekend adjustment, and is measured from the due date.
    """
    if rule is None:
        return True
    return (
        rule.interval_length == 1
        and not rule.has_anchor
        and rule.start_date is None
        and rule.end_date is None
        and rule.max_count is None
        and rule.on_weekend == "no-change"
        and not rule.base_on_completion
    )


# ---------------------------------------------------------------------------
# Interval arithmetic, one step per unit
# ---------------------------------------------------------------------------


def _advance(rule: RecurrenceRule, previous: date) -> date:
    if isinstance(rule, DailyRule):
        return previous + timedelta(days=rule.interval_length)
    if isinstance(rule, WeeklyRule):
        return _advance_weekly(rule, previous)
    if isinstance(rule, MonthlyRule):
        return _advance_monthly(rule, previous)
    if isinstance(rule, YearlyRule):
        return _advance_yearly(rule, previous)
    raise TypeError(f"Unsupported recurrence rule: {type(rule).__name__}")


def _advance_weekly(rule: WeeklyRule, previous: date) -> date:
    if rule.days_of_week is None:
        return previous + timedelta(weeks=rule.interval_length)

    current = weekday_index(previous)
    later = [d for d in rule.days_of_week if d > current]
    if later:
        return previous + timedelta(days=later[0] - current)

    block = week_start(previous) + timedelta(weeks=rule.interval_length)
    return block + timedelta(days=rule.days_of_week[0])


def _advance_monthly(rule: MonthlyRule, previous: date) -> date:
    if rule.day_of_month is None and rule.week_number is None:
        return add_months(previous, rule.interval_length)

    target = add_months(previous.replace(day=1), rule.interval_length)
    if rule.day_of_month is not None:
        return clamped_date(target.year, target.month, rule.day_of_month)
    return nth_weekday_of_month(
        target.year, target.month, rule.week_number, rule.day_of_week
    )


def _advance_yearly(rule: YearlyRule, previous: date) -> date:
    if rule.month is None:
        return add_years(previous, rule.interval_length)
    return clamped_date(
        previous.year + rule.interval_length, rule.month + 1, rule.day_of_month
    )


# ---------------------------------------------------------------------------
# Start-date snapping
# ---------------------------------------------------------------------------


def _matches_anchor(rule: RecurrenceRule, previous: date, candidate: date) -> bool:
    """Whether ``candidate`` satisfies the rule's calendar anchor."""
    if isinstance(rule, DailyRule):
        return True

    if isinstance(rule, WeeklyRule):
        if rule.days_of_week is None:
            return weekday_index(candidate) == weekday_index(previous)
        return weekday_index(candidate) in rule.days_of_week

    if isinstance(rule, MonthlyRule):
        if rule.week_number is not None:
            return candidate == nth_weekday_of_month(
                candidate.year, candidate.month, rule.week_number, rule.day_of_week
            )
        day = rule.day_of_month if rule.day_of_month is not None else previous.day
        return candidate == clamped_date(candidate.year, candidate.month, day)

    if isinstance(rule, YearlyRule):
        if rule.month is not None:
            month, day = rule.month + 1, rule.day_of_month
        else:
            month, day = previous.month, previous.day
        return candidate.month == month and candidate == clamped_date(
            candidate.year, month, day
        )

    return False


def _first_anchor_on_or_after(
    rule: RecurrenceRule, previous: date, start: date
) -> date | None:
    """Find the first anchor-satisfying date whose due date is not before ``start``.

    The scan covers twice the rule's interval and never exceeds
    MAX_SEARCH_ITERATIONS days.
    """
    bound = min(
        2 * rule.interval_length * _UNIT_DAYS[rule.interval_unit],
        MAX_SEARCH_ITERATIONS,
    )
    candidate = start
    for _ in range(bound + 1):
        if _matches_anchor(rule, previous, candidate) and (
            adjust_for_weekend(candidate, rule.on_weekend) >= start
        ):
            return candidate
        candidate += timedelta(days=1)
    return None
