"""Calendar-date helpers for recurrence computation.

Weekdays are numbered the way recurrence rules store them: 0=Sunday through
6=Saturday. Month and year arithmetic clamps the day to the target month's
length instead of overflowing into the following month.
"""

from __future__ import annotations

from calendar import monthrange
from datetime import date, timedelta

from dateutil.relativedelta import FR, MO, SA, SU, TH, TU, WE, relativedelta

SUNDAY = 0
MONDAY = 1
FRIDAY = 5
SATURDAY = 6

WEEKDAY_NAMES = [
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
]

MONTH_NAMES = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]

# dateutil weekday objects in Sunday-based order
_RELATIVE_WEEKDAYS = (SU, MO, TU, WE, TH, FR, SA)

# Weekend policies
ON_WEEKEND_NO_CHANGE = "no-change"
ON_WEEKEND_NEAREST = "nearest-weekday"
ON_WEEKEND_PREVIOUS = "previous-weekday"
ON_WEEKEND_NEXT = "next-weekday"


def weekday_index(value: date) -> int:
    """Return the Sunday-based weekday (0=Sunday .. 6=Saturday) of a date."""
    return (value.weekday() + 1) % 7


def is_weekend(value: date) -> bool:
    return weekday_index(value) in (SATURDAY, SUNDAY)


def week_start(value: date) -> date:
    """Return the Sunday that starts the week containing ``value``."""
    return value - timedelta(days=weekday_index(value))


def days_in_month(year: int, month: int) -> int:
    """Number of days in a month (``month`` is 1-12)."""
    return monthrange(year, month)[1]


def clamped_date(year: int, month: int, day: int) -> date:
    """Build a date, clamping ``day`` to the month's last day."""
    return date(year, month, min(day, days_in_month(year, month)))


def add_months(value: date, months: int) -> date:
    """Add months to a date, clamping the day (Jan 31 + 1 month = Feb 28/29)."""
    return value + relativedelta(months=months)


def add_years(value: date, years: int) -> date:
    """Add years to a date, clamping Feb 29 to Feb 28 in common years."""
    return value + relativedelta(years=years)


def nth_weekday_of_month(year: int, month: int, week_number: int, weekday: int) -> date:
    """Find the ``week_number``-th ``weekday`` of a month.

    Args:
        year: Calendar year
        month: Month, 1-12
        week_number: 1-5; 5 always means the last such weekday of the month,
            which is the 4th when the month only has four of them
        weekday: Sunday-based weekday, 0-6

    Returns:
        The matching date, always inside the requested month
    """
    first = date(year, month, 1)
    target = _RELATIVE_WEEKDAYS[weekday]
    if week_number == 5:
        return first + relativedelta(day=31, weekday=target(-1))
    return first + relativedelta(weekday=target(week_number))


def adjust_for_weekend(value: date, policy: str) -> date:
    """Move a Saturday/Sunday date according to a weekend policy.

    Weekdays are returned unchanged, as is any date under ``no-change``.
    """
    wd = weekday_index(value)
    if policy == ON_WEEKEND_NO_CHANGE or wd not in (SATURDAY, SUNDAY):
        return value

    if policy == ON_WEEKEND_PREVIOUS:
        back = 1 if wd == SATURDAY else 2
        return value - timedelta(days=back)
    if policy == ON_WEEKEND_NEXT:
        forward = 2 if wd == SATURDAY else 1
        return value + timedelta(days=forward)
    if policy == ON_WEEKEND_NEAREST:
        if wd == SATURDAY:
            return value - timedelta(days=1)
        return value + timedelta(days=1)

    raise ValueError(f"Unknown weekend policy: {policy}")


def parse_iso_date(value: str) -> date:
    """Parse a ``YYYY-MM-DD`` calendar date."""
    return date.fromisoformat(value.strip())
