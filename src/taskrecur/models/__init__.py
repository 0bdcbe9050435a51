"""taskrecur domain models.

This package contains the Pydantic models for recurrence rules and the tasks
that carry them.
"""

from .exceptions import RecurrenceRuleError, TaskRecurError
from .recurrence import (
    DailyRule,
    MonthlyRule,
    RecurrenceRule,
    WeeklyRule,
    YearlyRule,
    parse_rule,
    with_changes,
)
from .task import Task

__all__ = [
    # Recurrence models
    "RecurrenceRule",
    "DailyRule",
    "WeeklyRule",
    "MonthlyRule",
    "YearlyRule",
    "parse_rule",
    "with_changes",
    # Task model
    "Task",
    # Exceptions
    "TaskRecurError",
    "RecurrenceRuleError",
]
