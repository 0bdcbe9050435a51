"""Custom exceptions for taskrecur."""


class TaskRecurError(Exception):
    """Base exception for all taskrecur errors."""


class RecurrenceRuleError(TaskRecurError, ValueError):
    """Raised when a serialized recurrence rule cannot be turned into a valid rule."""
