"""Service layer for taskrecur.

Services hold the recurrence logic and sit between the CLI commands and the
models.
"""

from .recurrence_engine import (
    Occurrence,
    compute_next,
    compute_next_occurrence,
    is_default_rule,
    iter_occurrences,
)
from .task_service import complete_task

__all__ = [
    "Occurrence",
    "compute_next",
    "compute_next_occurrence",
    "is_default_rule",
    "iter_occurrences",
    "complete_task",
]
