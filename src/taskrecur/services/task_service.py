"""Task service - completion of recurring tasks.

Completing a recurring task asks the recurrence engine for the next occurrence
and, if there is one, produces the next task instance in the chain.
"""

from __future__ import annotations

import logging
import uuid
from datetime import date, datetime

from taskrecur.models.task import Task
from taskrecur.services.recurrence_engine import compute_next

logger = logging.getLogger(__name__)


def complete_task(task: Task, completed_on: date) -> tuple[Task, Task | None]:
    """Mark a task complete and schedule its next occurrence.

    Args:
        task: Task to complete
        completed_on: Completion date

    Returns:
        The completed task, and the next task instance or None when the task
        does not recur, the recurrence has ended, or there is no date to
        measure the next occurrence from

    Raises:
        ValueError: If the task is already completed
    """
    if task.is_completed:
        raise ValueError(f"Task {task.id} is already completed")

    completed = task.model_copy(update={"completed_at": completed_on})
    rule = task.recurrence
    if rule is None:
        return completed, None

    if rule.base_on_completion:
        basis = completed_on
    else:
        basis = task.recurrence_anchor or task.due_date

    if basis is None:
        logger.debug("Task %s recurs but has no due date; not rescheduling", task.id)
        return completed, None

    occurrence = compute_next(rule, basis, task.occurrence_count)
    if occurrence is None:
        logger.debug("Recurrence of task %s has ended", task.id)
        return completed, None

    next_task = Task(
        id=str(uuid.uuid4()),
        content=task.content,
        due_date=occurrence.due,
        recurrence=rule,
        recurrence_anchor=occurrence.anchor,
        occurrence_count=task.occurrence_count + 1,
        created_at=datetime.now(),
    )
    logger.debug(
        "Scheduled next occurrence of task %s as %s on %s",
        task.id,
        next_task.id,
        next_task.due_date,
    )
    return completed, next_task
