"""Task data models."""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field

from taskrecur.models.recurrence import RecurrenceRule


class Task(BaseModel):
    """Task model carrying an optional recurrence.

    Attributes:
        id: Unique identifier for the task
        content: Main task description
        due_date: Date the task is due, after weekend adjustment
        completed_at: Date the task was completed
        recurrence: Recurrence rule embedded by value
        recurrence_anchor: Unadjusted date the next occurrence is measured from
        occurrence_count: Occurrences produced so far in this recurring chain
        created_at: Creation timestamp
    """

    id: str
    content: str
    due_date: Optional[date] = None
    completed_at: Optional[date] = None
    recurrence: Optional[RecurrenceRule] = None
    recurrence_anchor: Optional[date] = None
    occurrence_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_completed(self) -> bool:
        return self.completed_at is not None

    @property
    def is_recurring(self) -> bool:
        return self.recurrence is not None
