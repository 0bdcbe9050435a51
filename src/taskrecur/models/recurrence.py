"""Recurrence rule models.

A recurrence rule is a closed tagged union keyed on ``interval_unit``. Each
variant carries only the anchor fields that make sense for its unit and is
frozen once built; use :func:`with_changes` to derive an edited rule.
"""

from __future__ import annotations

from datetime import date
from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    field_validator,
    model_validator,
)

WeekendPolicy = Literal[
    "no-change", "nearest-weekday", "previous-weekday", "next-weekday"
]

Weekday = Annotated[int, Field(ge=0, le=6, strict=True)]
DayOfMonth = Annotated[int, Field(ge=1, le=31, strict=True)]

INTERVAL_UNITS = ("day", "week", "month", "year")


class RecurrenceBase(BaseModel):
    """Fields shared by every recurrence rule.

    Attributes:
        interval_length: Repeat every N units
        start_date: Earliest date the next occurrence may fall on
        end_date: Occurrences on or after this date are never produced
        max_count: Maximum number of occurrences the engine will produce
        on_weekend: Adjustment applied when an occurrence lands on a weekend
        base_on_completion: Measure from the completion date instead of the
            scheduled due date
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    interval_length: int = Field(default=1, ge=1, strict=True)
    start_date: date | None = None
    end_date: date | None = None
    max_count: int | None = Field(default=None, ge=1, strict=True)
    on_weekend: WeekendPolicy = "no-change"
    base_on_completion: bool = Field(default=False, strict=True)

    @model_validator(mode="after")
    def _check_bounds(self):
        if self.end_date is not None and self.max_count is not None:
            raise ValueError("end_date and max_count cannot both be set")
        return self

    @property
    def has_anchor(self) -> bool:
        """Whether the rule pins occurrences to an explicit calendar anchor."""
        return False


class DailyRule(RecurrenceBase):
    """Every N days from the previous occurrence."""

    interval_unit: Literal["day"] = "day"


class WeeklyRule(RecurrenceBase):
    """Every N weeks, on the previous weekday or on an explicit weekday set."""

    interval_unit: Literal["week"] = "week"
    days_of_week: tuple[Weekday, ...] | None = None

    @field_validator("days_of_week")
    @classmethod
    def _normalize_days(cls, v):
        if v is None:
            return v
        if not v:
            raise ValueError("days_of_week must not be empty; omit it instead")
        return tuple(sorted(set(v)))

    @property
    def has_anchor(self) -> bool:
        return self.days_of_week is not None


class MonthlyRule(RecurrenceBase):
    """Every N months.

    Anchored on the previous day of month, on an explicit ``day_of_month``,
    or on the ``week_number``-th ``day_of_week`` (5 meaning the last one).
    """

    interval_unit: Literal["month"] = "month"
    day_of_month: DayOfMonth | None = None
    week_number: int | None = Field(default=None, ge=1, le=5, strict=True)
    day_of_week: Weekday | None = None

    @model_validator(mode="after")
    def _check_anchor(self):
        if (self.week_number is None) != (self.day_of_week is None):
            raise ValueError(
                "week_number and day_of_week must be given together"
            )
        if self.day_of_month is not None and self.week_number is not None:
            raise ValueError(
                "day_of_month cannot be combined with a week-of-month anchor"
            )
        return self

    @property
    def has_anchor(self) -> bool:
        return self.day_of_month is not None or self.week_number is not None


class YearlyRule(RecurrenceBase):
    """Every N years, on the previous month/day or an explicit one.

    ``month`` is 0-based (0=January .. 11=December).
    """

    interval_unit: Literal["year"] = "year"
    month: int | None = Field(default=None, ge=0, le=11, strict=True)
    day_of_month: DayOfMonth | None = None

    @model_validator(mode="after")
    def _check_anchor(self):
        if (self.month is None) != (self.day_of_month is None):
            raise ValueError("month and day_of_month must be given together")
        return self

    @property
    def has_anchor(self) -> bool:
        return self.month is not None


RecurrenceRule = Annotated[
    Union[DailyRule, WeeklyRule, MonthlyRule, YearlyRule],
    Field(discriminator="interval_unit"),
]

_rule_adapter: TypeAdapter = TypeAdapter(RecurrenceRule)


def parse_rule(data: dict[str, Any]) -> RecurrenceRule:
    """Validate a dict of model fields into the matching rule variant.

    Raises:
        pydantic.ValidationError: If the fields are contradictory or out of range
    """
    return _rule_adapter.validate_python(data)


def with_changes(rule: RecurrenceRule, **changes: Any) -> RecurrenceRule:
    """Return a new, re-validated rule with ``changes`` applied.

    Changing ``interval_unit`` switches variants; anchor fields that do not
    belong to the new unit must be cleared by the caller.
    """
    data = rule.model_dump(exclude_none=True)
    data.update(changes)
    data = {k: v for k, v in data.items() if v is not None}
    return parse_rule(data)
