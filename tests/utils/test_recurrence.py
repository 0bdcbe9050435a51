"""Unit tests for recurrence presets and summaries."""

from __future__ import annotations

from datetime import date

import pytest

from taskrecur.models.recurrence import DailyRule, MonthlyRule, WeeklyRule, YearlyRule
from taskrecur.utils.recurrence import (
    RECURRENCE_PRESETS,
    VALID_PRESETS,
    describe_rule,
    describe_rule_verbose,
    ordinal,
    preset_name,
    resolve_preset,
)


class TestResolvePreset:
    def test_daily(self):
        assert resolve_preset("daily") == DailyRule()

    def test_yearly(self):
        assert resolve_preset("yearly") == YearlyRule()

    def test_case_insensitive(self):
        assert resolve_preset("WEEKLY") == WeeklyRule()
        assert resolve_preset("Monthly") == MonthlyRule()

    def test_unknown_returns_none(self):
        assert resolve_preset("hourly") is None
        assert resolve_preset("") is None


class TestPresetName:
    def test_none_rule(self):
        assert preset_name(None) == "none"

    def test_roundtrip(self):
        for name in VALID_PRESETS:
            assert preset_name(resolve_preset(name)) == name

    def test_custom_rule(self):
        assert preset_name(WeeklyRule(interval_length=2)) is None


class TestValidPresets:
    def test_all_presets_present(self):
        assert set(VALID_PRESETS) == {"daily", "weekly", "monthly", "yearly"}

    def test_presets_have_no_options(self):
        for rule in RECURRENCE_PRESETS.values():
            assert rule.interval_length == 1
            assert not rule.has_anchor


@pytest.mark.parametrize(
    "n, expected",
    [
        (1, "1st"),
        (2, "2nd"),
        (3, "3rd"),
        (4, "4th"),
        (11, "11th"),
        (12, "12th"),
        (13, "13th"),
        (21, "21st"),
        (22, "22nd"),
        (23, "23rd"),
        (31, "31st"),
        (111, "111th"),
    ],
)
def test_ordinal(n, expected):
    assert ordinal(n) == expected


class TestDescribeRule:
    def test_daily(self):
        assert describe_rule(DailyRule()) == "Daily"
        assert describe_rule(DailyRule(interval_length=3)) == "Every 3 days"

    def test_weekly_days(self):
        rule = WeeklyRule(interval_length=2, days_of_week=(1, 3))
        assert describe_rule(rule) == "Every 2 weeks on Monday, Wednesday"

    def test_weekly_all_days(self):
        rule = WeeklyRule(days_of_week=tuple(range(7)))
        assert describe_rule(rule) == "Weekly on all days"

    def test_monthly_day(self):
        assert describe_rule(MonthlyRule(day_of_month=15)) == "Monthly on the 15th"

    def test_monthly_nth_weekday(self):
        rule = MonthlyRule(interval_length=2, week_number=2, day_of_week=2)
        assert describe_rule(rule) == "Every 2 months on the 2nd Tuesday"

    def test_monthly_last_weekday(self):
        rule = MonthlyRule(week_number=5, day_of_week=5)
        assert describe_rule(rule) == "Monthly on the last Friday"

    def test_yearly(self):
        assert describe_rule(YearlyRule()) == "Annually"
        rule = YearlyRule(interval_length=3, month=1, day_of_month=29)
        assert describe_rule(rule) == "Every 3 years on February 29th"


class TestDescribeRuleVerbose:
    def test_plain_rule_matches_short_summary(self):
        assert describe_rule_verbose(MonthlyRule()) == "Monthly"

    def test_all_options(self):
        rule = DailyRule(
            start_date=date(2025, 1, 1),
            max_count=1,
            base_on_completion=True,
            on_weekend="next-weekday",
        )
        assert describe_rule_verbose(rule) == (
            "Daily, from 2025-01-01, 1 time, based on completion date, next weekday"
        )

    def test_end_date_with_format(self):
        rule = DailyRule(interval_length=2, end_date=date(2025, 12, 31))
        assert (
            describe_rule_verbose(rule, "%d/%m/%Y") == "Every 2 days, until 31/12/2025"
        )

    def test_count_and_nearest(self):
        rule = WeeklyRule(max_count=4, on_weekend="nearest-weekday")
        assert describe_rule_verbose(rule) == "Weekly, 4 times, nearest weekday"
