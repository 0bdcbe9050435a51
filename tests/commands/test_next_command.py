"""Tests for the 'next' command."""

import json

import pytest
from typer.testing import CliRunner

from taskrecur.main import app

runner = CliRunner()


def _next(*args):
    return runner.invoke(app, ["next", *args])


class TestNextCommand:
    def test_help(self):
        result = _next("--help")
        assert result.exit_code == 0
        assert "--from" in result.output

    def test_json_output(self):
        result = _next(
            '{"intervalUnit": "week", "daysOfWeek": [1, 3]}',
            "--from", "2025-01-15",
            "--count", "3",
            "--output", "json",
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert [item["due"] for item in data] == [
            "2025-01-20",
            "2025-01-22",
            "2025-01-27",
        ]
        assert data[0]["weekday"] == "Monday"

    def test_preset_name(self):
        result = _next("monthly", "--from", "2025-01-31", "-n", "2", "-o", "json")
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert [item["due"] for item in data] == ["2025-02-28", "2025-03-28"]

    def test_weekend_adjusted_anchor_reported(self):
        rule = '{"intervalUnit": "month", "dayOfMonth": 1, "onWeekend": "nearest-weekday"}'
        result = _next(rule, "--from", "2025-01-01", "-n", "1", "-o", "json")
        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == [
            {"due": "2025-01-31", "weekday": "Friday", "anchor": "2025-02-01"}
        ]

    def test_pretty_output(self):
        result = _next("daily", "--from", "2025-03-02", "-n", "2", "-o", "pretty")
        assert result.exit_code == 0, result.output
        assert "2025-03-03 (Monday)" in result.output
        assert "2025-03-04 (Tuesday)" in result.output

    def test_quiet_output(self):
        result = _next("daily", "--from", "2025-03-02", "-n", "2", "-o", "quiet")
        assert result.exit_code == 0, result.output
        assert result.output.split() == ["2025-03-03", "2025-03-04"]

    def test_count_defaults_to_config(self):
        result = _next("daily", "--from", "2025-01-01", "-o", "json")
        assert result.exit_code == 0, result.output
        assert len(json.loads(result.output)) == 5

    def test_rule_file(self, tmp_path):
        rule_file = tmp_path / "rule.yaml"
        rule_file.write_text("intervalUnit: year\nmonth: 1\ndayOfMonth: 29\n")
        result = _next(str(rule_file), "--from", "2024-02-29", "-n", "1", "-o", "json")
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)[0]["due"] == "2025-02-28"

    def test_recurrence_ended(self):
        result = _next(
            '{"intervalUnit": "day", "maxCount": 1}', "--from", "2025-01-01", "--index", "1"
        )
        assert result.exit_code == 0, result.output
        assert "no further occurrences" in result.output

    def test_recurrence_ended_json(self):
        result = _next(
            '{"intervalUnit": "day", "maxCount": 1}',
            "--from", "2025-01-01",
            "--index", "1",
            "-o", "json",
        )
        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == []

    def test_invalid_rule(self):
        result = _next('{"intervalUnit": "day", "intervalLength": 0}', "--from", "2025-01-01")
        assert result.exit_code == 2
        assert "Error" in result.output

    def test_missing_rule_file(self, tmp_path):
        result = _next(str(tmp_path / "missing.json"), "--from", "2025-01-01")
        assert result.exit_code == 5

    def test_bad_from_date(self):
        result = _next("daily", "--from", "01/02/2025")
        assert result.exit_code == 2
        assert "--from" in result.output

    @pytest.mark.parametrize("args", [["--count", "0"], ["--index", "-1"]])
    def test_invalid_count_or_index(self, args):
        result = _next("daily", "--from", "2025-01-01", *args)
        assert result.exit_code == 2
