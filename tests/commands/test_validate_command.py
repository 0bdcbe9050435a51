"""Tests for the 'validate' command."""

import json

import yaml
from typer.testing import CliRunner

from taskrecur.main import app

runner = CliRunner()


def test_valid_rule_prints_normalized_json():
    rule = '{"intervalUnit": "week", "daysOfWeek": [5, 1, 5]}'
    result = runner.invoke(app, ["validate", rule])
    assert result.exit_code == 0, result.output
    assert "Recurrence rule is valid" in result.output
    normalized = result.output[result.output.index("{"):]
    assert json.loads(normalized) == {
        "intervalUnit": "week",
        "intervalLength": 1,
        "daysOfWeek": [1, 5],
    }


def test_yaml_output(tmp_path):
    rule_file = tmp_path / "rule.json"
    rule_file.write_text('{"intervalUnit": "day", "endDate": "2025-06-30"}')
    result = runner.invoke(app, ["validate", str(rule_file), "-o", "yaml"])
    assert result.exit_code == 0, result.output
    body = result.output.split("\n", 1)[1]
    assert yaml.safe_load(body)["endDate"] == "2025-06-30"


def test_quiet_valid():
    result = runner.invoke(app, ["validate", "daily", "--quiet"])
    assert result.exit_code == 0
    assert result.output == ""


def test_end_date_with_max_count_rejected():
    rule = '{"intervalUnit": "day", "endDate": "2025-01-01", "maxCount": 3}'
    result = runner.invoke(app, ["validate", rule])
    assert result.exit_code == 2


def test_malformed_json_rejected():
    result = runner.invoke(app, ["validate", "{intervalUnit"])
    assert result.exit_code == 2
    assert "Could not parse" in result.output


def test_missing_file():
    result = runner.invoke(app, ["validate", "no-such-rule.yaml"])
    assert result.exit_code == 5
    assert "not found" in result.output
