"""Tests for command-name suggestions."""

import typer
from typer.testing import CliRunner

from taskrecur.utils.typer_helpers import SuggestingGroup, suggest_commands

runner = CliRunner()

COMMANDS = ["next", "describe", "validate", "presets", "config", "version"]


def test_close_match():
    assert suggest_commands("nxt", COMMANDS) == ["next"]


def test_transposed_letters():
    assert suggest_commands("conifg", COMMANDS)[0] == "config"


def test_no_match():
    assert suggest_commands("zzzz", COMMANDS) == []


def test_several_matches_listed():
    app = typer.Typer(cls=SuggestingGroup)

    @app.command("preview")
    def preview():
        pass

    @app.command("presets")
    def presets():
        pass

    result = runner.invoke(app, ["prese"])
    assert result.exit_code == 1
    assert "Did you mean one of these?" in result.output
    assert "presets" in result.output
    assert "preview" in result.output
