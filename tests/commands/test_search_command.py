"""Unit tests for search_command.py."""

from __future__ import annotations

import json

from typer.testing import CliRunner

from taskmd_cli.commands.search_command import app
from taskmd_cli.utils.exit_codes import ERROR_INVALID_ARGS

runner = CliRunner()


class TestSearchCommand:
    def test_text_and_criteria(self, make_task):
        make_task("Milk run", priority="high", due_date="2025-06-01")
        make_task("Bread", priority="high", description="also milk", due_date="2025-08-01")
        make_task("Cheese", priority="low")

        result = runner.invoke(app, ["MILK", "-p", "high", "--due-before", "2025-07-01", "-o", "json"])
        assert result.exit_code == 0, result.output
        assert [t["title"] for t in json.loads(result.output)] == ["Milk run"]

    def test_found_count(self, make_task):
        make_task("Milk run")
        result = runner.invoke(app, ["milk"])
        assert result.exit_code == 0, result.output
        assert "1 task(s) found" in result.output

    def test_no_matches(self, make_task):
        make_task("Milk run")
        result = runner.invoke(app, ["--status", "completed"])
        assert result.exit_code == 0
        assert "No tasks match the given criteria." in result.output

    def test_invalid_date(self):
        result = runner.invoke(app, ["--due-after", "June"])
        assert result.exit_code == ERROR_INVALID_ARGS
