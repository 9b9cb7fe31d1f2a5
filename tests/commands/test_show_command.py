"""Unit tests for show_command.py."""

from __future__ import annotations

import json

from typer.testing import CliRunner

from taskmd_cli.commands.show_command import app
from taskmd_cli.utils.exit_codes import ERROR_NOT_FOUND

runner = CliRunner()


class TestShowCommand:
    def test_show_detail(self, make_task):
        task = make_task("Milk", description="Two litres", project="Home")
        result = runner.invoke(app, [task.id])
        assert result.exit_code == 0, result.output
        assert "Milk" in result.output
        assert "Two litres" in result.output
        assert "Home" in result.output

    def test_suffix_lookup(self, make_task):
        task = make_task("Milk")
        result = runner.invoke(app, [task.id[-6:], "-o", "json"])
        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload["id"] == task.id
        assert payload["description"] is not None

    def test_not_found(self):
        result = runner.invoke(app, ["task-missing"])
        assert result.exit_code == ERROR_NOT_FOUND
        assert 'Task "task-missing" not found' in result.output
