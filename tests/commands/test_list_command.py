"""Unit tests for list_command.py."""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from taskmd_cli.commands.list_command import app
from taskmd_cli.utils.exit_codes import ERROR_INVALID_ARGS

runner = CliRunner()


@pytest.fixture()
def tasks(task_service, make_task):
    high = make_task("Alpha", priority="high", project="Work", tags=["x"])
    make_task("Beta", priority="low", project="Home")
    task_service.start_task(high.id)


def _titles(output: str) -> list[str]:
    return [task["title"] for task in json.loads(output)]


class TestListCommand:
    def test_empty(self):
        result = runner.invoke(app, [])
        assert result.exit_code == 0
        assert "No tasks." in result.output

    def test_table(self, tasks):
        result = runner.invoke(app, [])
        assert result.exit_code == 0, result.output
        assert "Alpha" in result.output
        assert "Beta" in result.output
        assert "Total: 2 task(s)" in result.output

    def test_status_argument(self, tasks):
        result = runner.invoke(app, ["wip", "-o", "json"])
        assert result.exit_code == 0, result.output
        assert _titles(result.output) == ["Alpha"]

    def test_filters(self, tasks):
        result = runner.invoke(app, ["--project", "Home", "-o", "json"])
        assert _titles(result.output) == ["Beta"]

        result = runner.invoke(app, ["--tag", "x", "-o", "json"])
        assert _titles(result.output) == ["Alpha"]

    def test_group_by_project(self, tasks):
        result = runner.invoke(app, ["-g"])
        assert result.exit_code == 0, result.output
        assert "Home (1)" in result.output
        assert "Work (1)" in result.output

    def test_yaml(self, tasks):
        result = runner.invoke(app, ["todo", "-o", "yaml"])
        assert result.exit_code == 0, result.output
        assert "title: Beta" in result.output

    def test_unknown_status(self):
        result = runner.invoke(app, ["done"])
        assert result.exit_code == ERROR_INVALID_ARGS
        assert "Error:" in result.output

    def test_configured_output_format(self, tasks):
        from taskmd_cli.services.config_service import get_config_service

        get_config_service().set_value("output.format", "json")
        result = runner.invoke(app, ["todo"])
        assert result.exit_code == 0, result.output
        assert _titles(result.output) == ["Beta"]
