"""Unit tests for dashboard_command.py."""

from __future__ import annotations

import json

from typer.testing import CliRunner

from taskmd_cli.commands.dashboard_command import app

runner = CliRunner()


class TestDashboardCommand:
    def test_table(self, task_service, make_task):
        task = make_task("Report", priority="high", due_date="2000-01-01")
        make_task("Other", project="Home")

        result = runner.invoke(app, [])
        assert result.exit_code == 0, result.output
        assert "Overdue: 1" in result.output
        assert "Due today: 0" in result.output
        assert "Home" in result.output

        task_service.start_task(task.id)
        task_service.complete_task(task.id)
        result = runner.invoke(app, [])
        assert "Recently completed:" in result.output
        assert "Report" in result.output

    def test_json(self, make_task):
        make_task("Report")
        result = runner.invoke(app, ["-o", "json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["task_counts"]["todo"] == 1
        assert data["task_counts"]["total"] == 1
