"""Unit tests for main.py, the CLI entry point."""

from __future__ import annotations

from unittest.mock import patch

from typer.testing import CliRunner

from taskmd_cli.main import app, main

runner = CliRunner()

COMMANDS = [
    "create",
    "list",
    "search",
    "show",
    "start",
    "complete",
    "status",
    "update",
    "delete",
    "today",
    "dashboard",
    "serve",
    "config",
    "version",
]


class TestTopLevel:
    def test_help_lists_commands(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        for name in COMMANDS:
            assert name in result.output

    def test_no_args_shows_help(self):
        result = runner.invoke(app, [])
        assert "Usage" in result.output

    def test_typo_suggests_command(self):
        result = runner.invoke(app, ["dashbord"])
        assert result.exit_code == 2
        assert "dashboard" in result.output

    def test_main_calls_app(self):
        with patch("taskmd_cli.main.app") as mock_app:
            main()
        mock_app.assert_called_once_with()


class TestGlobalOptions:
    def test_root_option(self, tmp_path, task_root):
        other = tmp_path / "other"
        result = runner.invoke(app, ["--root", str(other), "create", "Elsewhere"])
        assert result.exit_code == 0, result.output
        assert len(list((other / "todo").glob("*.md"))) == 1
        assert not (task_root / "todo").exists()

    def test_language_option(self):
        result = runner.invoke(app, ["-l", "ja", "create", "牛乳"])
        assert result.exit_code == 0, result.output
        assert "タスク \"牛乳\" が作成されました" in result.output

    def test_full_lifecycle(self, task_root):
        result = runner.invoke(app, ["create", "Write report", "-p", "high"])
        assert result.exit_code == 0, result.output
        [path] = (task_root / "todo").glob("*.md")
        task_id = next(
            line.split('"')[1]
            for line in path.read_text(encoding="utf-8").splitlines()
            if line.startswith("id:")
        )

        assert runner.invoke(app, ["start", task_id]).exit_code == 0
        assert runner.invoke(app, ["complete", task_id]).exit_code == 0
        completed = list((task_root / "completed").glob("*/*.md"))
        assert [p.name for p in completed] == [path.name]

        result = runner.invoke(app, ["delete", task_id, "-f"])
        assert result.exit_code == 0, result.output
        assert not completed[0].exists()
