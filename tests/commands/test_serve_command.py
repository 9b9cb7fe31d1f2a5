"""Unit tests for serve_command.py."""

from __future__ import annotations

from unittest.mock import patch

from typer.testing import CliRunner

from taskmd_cli.commands.serve_command import app

runner = CliRunner()


class TestServeCommand:
    def test_uses_config_defaults(self):
        with patch("flask.Flask.run") as run:
            result = runner.invoke(app, [])
        assert result.exit_code == 0, result.output
        run.assert_called_once_with(host="127.0.0.1", port=3000, debug=False)

    def test_options_override(self):
        with patch("flask.Flask.run") as run:
            result = runner.invoke(app, ["--host", "0.0.0.0", "--port", "8080"])
        assert result.exit_code == 0, result.output
        run.assert_called_once_with(host="0.0.0.0", port=8080, debug=False)
        assert "http://0.0.0.0:8080" in result.output
