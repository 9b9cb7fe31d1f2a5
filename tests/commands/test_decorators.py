"""Unit tests for commands/decorators.py."""

from __future__ import annotations

import pytest
import typer

from taskmd_cli.commands.decorators import AppError, command_wrapper
from taskmd_cli.models import MalformedDocumentError, NotFoundError, TaskIOError, ValidationError
from taskmd_cli.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_IO,
    ERROR_MALFORMED,
    ERROR_NOT_FOUND,
)


def _raising(error: Exception):
    @command_wrapper
    def command():
        raise error

    return command


class TestCommandWrapper:
    def test_returns_result(self):
        @command_wrapper
        def command(value):
            return value * 2

        assert command(21) == 42

    def test_preserves_name(self):
        @command_wrapper
        def my_command():
            """Doc."""

        assert my_command.__name__ == "my_command"
        assert my_command.__doc__ == "Doc."

    @pytest.mark.parametrize(
        "error, code",
        [
            (NotFoundError("missing"), ERROR_NOT_FOUND),
            (ValidationError("bad"), ERROR_INVALID_ARGS),
            (TaskIOError("disk"), ERROR_IO),
            (MalformedDocumentError("broken"), ERROR_MALFORMED),
            (AppError("custom", 7), 7),
            (RuntimeError("boom"), ERROR_GENERAL),
        ],
    )
    def test_exit_codes(self, error, code, capsys):
        with pytest.raises(typer.Exit) as exc_info:
            _raising(error)()
        assert exc_info.value.exit_code == code
        assert "Error:" in capsys.readouterr().out

    def test_unexpected_error_message(self, capsys):
        with pytest.raises(typer.Exit):
            _raising(RuntimeError("boom"))()
        assert "An unexpected error occurred: boom" in capsys.readouterr().out

    def test_typer_exit_passes_through(self):
        with pytest.raises(typer.Exit) as exc_info:
            _raising(typer.Exit(0))()
        assert exc_info.value.exit_code == 0
