"""Unit tests for SuggestingGroup (typer_helpers.py)."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import click
import pytest

from taskmd_cli.utils.typer_helpers import SuggestingGroup


def _make_group(*names: str) -> SuggestingGroup:
    group = SuggestingGroup(name="taskmd")
    group.commands = {name: MagicMock() for name in names}
    return group


def _ctx():
    ctx = MagicMock()
    ctx.info_name = "taskmd"
    return ctx


class TestSuggestingGroup:
    def test_valid_command_passes_through(self):
        group = _make_group("list")
        with patch.object(
            SuggestingGroup.__bases__[0],
            "resolve_command",
            return_value=("list", MagicMock(), []),
        ):
            assert group.resolve_command(_ctx(), ["list"])[0] == "list"

    def test_suggestion_printed_and_exit_2(self):
        group = _make_group("create", "list", "delete")
        console = MagicMock()
        with (
            patch.object(
                SuggestingGroup.__bases__[0],
                "resolve_command",
                side_effect=click.UsageError("No such command"),
            ),
            patch("taskmd_cli.utils.typer_helpers.get_console", return_value=console),
        ):
            with pytest.raises(click.exceptions.Exit) as exc_info:
                group.resolve_command(_ctx(), ["lst"])

        assert exc_info.value.exit_code == 2
        printed = " ".join(str(call.args[0]) for call in console.print.call_args_list if call.args)
        assert "Did you mean this?" in printed
        assert "list" in printed

    def test_no_close_match_reraises(self):
        group = _make_group("create", "list")
        with patch.object(
            SuggestingGroup.__bases__[0],
            "resolve_command",
            side_effect=click.UsageError("No such command"),
        ):
            with pytest.raises(click.UsageError):
                group.resolve_command(_ctx(), ["zzzzzz"])

    def test_no_args_reraises(self):
        group = _make_group("list")
        with patch.object(
            SuggestingGroup.__bases__[0],
            "resolve_command",
            side_effect=click.UsageError("Missing command"),
        ):
            with pytest.raises(click.UsageError):
                group.resolve_command(_ctx(), [])
