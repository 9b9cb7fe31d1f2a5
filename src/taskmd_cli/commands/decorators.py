"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer

from taskmd_cli.models import TaskMdError
from taskmd_cli.utils.exit_codes import ERROR_GENERAL, exit_code_for
from taskmd_cli.utils.logger import get_logger
from taskmd_cli.utils.messages import get_messages
from taskmd_cli.utils.ui.formatters import format_error


class AppError(Exception):
    """Custom application error with exit code."""

    def __init__(self, message: str, exit_code: int = ERROR_GENERAL):
        super().__init__(message)
        self.exit_code = exit_code


def command_wrapper(func: Callable):
    """Wrap a command with logging, error display and semantic exit codes."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger("cli")
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)
            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except (AppError, TaskMdError) as e:
            elapsed = time.monotonic() - start
            logger.error("command failed: %s (%.3fs) - %s", cmd, elapsed, str(e))
            format_error(str(e))
            code = e.exit_code if isinstance(e, AppError) else exit_code_for(e)
            raise typer.Exit(code=code) from e

        except (typer.Exit, typer.Abort):
            # Re-raise Typer's own exits (like --help, explicit Exit(0) or Ctrl-C at a prompt)
            raise

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                elapsed,
                str(e),
                traceback.format_exc(),
            )
            format_error(get_messages().t("error.unexpected", error=e))
            raise typer.Exit(code=ERROR_GENERAL) from e

    return wrapper
