"""
Exit codes for taskmd.

Semantic exit codes so scripts can tell what went wrong without parsing output.
"""

from taskmd_cli.models.exceptions import (
    MalformedDocumentError,
    NotFoundError,
    TaskIOError,
    ValidationError,
)

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2

# Filesystem error (permissions, disk full, file vanished)
ERROR_IO = 3

# Task document could not be parsed for editing
ERROR_MALFORMED = 4

# Resource not found
ERROR_NOT_FOUND = 5


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_IO: "ERROR_IO",
        ERROR_MALFORMED: "ERROR_MALFORMED",
        ERROR_NOT_FOUND: "ERROR_NOT_FOUND",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    descriptions = {
        SUCCESS: "Command executed successfully",
        ERROR_GENERAL: "A general error occurred",
        ERROR_INVALID_ARGS: "Invalid arguments or validation error",
        ERROR_IO: "Filesystem error - check permissions and free space",
        ERROR_MALFORMED: "Task document has no front matter",
        ERROR_NOT_FOUND: "Resource not found",
    }
    return descriptions.get(code, "Unknown error")


def exit_code_for(error: Exception) -> int:
    """Map a taskmd exception to its exit code."""
    if isinstance(error, NotFoundError):
        return ERROR_NOT_FOUND
    if isinstance(error, ValidationError):
        return ERROR_INVALID_ARGS
    if isinstance(error, MalformedDocumentError):
        return ERROR_MALFORMED
    if isinstance(error, TaskIOError):
        return ERROR_IO
    return ERROR_GENERAL
