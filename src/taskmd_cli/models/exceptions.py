"""Custom exceptions for taskmd."""


class TaskMdError(Exception):
    """Base exception for all taskmd errors."""


class NotFoundError(TaskMdError):
    """Raised when a task id or task file does not exist."""


class ValidationError(TaskMdError):
    """Raised when caller input violates a precondition."""


class MalformedDocumentError(TaskMdError):
    """Raised when a document has no front-matter block during an edit."""


class TaskIOError(TaskMdError, OSError):
    """Raised when a filesystem operation on the task tree fails."""
