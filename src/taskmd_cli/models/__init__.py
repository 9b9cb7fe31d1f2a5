"""taskmd domain models.

This package contains Pydantic models that represent tasks, their location in
the task tree and the configuration of the application.
"""

from .config_models import AppConfig
from .core import (
    PRIORITIES,
    CompletedEntry,
    DashboardData,
    TaskCreate,
    TaskDetail,
    TaskFilters,
    TaskInfo,
    TaskLocation,
    TaskMetadata,
    TaskPriority,
    TaskStatus,
    TaskUpdate,
    check_single_line,
)
from .exceptions import (
    MalformedDocumentError,
    NotFoundError,
    TaskIOError,
    TaskMdError,
    ValidationError,
)

__all__ = [
    # Task models
    "PRIORITIES",
    "TaskMetadata",
    "TaskPriority",
    "TaskStatus",
    "TaskLocation",
    "TaskInfo",
    "TaskDetail",
    "TaskCreate",
    "TaskUpdate",
    "TaskFilters",
    "check_single_line",
    # Dashboard
    "CompletedEntry",
    "DashboardData",
    # Config
    "AppConfig",
    # Errors
    "TaskMdError",
    "NotFoundError",
    "ValidationError",
    "MalformedDocumentError",
    "TaskIOError",
]
