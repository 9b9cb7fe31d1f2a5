"""Markdown-file storage: front-matter codec, document editor, status store."""

from .store import TaskStore, generate_id, today_string
from .task_repository import MarkdownTaskRepository

__all__ = ["MarkdownTaskRepository", "TaskStore", "generate_id", "today_string"]
