"""Markdown-file implementation of TaskRepository."""

from __future__ import annotations

from taskmd_cli.adapters.markdown.document import (
    NOTES_HEADING,
    apply_updates,
    read_section,
    render_document,
)
from taskmd_cli.adapters.markdown.frontmatter import decode_metadata
from taskmd_cli.adapters.markdown.store import TaskStore, generate_id, today_string
from taskmd_cli.models import (
    NotFoundError,
    TaskCreate,
    TaskDetail,
    TaskFilters,
    TaskInfo,
    TaskLocation,
    TaskMdError,
    TaskMetadata,
    TaskStatus,
    TaskUpdate,
)
from taskmd_cli.repositories import TaskRepository
from taskmd_cli.utils.logger import get_logger
from taskmd_cli.utils.messages import Messages, get_messages

_LOCATION_KEYS = ("status", "completed_date", "path", "description")


def matches_filters(info: TaskInfo, text: str, filters: TaskFilters) -> bool:
    """Check a decoded task against search criteria.

    Due-date bounds only exclude tasks that have a due date; ISO dates compare
    correctly as strings. ``text`` is a case-insensitive substring match on the
    raw file content.
    """
    if filters.status and info.status != filters.status:
        return False
    if filters.priority and info.priority != filters.priority:
        return False
    if filters.project and info.project != filters.project:
        return False
    if filters.tag and filters.tag not in info.tags:
        return False
    if filters.due_before and info.due_date and info.due_date > filters.due_before:
        return False
    if filters.due_after and info.due_date and info.due_date < filters.due_after:
        return False
    if filters.text and filters.text.lower() not in text.lower():
        return False
    return True


class MarkdownTaskRepository(TaskRepository):
    """Task repository storing one Markdown document per task."""

    def __init__(
        self,
        store: TaskStore,
        messages: Messages | None = None,
        template: str | None = None,
    ):
        """Initialize the repository.

        Args:
            store: Status store for the task tree
            messages: Message catalogue for errors and progress-log wording
            template: Optional template text for new documents
        """
        self.store = store
        self.messages = messages or get_messages()
        self.template = template
        self.logger = get_logger("repository")

    def _to_info(self, location: TaskLocation, text: str) -> TaskInfo:
        metadata = decode_metadata(text, fallback_title=location.path.stem)
        fields = metadata.model_dump()
        # Location wins over stray front-matter keys of the same name
        for key in _LOCATION_KEYS:
            fields.pop(key, None)
        return TaskInfo(
            **fields,
            status=location.status,
            completed_date=location.completed_date,
            path=location.path,
        )

    def _scan(self, status: TaskStatus | str = "all"):
        """Yield (location, text, info) for every readable task file."""
        for location in self.store.list(status):
            try:
                text = self.store.read(location.path)
            except TaskMdError as e:
                # File vanished or became unreadable between listing and reading
                self.logger.warning("skipping %s: %s", location.path, e)
                continue
            yield location, text, self._to_info(location, text)

    def list_all(self, filters: TaskFilters | None = None) -> list[TaskInfo]:
        filters = filters or TaskFilters()
        return [
            info
            for _, text, info in self._scan(filters.status or "all")
            if matches_filters(info, text, filters)
        ]

    def locate(self, task_id: str) -> TaskLocation:
        for location, _, info in self._scan():
            if info.id == task_id:
                return location
        raise NotFoundError(self.messages.t("error.not_found", task_id=task_id))

    def get(self, task_id: str) -> TaskDetail:
        location = self.locate(task_id)
        text = self.store.read(location.path)
        info = self._to_info(location, text)
        return TaskDetail(
            **info.model_dump(),
            description=read_section(text, NOTES_HEADING),
        )

    def add(self, task_data: TaskCreate) -> TaskInfo:
        metadata = TaskMetadata(
            title=task_data.title,
            id=generate_id(),
            priority=task_data.priority,
            project=task_data.project,
            due_date=task_data.due_date,
            created_at=today_string(),
            tags=list(task_data.tags),
        )
        text = render_document(
            metadata,
            description=task_data.description,
            template=self.template,
            messages=self.messages,
        )
        location = self.store.create(metadata, text)
        return self._to_info(location, text)

    def update(self, task_id: str, updates: TaskUpdate) -> TaskInfo:
        location = self.locate(task_id)
        text = self.store.read(location.path)
        new_text = apply_updates(
            text, updates, today_string(), messages=self.messages, path=location.path
        )
        self.store.write(location.path, new_text)
        self.logger.info("task updated: %s (%s)", task_id, ", ".join(sorted(updates.provided())))
        return self._to_info(location, new_text)

    def move(self, task_id: str, status: TaskStatus) -> TaskInfo:
        location = self.locate(task_id)
        new_location = self.store.transition(location.path, status)
        return self._to_info(new_location, self.store.read(new_location.path))

    def delete(self, task_id: str) -> TaskInfo:
        location = self.locate(task_id)
        info = self._to_info(location, self.store.read(location.path))
        self.store.delete(location.path)
        return info
