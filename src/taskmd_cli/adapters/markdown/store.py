"""Directory-backed status store for task documents.

Layout under the root directory::

    todo/*.md
    wip/*.md
    completed/<YYYY-MM-DD>/*.md

A task's status is the directory holding its file; nothing inside the
document records it. Moving a file between directories is the status
transition. Renames are not atomic across filesystems and no locking is done,
so concurrent processes working on the same tree can race.
"""

from __future__ import annotations

import re
import secrets
import threading
import time
from datetime import UTC, datetime
from pathlib import Path

from taskmd_cli.models import (
    NotFoundError,
    TaskIOError,
    TaskLocation,
    TaskMetadata,
    TaskStatus,
    ValidationError,
)
from taskmd_cli.utils.logger import get_logger

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"
_UNSAFE_CHARS = re.compile(r"[^a-z0-9]")

_id_lock = threading.Lock()
_last_millis = 0


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def generate_id() -> str:
    """Generate a task identifier.

    Format: ``task-<base36 milliseconds>-<6 hex chars>``. The millisecond part
    never repeats within a process, the random part separates processes.
    """
    global _last_millis
    with _id_lock:
        millis = time.time_ns() // 1_000_000
        if millis <= _last_millis:
            millis = _last_millis + 1
        _last_millis = millis
    return f"task-{_to_base36(millis)}-{secrets.token_hex(3)}"


def today_string() -> str:
    """Return today's date (UTC) as YYYY-MM-DD."""
    return datetime.now(UTC).date().isoformat()


def slugify(title: str) -> str:
    """Lowercase *title* and replace every character outside [a-z0-9] with '-'."""
    return _UNSAFE_CHARS.sub("-", title.lower())


class TaskStore:
    """Maps task statuses to directories under a root path."""

    def __init__(self, root: str | Path):
        """Initialize the store.

        Args:
            root: Root of the task tree; it does not have to exist yet.
        """
        self.root = Path(root)
        self.todo_dir = self.root / TaskStatus.TODO.value
        self.wip_dir = self.root / TaskStatus.WIP.value
        self.completed_dir = self.root / TaskStatus.COMPLETED.value
        self.logger = get_logger("store")

    # -- locations -------------------------------------------------------

    def directory_for(self, status: TaskStatus, date: str | None = None) -> Path:
        """Directory that holds tasks in *status*."""
        if status is TaskStatus.TODO:
            return self.todo_dir
        if status is TaskStatus.WIP:
            return self.wip_dir
        return self.completed_dir / (date or today_string())

    def location_for(self, path: str | Path) -> TaskLocation:
        """Derive the location of a task file from its directory.

        Raises:
            ValidationError: If the file is not inside a status directory
        """
        path = Path(path)
        parent = path.parent
        if parent == self.todo_dir:
            return TaskLocation(path=path, status=TaskStatus.TODO)
        if parent == self.wip_dir:
            return TaskLocation(path=path, status=TaskStatus.WIP)
        if parent.parent == self.completed_dir:
            return TaskLocation(
                path=path, status=TaskStatus.COMPLETED, completed_date=parent.name
            )
        raise ValidationError(f"{path} is not inside the task tree {self.root}")

    # -- enumeration -----------------------------------------------------

    @staticmethod
    def _markdown_files(directory: Path) -> list[Path]:
        if not directory.is_dir():
            return []
        return [p for p in directory.iterdir() if p.suffix == ".md" and p.is_file()]

    def list(self, status: TaskStatus | str = "all") -> list[TaskLocation]:
        """List task files for *status* (todo, wip, completed or all).

        Completed tasks are collected from every date subdirectory and carry
        the subdirectory name as their completion date. Order follows the
        filesystem; missing directories yield nothing.
        """
        status = str(status)
        if status != "all" and status not in {s.value for s in TaskStatus}:
            raise ValidationError(f"Unknown status: {status}")

        locations: list[TaskLocation] = []
        if status in ("all", TaskStatus.TODO):
            locations.extend(
                TaskLocation(path=p, status=TaskStatus.TODO)
                for p in self._markdown_files(self.todo_dir)
            )
        if status in ("all", TaskStatus.WIP):
            locations.extend(
                TaskLocation(path=p, status=TaskStatus.WIP)
                for p in self._markdown_files(self.wip_dir)
            )
        if status in ("all", TaskStatus.COMPLETED) and self.completed_dir.is_dir():
            for date_dir in self.completed_dir.iterdir():
                if not date_dir.is_dir():
                    continue
                locations.extend(
                    TaskLocation(
                        path=p,
                        status=TaskStatus.COMPLETED,
                        completed_date=date_dir.name,
                    )
                    for p in self._markdown_files(date_dir)
                )
        return locations

    # -- file operations -------------------------------------------------

    def read(self, path: str | Path) -> str:
        path = Path(path)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise NotFoundError(f"Task file {path} not found") from e
        except OSError as e:
            raise TaskIOError(f"Cannot read {path}: {e}") from e

    def write(self, path: str | Path, text: str) -> None:
        path = Path(path)
        if not path.exists():
            raise NotFoundError(f"Task file {path} not found")
        try:
            path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise TaskIOError(f"Cannot write {path}: {e}") from e

    def _unique_path(self, directory: Path, stem: str) -> Path:
        candidate = directory / f"{stem}.md"
        counter = 2
        while candidate.exists():
            candidate = directory / f"{stem}-{counter}.md"
            counter += 1
        return candidate

    def create(self, metadata: TaskMetadata, text: str) -> TaskLocation:
        """Write a new task document into the todo directory.

        The file name is the slugified title plus today's date; a numeric
        suffix is added when that name is taken.

        Raises:
            TaskIOError: If the directory or the file cannot be written
        """
        try:
            self.todo_dir.mkdir(parents=True, exist_ok=True)
            path = self._unique_path(self.todo_dir, f"{slugify(metadata.title)}-{today_string()}")
            path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise TaskIOError(f"Cannot create task in {self.todo_dir}: {e}") from e
        self.logger.info("task file created: %s", path)
        return TaskLocation(path=path, status=TaskStatus.TODO)

    def transition(self, path: str | Path, new_status: TaskStatus | str) -> TaskLocation:
        """Move a task file into the directory of *new_status*.

        Completed tasks always land in ``completed/<today>``. The file name is
        kept. No legality checks happen here.

        Raises:
            NotFoundError: If the source file does not exist
            ValidationError: If *new_status* is unknown
            TaskIOError: If the target exists or the move fails
        """
        path = Path(path)
        if not path.is_file():
            raise NotFoundError(f"Task file {path} not found")
        try:
            status = TaskStatus(new_status)
        except ValueError as e:
            raise ValidationError(f"Unknown status: {new_status}") from e

        target_dir = self.directory_for(status)
        target = target_dir / path.name
        if target.exists():
            raise TaskIOError(f"Target file {target} already exists")
        try:
            target_dir.mkdir(parents=True, exist_ok=True)
            path.rename(target)
        except FileNotFoundError as e:
            raise NotFoundError(f"Task file {path} not found") from e
        except OSError as e:
            raise TaskIOError(f"Cannot move {path} to {target_dir}: {e}") from e

        self.logger.info("task file moved: %s -> %s", path, target)
        return self.location_for(target)

    def delete(self, path: str | Path) -> None:
        """Remove a task file.

        Raises:
            NotFoundError: If the file does not exist
        """
        path = Path(path)
        try:
            path.unlink()
        except FileNotFoundError as e:
            raise NotFoundError(f"Task file {path} not found") from e
        except OSError as e:
            raise TaskIOError(f"Cannot delete {path}: {e}") from e
        self.logger.info("task file deleted: %s", path)
