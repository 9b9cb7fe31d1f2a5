"""Unit tests for MarkdownTaskRepository."""

from __future__ import annotations

import pytest

from taskmd_cli.adapters.markdown import MarkdownTaskRepository, TaskStore
from taskmd_cli.adapters.markdown.task_repository import matches_filters
from taskmd_cli.models import (
    MalformedDocumentError,
    NotFoundError,
    TaskCreate,
    TaskFilters,
    TaskStatus,
    TaskUpdate,
)
from taskmd_cli.utils.messages import get_messages


def _add(repository, title="Write report", **fields):
    return repository.add(TaskCreate(title=title, **fields))


class TestAddAndGet:
    def test_add_returns_task_in_todo(self, repository):
        task = _add(repository, priority="high", project="Docs", tags=["writing"])
        assert task.status is TaskStatus.TODO
        assert task.id.startswith("task-")
        assert task.priority == "high"
        assert task.project == "Docs"
        assert task.tags == ["writing"]
        assert task.path.exists()

    def test_get_includes_notes(self, repository):
        task = _add(repository, description="Outline first")
        detail = repository.get(task.id)
        assert detail.id == task.id
        assert detail.description == "Outline first"

    def test_get_unknown_raises(self, repository):
        with pytest.raises(NotFoundError):
            repository.get("task-missing")

    def test_template_is_used(self, store):
        template = '---\ntitle: "{title}"\nid: "{id}"\nproject: "{project}"\n---\n# {title}\n'
        repository = MarkdownTaskRepository(store, template=template)
        task = repository.add(TaskCreate(title="From template", project="T"))
        assert task.project == "T"
        assert task.path.read_text(encoding="utf-8").endswith("# From template\n")


class TestListAll:
    def test_filters(self, repository):
        _add(repository, "Alpha", priority="high", tags=["x"])
        _add(repository, "Beta", priority="low", project="Home")
        assert {t.title for t in repository.list_all()} == {"Alpha", "Beta"}
        assert [t.title for t in repository.list_all(TaskFilters(priority="high"))] == ["Alpha"]
        assert [t.title for t in repository.list_all(TaskFilters(project="Home"))] == ["Beta"]
        assert [t.title for t in repository.list_all(TaskFilters(tag="x"))] == ["Alpha"]

    def test_files_without_front_matter_still_list(self, repository, store):
        store.todo_dir.mkdir(parents=True)
        (store.todo_dir / "loose-note.md").write_text("# Loose note\n", encoding="utf-8")
        [task] = repository.list_all()
        assert task.title == "loose-note"
        assert task.id == "unknown"

    def test_front_matter_status_key_does_not_override_location(self, repository, store):
        store.wip_dir.mkdir(parents=True)
        (store.wip_dir / "odd.md").write_text(
            '---\ntitle: "Odd"\nstatus: "todo"\n---\n', encoding="utf-8"
        )
        [task] = repository.list_all()
        assert task.status is TaskStatus.WIP


class TestMatchesFilters:
    @pytest.fixture()
    def task(self, repository):
        return _add(repository, "Due task", due_date="2025-06-10")

    @pytest.mark.parametrize(
        "filters, expected",
        [
            (TaskFilters(due_before="2025-06-10"), True),
            (TaskFilters(due_before="2025-06-09"), False),
            (TaskFilters(due_after="2025-06-10"), True),
            (TaskFilters(due_after="2025-06-11"), False),
            (TaskFilters(text="DUE TASK"), True),
            (TaskFilters(text="nowhere"), False),
            (TaskFilters(status="wip"), False),
        ],
    )
    def test_criteria(self, task, filters, expected):
        text = task.path.read_text(encoding="utf-8")
        assert matches_filters(task, text, filters) is expected

    def test_due_bounds_ignore_tasks_without_due_date(self, repository):
        task = _add(repository, "No due")
        text = task.path.read_text(encoding="utf-8")
        assert matches_filters(task, text, TaskFilters(due_before="2000-01-01"))


class TestUpdateMoveDelete:
    def test_update_writes_in_place(self, repository):
        task = _add(repository)
        updated = repository.update(task.id, TaskUpdate(priority="low"))
        assert updated.priority == "low"
        assert updated.path == task.path
        assert "priority: medium → low" in task.path.read_text(encoding="utf-8")

    def test_update_malformed_document(self, repository, store):
        store.todo_dir.mkdir(parents=True)
        (store.todo_dir / "broken.md").write_text("# broken\n", encoding="utf-8")
        with pytest.raises(MalformedDocumentError):
            repository.update("unknown", TaskUpdate(priority="low"))

    def test_move_keeps_id(self, repository):
        task = _add(repository)
        moved = repository.move(task.id, TaskStatus.WIP)
        assert moved.id == task.id
        assert moved.status is TaskStatus.WIP
        assert not task.path.exists()

    def test_delete(self, repository):
        task = _add(repository)
        deleted = repository.delete(task.id)
        assert deleted.id == task.id
        assert repository.list_all() == []
        with pytest.raises(NotFoundError):
            repository.delete(task.id)

    def test_japanese_messages_keep_fixed_headings(self, store):
        repository = MarkdownTaskRepository(store, messages=get_messages("ja"))
        task = repository.add(TaskCreate(title="レポート", description="メモ"))
        assert repository.get(task.id).description == "メモ"
        repository.update(task.id, TaskUpdate(priority="high"))
        text = task.path.read_text(encoding="utf-8")
        assert text.count("## Progress") == 1
        assert "優先度: medium → high" in text

    def test_language_switch_between_edits(self, store):
        ja_repository = MarkdownTaskRepository(store, messages=get_messages("ja"))
        en_repository = MarkdownTaskRepository(store, messages=get_messages("en"))
        task = ja_repository.add(TaskCreate(title="Report", description="first"))

        en_repository.update(task.id, TaskUpdate(description="second"))

        assert ja_repository.get(task.id).description == "second"
        assert task.path.read_text(encoding="utf-8").count("## Notes") == 1


def test_store_fixture_isolated(store: TaskStore, task_root):
    assert store.root == task_root
