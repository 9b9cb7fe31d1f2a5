"""User-visible message catalogue.

Every string shown to a user, plus the progress-log wording written into task
documents, comes from here so the tool can be switched between languages with
the ``ui.language`` setting. Section headings are fixed and live in
``adapters.markdown.document``.
"""

from __future__ import annotations

from functools import lru_cache

DEFAULT_LANGUAGE = "en"

_CATALOGUES: dict[str, dict[str, str]] = {
    "en": {
        # document text
        "doc.default_notes": "Write the details of the task and working notes here.",
        "doc.initial_entry": "initial creation",
        # progress log
        "progress.updated": "task updated",
        "progress.change": "{field}: {old} → {new}",
        "progress.none": "none",
        "progress.field.title": "title",
        "progress.field.priority": "priority",
        "progress.field.due_date": "due date",
        # labels
        "status.todo": "todo",
        "status.wip": "in progress",
        "status.completed": "completed",
        "priority.high": "high",
        "priority.medium": "medium",
        "priority.low": "low",
        "label.unset": "not set",
        "label.notes": "Notes",
        # operation results
        "task.created": 'Task "{title}" created',
        "task.updated": 'Task "{title}" updated',
        "task.deleted": 'Task "{title}" deleted',
        "task.found": "Task found",
        "task.found_many": "{count} task(s) found",
        "task.today": "{count} task(s) for today",
        "task.status_changed": 'Task "{title}" moved to {status}',
        "task.status_unchanged": 'Task "{title}" is already {status}',
        "task.none": "No tasks.",
        "task.none_matching": "No tasks match the given criteria.",
        "task.total": "Total: {count} task(s)",
        # errors
        "error.not_found": 'Task "{task_id}" not found',
        "error.file_not_found": "Task file {path} not found",
        "error.title_required": "Title is required",
        "error.empty_update": "Specify at least one field to update",
        "error.illegal_transition": "Illegal status change: {current} → {target}",
        "error.unknown_status": "Unknown status: {status}",
        "error.malformed": "Task file {path} has no front matter",
        "error.target_exists": "Target file {path} already exists",
        "error.ambiguous_id": "\"{task_id}\" matches several tasks: {matches}",
        "error.unexpected": "An unexpected error occurred: {error}",
        # prompts
        "prompt.title": "Title",
        "prompt.description": "Description (optional)",
        "prompt.priority": "Priority (high/medium/low)",
        "prompt.project": "Project",
        "prompt.due": "Due date (YYYY-MM-DD, optional)",
        "prompt.tags": "Tags (comma separated, optional)",
        "prompt.delete": 'Delete task "{title}"?',
        "info.cancelled": "Cancelled",
        "info.invalid_due": "Due date format is invalid, leaving it empty",
    },
    "ja": {
        "doc.default_notes": "タスクの詳細な内容や実行中のメモをここに記載します。",
        "doc.initial_entry": "初期作成",
        "progress.updated": "タスク更新",
        "progress.change": "{field}: {old} → {new}",
        "progress.none": "なし",
        "progress.field.title": "タイトル",
        "progress.field.priority": "優先度",
        "progress.field.due_date": "期限",
        "status.todo": "未着手",
        "status.wip": "進行中",
        "status.completed": "完了",
        "priority.high": "高",
        "priority.medium": "中",
        "priority.low": "低",
        "label.unset": "未設定",
        "label.notes": "備忘録",
        "task.created": "タスク \"{title}\" が作成されました",
        "task.updated": "タスク \"{title}\" を更新しました",
        "task.deleted": "タスク \"{title}\" を削除しました",
        "task.found": "タスクが見つかりました",
        "task.found_many": "{count}件のタスクが見つかりました",
        "task.today": "{count}件の今日のタスクが見つかりました",
        "task.status_changed": "タスク \"{title}\" を{status}に設定しました",
        "task.status_unchanged": "タスク \"{title}\" は既に{status}です",
        "task.none": "タスクはありません。",
        "task.none_matching": "条件に一致するタスクはありません。",
        "task.total": "合計: {count}件のタスク",
        "error.not_found": "タスク \"{task_id}\" が見つかりません",
        "error.file_not_found": "タスクファイル {path} が見つかりません",
        "error.title_required": "タイトルは必須です",
        "error.empty_update": "更新内容を少なくとも1つ指定してください",
        "error.illegal_transition": "不正なステータス変更: {current} → {target}",
        "error.unknown_status": "不明なステータス: {status}",
        "error.malformed": "タスクファイル {path} にフロントマターがありません",
        "error.target_exists": "移動先 {path} は既に存在します",
        "error.ambiguous_id": "\"{task_id}\" に一致するタスクが複数あります: {matches}",
        "error.unexpected": "予期しないエラーが発生しました: {error}",
        "prompt.title": "タイトル",
        "prompt.description": "説明 (省略可)",
        "prompt.priority": "優先度 (high/medium/low)",
        "prompt.project": "プロジェクト名",
        "prompt.due": "期限 (YYYY-MM-DD, 省略可)",
        "prompt.tags": "タグ (カンマ区切り, 省略可)",
        "prompt.delete": "タスク \"{title}\" を削除しますか?",
        "info.cancelled": "キャンセルしました",
        "info.invalid_due": "期限の形式が正しくないため、空白として設定します",
    },
}


class Messages:
    """Lookup of translated messages for one language."""

    def __init__(self, language: str = DEFAULT_LANGUAGE):
        if language not in _CATALOGUES:
            language = DEFAULT_LANGUAGE
        self.language = language
        self._catalogue = _CATALOGUES[language]
        self._fallback = _CATALOGUES[DEFAULT_LANGUAGE]

    def t(self, key: str, **kwargs: object) -> str:
        """Return the message for *key*, formatted with *kwargs*."""
        template = self._catalogue.get(key) or self._fallback.get(key, key)
        return template.format(**kwargs) if kwargs else template

    def status_label(self, status: str) -> str:
        return self.t(f"status.{status}")

    def priority_label(self, priority: str) -> str:
        label = self._catalogue.get(f"priority.{priority}")
        return label if label is not None else priority


def available_languages() -> list[str]:
    return list(_CATALOGUES)


@lru_cache(maxsize=4)
def get_messages(language: str = DEFAULT_LANGUAGE) -> Messages:
    """Get the cached message catalogue for *language*."""
    return Messages(language)
