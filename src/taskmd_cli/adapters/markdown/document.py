"""Document editing for task files.

Pure text transforms: nothing in this module touches the filesystem.
"""

from __future__ import annotations

import json
import re
from typing import Any

from taskmd_cli.adapters.markdown.frontmatter import (
    decode_front_matter,
    encode_front_matter,
    encode_metadata,
    join_document,
    split_document,
)
from taskmd_cli.models import TaskMetadata, TaskUpdate
from taskmd_cli.utils.messages import Messages, get_messages

TITLE_PATTERN = re.compile(r"^#(?!#)[ \t]*(?P<title>.*)$")

# Section headings are part of the file format: they never follow ui.language.
NOTES_HEADING = "## Notes"
LINKS_HEADING = "## References"
PROGRESS_HEADING = "## Progress"

# Headings of documents written by the earlier Japanese tooling. Sections
# under them are read and edited in place.
HEADING_VARIANTS: dict[str, tuple[str, ...]] = {
    NOTES_HEADING: (NOTES_HEADING, "## 備忘録"),
    LINKS_HEADING: (LINKS_HEADING, "## 参考リンク"),
    PROGRESS_HEADING: (PROGRESS_HEADING, "## 進捗"),
}

TEMPLATE_KEYS: tuple[str, ...] = (
    "title",
    "id",
    "priority",
    "project",
    "due_date",
    "created_at",
    "tags",
    "description",
)


def _is_heading(line: str) -> bool:
    return line.startswith("#")


def _find_title(lines: list[str]) -> int | None:
    for index, line in enumerate(lines):
        if TITLE_PATTERN.match(line):
            return index
    return None


def _find_section(lines: list[str], heading: str) -> tuple[int, int] | None:
    """Return (heading index, end index) of a section, end being exclusive.

    Any known variant of *heading* matches.
    """
    variants = HEADING_VARIANTS.get(heading, (heading,))
    for index, line in enumerate(lines):
        if line.strip() in variants:
            end = index + 1
            while end < len(lines) and not _is_heading(lines[end]):
                end += 1
            return index, end
    return None


def read_title(text: str) -> str | None:
    """Return the text of the first ``# `` heading, if any."""
    for line in text.splitlines():
        match = TITLE_PATTERN.match(line)
        if match:
            return match.group("title").strip()
    return None


def read_section(text: str, heading: str = NOTES_HEADING) -> str:
    """Return the trimmed content of the section under *heading*."""
    lines = text.splitlines()
    section = _find_section(lines, heading)
    if section is None:
        return ""
    start, end = section
    return "\n".join(lines[start + 1 : end]).strip()


def _replace_title(lines: list[str], title: str) -> None:
    index = _find_title(lines)
    if index is None:
        lines[0:0] = [f"# {title}", ""]
    else:
        lines[index] = f"# {title}"


def _replace_notes(lines: list[str], description: str, heading: str) -> None:
    content = description.strip("\n").splitlines()
    section = _find_section(lines, heading)
    if section is not None:
        start, end = section
        tail = [""] if end < len(lines) else []
        lines[start + 1 : end] = content + tail
        return

    title_index = _find_title(lines)
    if title_index is None:
        lines[0:0] = [heading, *content, ""]
    else:
        lines[title_index + 1 : title_index + 1] = ["", heading, *content]


def _append_progress(lines: list[str], entry: str, heading: str) -> None:
    section = _find_section(lines, heading)
    if section is None:
        while lines and not lines[-1].strip():
            lines.pop()
        lines.extend(["", heading, entry])
        return

    start, end = section
    position = start + 1
    for index in range(start + 1, end):
        if lines[index].strip():
            position = index + 1
    lines.insert(position, entry)


def describe_changes(
    old: dict[str, str], new: dict[str, str], messages: Messages
) -> str:
    """Build the human-readable summary of a metadata change.

    Only title, priority and due_date are enumerated. When none of them
    changed, a generic "task updated" line is returned.
    """
    parts = []
    for field in ("title", "priority", "due_date"):
        if field not in new or new[field] == old.get(field, ""):
            continue
        parts.append(
            messages.t(
                "progress.change",
                field=messages.t(f"progress.field.{field}"),
                old=old.get(field) or messages.t("progress.none"),
                new=new[field] or messages.t("progress.none"),
            )
        )
    if not parts:
        return messages.t("progress.updated")
    return ", ".join(parts)


def apply_updates(
    text: str,
    updates: TaskUpdate,
    today: str,
    messages: Messages | None = None,
    path: object = None,
) -> str:
    """Apply a partial update to a task document and return the new text.

    Front matter gets priority, due_date and tags; title and description are
    written into the body only. A progress line dated *today* is always
    appended.

    Raises:
        MalformedDocumentError: If the document has no front-matter block
    """
    messages = messages or get_messages()
    provided = updates.provided()

    block, body = split_document(text, path)
    record: dict[str, Any] = decode_front_matter(block)

    old = {
        "title": read_title(body) or str(record.get("title", "")),
        "priority": str(record.get("priority", "")),
        "due_date": str(record.get("due_date", "")),
    }
    new: dict[str, str] = {}

    if "priority" in provided:
        record["priority"] = new["priority"] = updates.priority
    if "due_date" in provided:
        record["due_date"] = new["due_date"] = updates.due_date or ""
    if "tags" in provided:
        record["tags"] = list(updates.tags)
    if "title" in provided:
        new["title"] = updates.title

    lines = body.splitlines()
    if "title" in provided and updates.title != old["title"]:
        _replace_title(lines, updates.title)
    if "description" in provided:
        _replace_notes(lines, updates.description, NOTES_HEADING)

    summary = describe_changes(old, new, messages)
    _append_progress(lines, f"- {today}: {summary}", PROGRESS_HEADING)

    return join_document(encode_front_matter(record), "\n".join(lines) + "\n")


def _default_body(metadata: TaskMetadata, description: str, messages: Messages) -> str:
    return "\n".join(
        [
            "",
            f"# {metadata.title}",
            "",
            NOTES_HEADING,
            description,
            "",
            LINKS_HEADING,
            "",
            PROGRESS_HEADING,
            f"- {metadata.created_at}: {messages.t('doc.initial_entry')}",
            "",
        ]
    )


def render_document(
    metadata: TaskMetadata,
    description: str | None = None,
    template: str | None = None,
    messages: Messages | None = None,
) -> str:
    """Render the full text of a new task document.

    Args:
        metadata: Metadata of the new task
        description: Notes section text (a placeholder is used when empty)
        template: Optional template text with ``{key}`` placeholders
        messages: Message catalogue for the placeholder notes and first progress entry

    Returns:
        Document text
    """
    messages = messages or get_messages()
    description = description or messages.t("doc.default_notes")

    if template is None:
        return join_document(
            encode_metadata(metadata), _default_body(metadata, description, messages)
        )

    values = {
        "title": metadata.title,
        "id": metadata.id,
        "priority": metadata.priority,
        "project": metadata.project,
        "due_date": metadata.due_date or "",
        "created_at": metadata.created_at,
        "tags": json.dumps(metadata.tags, ensure_ascii=False),
        "description": description,
    }
    content = template
    for key in TEMPLATE_KEYS:
        content = content.replace("{" + key + "}", values[key])
    return content
