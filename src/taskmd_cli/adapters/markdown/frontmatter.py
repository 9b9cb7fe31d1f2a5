"""Front-matter codec for task documents.

A task document starts with a block of ``key: value`` lines between two
``---`` delimiter lines. Values may be double-quoted, bare, or (for ``tags``
only) a JSON array of strings.

Decoding is lenient: a document without a block decodes to a fully defaulted
record. Editing is strict, see ``split_document``.
"""

from __future__ import annotations

import json
import re
from typing import Any

from taskmd_cli.models import (
    PRIORITIES,
    MalformedDocumentError,
    TaskMetadata,
    ValidationError,
)
from taskmd_cli.utils.logger import get_logger

FRONT_MATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(?:(?P<block>.*?)\r?\n)?---[ \t]*(?:\r?\n|\Z)", re.DOTALL
)

# Canonical key order used when encoding a TaskMetadata record.
CANONICAL_KEYS: tuple[str, ...] = (
    "title",
    "id",
    "priority",
    "project",
    "due_date",
    "created_at",
    "tags",
)

DELIMITER = "---"

# Anything str.splitlines() would break a front-matter line on.
LINE_BREAKS = re.compile(r"[\n\r\v\f\x1c-\x1e\x85\u2028\u2029]")


def split_document(text: str, path: object = None) -> tuple[str, str]:
    """Split a document into its front-matter block and body.

    Args:
        text: Full document text
        path: Optional file path, only used in the error message

    Returns:
        Tuple of (block text without delimiters, body after the closing delimiter)

    Raises:
        MalformedDocumentError: If the document has no front-matter block
    """
    match = FRONT_MATTER_PATTERN.match(text)
    if match is None:
        where = f" {path}" if path is not None else ""
        raise MalformedDocumentError(f"Task document{where} has no front matter")
    return match.group("block") or "", text[match.end() :]


def join_document(block: str, body: str) -> str:
    """Reassemble a document from a front-matter block and a body."""
    block = block.rstrip("\n")
    return f"{DELIMITER}\n{block}\n{DELIMITER}\n{body}"


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return value[1:-1]
    return value


def _decode_tags(value: str) -> list[str]:
    if not (value.startswith("[") and value.endswith("]")):
        return []
    try:
        decoded = json.loads(value)
    except json.JSONDecodeError:
        decoded = None
    if isinstance(decoded, list):
        return [str(item) for item in decoded]
    # Recover from malformed array syntax such as [a, b] or ['a', 'b']
    items = (item.strip() for item in value[1:-1].split(","))
    return [item for item in items if item]


def decode_front_matter(block: str) -> dict[str, Any]:
    """Decode a front-matter block into an ordered raw key/value record.

    No defaults are filled in: only keys literally present are returned.
    ``tags`` always decodes to a list.
    """
    record: dict[str, Any] = {}
    for line in block.splitlines():
        key, sep, value = line.partition(":")
        key = key.strip()
        if not sep or not key:
            continue
        value = _strip_quotes(value.strip())
        if key == "tags":
            record[key] = _decode_tags(value)
        else:
            record[key] = value
    return record


def decode_metadata(text: str, fallback_title: str) -> TaskMetadata:
    """Decode the metadata of a task document.

    Args:
        text: Full document text
        fallback_title: Title used when the document carries none
            (normally the file stem)

    Returns:
        TaskMetadata with defaults filled in field by field
    """
    match = FRONT_MATTER_PATTERN.match(text)
    record = decode_front_matter(match.group("block") or "") if match else {}

    priority = record.get("priority") or "medium"
    if priority not in PRIORITIES:
        get_logger("codec").debug(
            "unknown priority %r in %s, using medium", priority, fallback_title
        )
        priority = "medium"

    extras = {k: v for k, v in record.items() if k not in CANONICAL_KEYS}
    return TaskMetadata(
        title=record.get("title") or fallback_title,
        id=record.get("id") or "unknown",
        priority=priority,
        project=record.get("project") or "default",
        due_date=record.get("due_date") or None,
        created_at=record.get("created_at") or "",
        tags=record.get("tags") or [],
        **extras,
    )


def _encode_value(key: str, value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return json.dumps([str(item) for item in value], ensure_ascii=False)
    if value is None:
        return '""'
    text = str(value)
    if LINE_BREAKS.search(text):
        raise ValidationError(f"Front-matter value of '{key}' must be a single line")
    return f'"{text}"'


def encode_front_matter(record: dict[str, Any]) -> str:
    """Encode a raw record as front-matter lines, keeping its key order.

    Scalar values are always double-quoted and lists are written as JSON
    arrays. The result has no delimiter lines.

    Raises:
        ValidationError: If a scalar value contains a line break
    """
    return "\n".join(f"{key}: {_encode_value(key, value)}" for key, value in record.items())


def metadata_to_record(metadata: TaskMetadata) -> dict[str, Any]:
    """Flatten a TaskMetadata into a raw record in canonical key order."""
    record: dict[str, Any] = {key: getattr(metadata, key) for key in CANONICAL_KEYS}
    record.update(metadata.model_extra or {})
    return record


def encode_metadata(metadata: TaskMetadata) -> str:
    """Encode a TaskMetadata record as a front-matter block (no delimiters)."""
    return encode_front_matter(metadata_to_record(metadata))
