"""Key discovery and value projection over a server directory.

This is the only real logic in the tool. It is kept free of I/O so the CLI
(or any other entry point) decides where the lines go, and so the rules
below can be tested directly:

- `available_keys`: sorted union of field names across all records.
- `project`: one `ProjectedLine` per record that has the key, or one per
  element when the value is a JSON array. Records without the key are
  skipped; if *no* record has it, `UnknownKeyError` is raised before any
  line is produced.
- `render`: JSON strings print bare, everything else prints as compact JSON.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable

from core.domain.errors import UnknownKeyError
from core.domain.models import ProjectedLine, Record, ServerDirectory

logger = logging.getLogger(__name__)

_MISSING = object()


def render(value: Any) -> str:
    """Render a JSON value for display."""

    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def render_optional(record: Record, field: str) -> str:
    """Render `record[field]`, or empty text when the field is absent."""

    value = record.get(field, _MISSING)
    if value is _MISSING:
        return ""
    return render(value)


def label_for(record: Record) -> str:
    return f"{render_optional(record, 'address')}:{render_optional(record, 'port')}"


def available_keys(directory: ServerDirectory) -> list[str]:
    keys: set[str] = set()
    for record in directory.servers:
        keys.update(record.keys())
    return sorted(keys)


def format_keys(keys: Iterable[str]) -> str:
    return f"available keys: {', '.join(keys)}"


def project(directory: ServerDirectory, key: str) -> list[ProjectedLine]:
    """Project `key` across the directory, preserving record order."""

    matches = [record for record in directory.servers if key in record]
    if not matches:
        raise UnknownKeyError(key)
    logger.debug("key %r present in %d of %d records", key, len(matches), len(directory))

    lines: list[ProjectedLine] = []
    for record in matches:
        label = label_for(record)
        value = record[key]
        if isinstance(value, list):
            lines.extend(ProjectedLine(label=label, value=render(item)) for item in value)
        else:
            lines.append(ProjectedLine(label=label, value=render(value)))
    return lines
