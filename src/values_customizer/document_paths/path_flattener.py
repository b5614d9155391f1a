"""Conversion between nested documents and dot-joined path mappings."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .document_models import PATH_SEPARATOR, Document, DocumentValue, FlatPathMap


def flatten_document(document: Document, prefix: str = "") -> FlatPathMap:
    """Return one ``path -> value`` entry per leaf, in depth-first key order.

    Lists and ``None`` are recorded as leaf values. Empty mappings are recorded
    as leaves too so that ``unflatten_document`` can restore them.
    """
    flat: FlatPathMap = {}
    for key, value in document.items():
        path = f"{prefix}{PATH_SEPARATOR}{key}" if prefix else str(key)
        if isinstance(value, Mapping) and value:
            flat.update(flatten_document(value, path))
        elif isinstance(value, Mapping):
            flat[path] = {}
        else:
            flat[path] = value
    return flat


def unflatten_document(flat: Mapping[str, DocumentValue]) -> dict[str, Any]:
    """Rebuild the nested document described by a flat path mapping.

    A leaf that must also serve as an intermediate mapping (``a`` and ``a.b``)
    is replaced by the mapping.
    """
    result: dict[str, Any] = {}
    for path, value in flat.items():
        segments = path.split(PATH_SEPARATOR)
        cursor = result
        for segment in segments[:-1]:
            existing = cursor.get(segment)
            if not isinstance(existing, dict):
                existing = {}
                cursor[segment] = existing
            cursor = existing
        cursor[segments[-1]] = _copy_leaf(value)
    return result


def changed_paths(before: Document, after: Document) -> tuple[str, ...]:
    """Return flat paths of ``after`` whose value differs from ``before``."""
    previous = flatten_document(before)
    current = flatten_document(after)
    return tuple(
        path
        for path, value in current.items()
        if path not in previous or not _same_value(previous[path], value)
    )


def _same_value(left: object, right: object) -> bool:
    return type(left) is type(right) and left == right


def _copy_leaf(value: DocumentValue) -> DocumentValue:
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, list):
        return list(value)
    return value
