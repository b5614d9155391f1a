"""Default values document loading."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

_LOGGER = logging.getLogger(__name__)


class DefaultsLoadError(Exception):
    """Raised when the default values document cannot be read."""


def load_default_document(values_path: Path | str) -> dict[str, Any]:
    """Read a YAML/JSON values document; an empty file yields an empty mapping."""
    path = Path(values_path)
    if not path.exists():
        raise DefaultsLoadError(f"Values file not found: {path}")
    if not path.is_file():
        raise DefaultsLoadError(f"Values path is not a file: {path}")

    try:
        parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise DefaultsLoadError(f"Failed to parse values file {path}: {exc}") from exc

    if parsed is None:
        parsed = {}
    if not isinstance(parsed, Mapping):
        raise DefaultsLoadError(f"Values file root must be a mapping: {path}")

    _LOGGER.debug("Loaded %d top-level default(s) from %s", len(parsed), path)
    return dict(parsed)
