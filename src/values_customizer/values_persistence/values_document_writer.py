"""Values document persistence."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

_LOGGER = logging.getLogger(__name__)


def render_values_document(document: Mapping[str, Any]) -> str:
    """Serialize a values document to YAML, keeping key order."""
    return yaml.safe_dump(
        _plain(document),
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
    )


def write_values_document(
    document: Mapping[str, Any], output_path: Path | str, *, overwrite: bool = True
) -> Path:
    """Write the document to ``output_path`` and return the resolved destination.

    Raises:
      FileExistsError: If the destination exists and ``overwrite`` is False.
      OSError: If writing fails.
    """
    destination = Path(output_path)
    if destination.exists() and not overwrite:
        raise FileExistsError(f"Values file already exists: {destination.resolve()}")
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(render_values_document(document), encoding="utf-8")
    _LOGGER.debug("Wrote values document to %s", destination)
    return destination.resolve()


def _plain(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {str(key): _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value
