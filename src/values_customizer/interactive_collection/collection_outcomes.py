"""Interactive collection entities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CollectionResult:
    """Nested values assembled for every schema leaf."""

    values: dict[str, Any]
    modified_paths: tuple[str, ...]

