"""Document shapes shared by the flattener, collector and validator."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TypeAlias

DocumentScalar: TypeAlias = str | int | float | bool | None
DocumentValue: TypeAlias = "DocumentScalar | list[object] | Mapping[str, DocumentValue]"
Document: TypeAlias = Mapping[str, DocumentValue]
FlatPathMap: TypeAlias = dict[str, DocumentValue]

PATH_SEPARATOR = "."
