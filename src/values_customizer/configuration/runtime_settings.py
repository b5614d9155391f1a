"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from values_customizer.schema_management.schema_models import SchemaConfig

DEFAULT_VALUES_FILENAME = "values.yaml"
DEFAULT_OUTPUT_FILENAME = "custom-values.yaml"


@dataclass(frozen=True)
class ValuesSettings:
    """Where defaults are read from and where the result is written."""

    defaults_path: Path
    output_path: Path
    overwrite: bool = True


@dataclass(frozen=True)
class CollectionSettings:
    """Interactive collection behaviour."""

    retry_invalid: int = 0


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None
    schema: SchemaConfig
    values: ValuesSettings
    collection: CollectionSettings
