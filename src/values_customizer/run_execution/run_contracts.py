"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from values_customizer.configuration.runtime_settings import Configuration
from values_customizer.schema_management.schema_models import SchemaDocument


@dataclass(frozen=True)
class RunRequest:
    """Input contract for one customization run.

    Unset fields fall back to the configuration file, then to built-in defaults.
    """

    config_path: str | None = None
    values_path: str | None = None
    output_path: str | None = None
    retry_invalid: int | None = None


@dataclass(frozen=True)
class RunOutcome:
    """Output contract for one completed run."""

    output_path: Path
    modified_paths: tuple[str, ...]
    attempts: int


@dataclass(frozen=True)
class RunArtifacts:
    """Loaded domain artifacts required during run execution."""

    configuration: Configuration
    schema: SchemaDocument
    defaults: dict[str, Any]
    output_path: Path
    retry_invalid: int
