"""Run execution domain exports."""

from .customization_run_use_case import (
    RunExecutionError,
    RunValidationError,
    execute_values_customization_run,
    execute_values_validation,
)
from .run_contracts import RunArtifacts, RunOutcome, RunRequest

__all__ = [
    "RunRequest",
    "RunOutcome",
    "RunArtifacts",
    "RunExecutionError",
    "RunValidationError",
    "execute_values_customization_run",
    "execute_values_validation",
]
