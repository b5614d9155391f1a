"""Customization run use-case service."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from values_customizer.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    default_configuration,
    load_configuration,
)
from values_customizer.configuration.runtime_settings import Configuration
from values_customizer.interactive_collection import (
    CollectionError,
    CollectionResult,
    PromptProvider,
    collect_values,
)
from values_customizer.schema_management import SchemaError, load_schema_document
from values_customizer.values_persistence import (
    DefaultsLoadError,
    load_default_document,
    write_values_document,
)
from values_customizer.values_validation import (
    ValidationOutcome,
    ValidationViolation,
    validate_document,
)

from .run_contracts import RunArtifacts, RunOutcome, RunRequest

_LOGGER = logging.getLogger(__name__)

ValuesWriter = Callable[..., Path]


class RunExecutionError(Exception):
    """Raised when a run use case cannot be completed."""


class RunValidationError(RunExecutionError):
    """Raised when the collected document is rejected; nothing is written."""

    def __init__(self, violations: Sequence[ValidationViolation]) -> None:
        self.violations = tuple(violations)
        details = "\n".join(f"  {violation.describe()}" for violation in self.violations)
        super().__init__(f"Collected values failed validation:\n{details}")


def execute_values_customization_run(
    request: RunRequest,
    *,
    prompt_provider: PromptProvider,
    values_writer: ValuesWriter | None = None,
) -> RunOutcome:
    """Collect, validate and persist one values document."""
    resolved_writer = values_writer or write_values_document
    artifacts = _load_run_artifacts(request)

    result, outcome, attempts = _collect_until_valid(artifacts, prompt_provider)
    if not outcome.is_ok:
        raise RunValidationError(outcome.violations)

    try:
        output_path = resolved_writer(
            outcome.document,
            artifacts.output_path,
            overwrite=artifacts.configuration.values.overwrite,
        )
    except (FileExistsError, OSError) as exc:
        raise RunExecutionError(str(exc)) from exc

    return RunOutcome(
        output_path=output_path,
        modified_paths=result.modified_paths,
        attempts=attempts,
    )


def execute_values_validation(
    values_path: str, *, config_path: str | None = None
) -> ValidationOutcome:
    """Validate an existing values document against the configured schema."""
    configuration = _resolve_configuration(config_path)
    try:
        schema = load_schema_document(configuration.schema)
        document = load_default_document(values_path)
    except (SchemaError, DefaultsLoadError, OSError) as exc:
        raise RunExecutionError(str(exc)) from exc
    return validate_document(document, schema.root)


def _collect_until_valid(
    artifacts: RunArtifacts, prompt_provider: PromptProvider
) -> tuple[CollectionResult, ValidationOutcome, int]:
    root = artifacts.schema.root
    try:
        result = collect_values(root, artifacts.defaults, prompt_provider)
        outcome = validate_document(result.values, root)
        attempts = 1
        while not outcome.is_ok and attempts <= artifacts.retry_invalid:
            _LOGGER.info(
                "Asking again for %d offending path(s)", len(outcome.offending_paths)
            )
            result = collect_values(
                root,
                result.values,
                prompt_provider,
                only_paths=outcome.offending_paths,
                baseline=artifacts.defaults,
            )
            outcome = validate_document(result.values, root)
            attempts += 1
    except CollectionError as exc:
        raise RunExecutionError(str(exc)) from exc
    return result, outcome, attempts


def _load_run_artifacts(request: RunRequest) -> RunArtifacts:
    configuration = _resolve_configuration(request.config_path)
    defaults_path = (
        Path(request.values_path) if request.values_path else configuration.values.defaults_path
    )
    try:
        schema = load_schema_document(configuration.schema)
        defaults = load_default_document(defaults_path)
    except (SchemaError, DefaultsLoadError, OSError) as exc:
        raise RunExecutionError(str(exc)) from exc

    retry_invalid = (
        request.retry_invalid
        if request.retry_invalid is not None
        else configuration.collection.retry_invalid
    )
    if retry_invalid < 0:
        raise RunExecutionError("retry_invalid must not be negative.")
    return RunArtifacts(
        configuration=configuration,
        schema=schema,
        defaults=defaults,
        output_path=(
            Path(request.output_path) if request.output_path else configuration.values.output_path
        ),
        retry_invalid=retry_invalid,
    )


def _resolve_configuration(config_path: str | None) -> Configuration:
    try:
        if config_path:
            return load_configuration(config_path)
        if Path(DEFAULT_CONFIG_FILENAME).exists():
            return load_configuration(DEFAULT_CONFIG_FILENAME)
    except ConfigurationError as exc:
        raise RunExecutionError(str(exc)) from exc
    return default_configuration()
