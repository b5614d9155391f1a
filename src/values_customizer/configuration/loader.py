"""Configuration loader service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from values_customizer.schema_management import SchemaConfig, builtin_schema_config

from .runtime_settings import (
    DEFAULT_OUTPUT_FILENAME,
    DEFAULT_VALUES_FILENAME,
    CollectionSettings,
    Configuration,
    ValuesSettings,
)

_LOGGER = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    unknown = sorted(str(key) for key in parsed if key not in ("schema", "values", "collection"))
    if unknown:
        raise ConfigurationError(f"Unknown configuration section(s): {', '.join(unknown)}")

    base_path = path.resolve().parent
    configuration = Configuration(
        path=path,
        schema=_parse_schema_section(parsed.get("schema"), base_path),
        values=_parse_values_section(parsed.get("values"), base_path),
        collection=_parse_collection_section(parsed.get("collection")),
    )
    _LOGGER.debug("Loaded configuration from %s", path)
    return configuration


def default_configuration(base_path: Path | str = ".") -> Configuration:
    """Return the settings used when no configuration file is present."""
    base = Path(base_path)
    return Configuration(
        path=None,
        schema=builtin_schema_config(),
        values=ValuesSettings(
            defaults_path=base / DEFAULT_VALUES_FILENAME,
            output_path=base / DEFAULT_OUTPUT_FILENAME,
        ),
        collection=CollectionSettings(),
    )


def _parse_schema_section(value: Any, base_path: Path) -> SchemaConfig:
    if value is None:
        return builtin_schema_config()
    section = _require_mapping(value, "schema")
    inline = section.get("inline")
    path_value = section.get("path")
    if inline and path_value:
        raise ConfigurationError("Schema definition must not set both inline and path.")
    if inline:
        if not isinstance(inline, str):
            raise ConfigurationError("schema.inline must be a string.")
        return SchemaConfig(text=inline, source_path=None)
    if path_value:
        if not isinstance(path_value, str):
            raise ConfigurationError("schema.path must be a string.")
        schema_path = _resolve_path(base_path, path_value)
        if not schema_path.exists():
            raise ConfigurationError(f"Schema file not found: {schema_path}")
        return SchemaConfig(text=schema_path.read_text(encoding="utf-8"), source_path=schema_path)
    raise ConfigurationError("Schema definition requires either inline or path.")


def _parse_values_section(value: Any, base_path: Path) -> ValuesSettings:
    section = _optional_mapping(value, "values")
    defaults_path = _require_non_empty_string(
        section.get("defaults_path", DEFAULT_VALUES_FILENAME), "values.defaults_path"
    )
    output_path = _require_non_empty_string(
        section.get("output_path", DEFAULT_OUTPUT_FILENAME), "values.output_path"
    )
    overwrite = _require_bool(section.get("overwrite", True), "values.overwrite")
    return ValuesSettings(
        defaults_path=_resolve_path(base_path, defaults_path),
        output_path=_resolve_path(base_path, output_path),
        overwrite=overwrite,
    )


def _parse_collection_section(value: Any) -> CollectionSettings:
    section = _optional_mapping(value, "collection")
    retry_invalid = _require_non_negative_int(
        section.get("retry_invalid", 0), "collection.retry_invalid"
    )
    return CollectionSettings(retry_invalid=retry_invalid)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    return _require_mapping(value, section_name)


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be true or false.")
    return value


def _require_non_negative_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value < 0:
        raise ConfigurationError(f"{field_name} must not be negative.")
    return value
