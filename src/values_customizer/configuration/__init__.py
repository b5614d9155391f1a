"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, default_configuration, load_configuration
from .runtime_settings import (
    DEFAULT_OUTPUT_FILENAME,
    DEFAULT_VALUES_FILENAME,
    CollectionSettings,
    Configuration,
    ValuesSettings,
)

__all__ = [
    "CollectionSettings",
    "Configuration",
    "ValuesSettings",
    "ConfigurationError",
    "load_configuration",
    "default_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_OUTPUT_FILENAME",
    "DEFAULT_VALUES_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
