"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "customizer.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for values-customizer.
# Relative paths are resolved against the directory of this file.

# Remove the schema section to use the built-in Helm values schema.
schema:
  # Provide either a schema file path or inline schema text, not both.
  path: "values.schema.yaml"
  # inline: |
  #   type: object
  #   properties:
  #     replicaCount:
  #       type: integer
  #       minimum: 1

values:
  # Document whose values pre-fill every prompt.
  defaults_path: "values.yaml"
  # Destination of the customized values document.
  output_path: "custom-values.yaml"
  overwrite: true

collection:
  # Number of times offending paths are asked again after a failed validation.
  retry_invalid: 0
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
