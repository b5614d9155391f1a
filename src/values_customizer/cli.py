"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from values_customizer.configuration import (
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_VALUES_FILENAME,
    write_placeholder_configuration,
)
from values_customizer.document_paths import flatten_document
from values_customizer.interactive_collection import (
    AcceptDefaultsPromptProvider,
    ClickPromptProvider,
)
from values_customizer.run_execution import (
    RunExecutionError,
    RunRequest,
    execute_values_customization_run,
    execute_values_validation,
)
from values_customizer.value_casting import literal_label
from values_customizer.values_persistence import DefaultsLoadError, load_default_document

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="values-customizer")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Diagnostic log level written to stderr.",
)
def cli(log_level: str) -> None:
    """Schema-driven Helm values customizer."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML configuration template with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="customize")
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help=f"Path to the YAML configuration file (default: ./{DEFAULT_CONFIG_FILENAME} if present)",
)
@click.option(
    "--values",
    "values_path",
    required=False,
    type=click.Path(path_type=str),
    help="Values document used as defaults (overrides the configuration)",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Destination of the customized values (overrides the configuration)",
)
@click.option(
    "--retry-invalid",
    type=click.IntRange(min=0),
    default=None,
    help="Times to ask again for values rejected by validation",
)
@click.option(
    "--accept-defaults",
    is_flag=True,
    default=False,
    help="Answer every prompt with its default instead of asking.",
)
def customize(
    config_path: str | None,
    values_path: str | None,
    output_path: str | None,
    retry_invalid: int | None,
    accept_defaults: bool,
) -> None:
    """Walk the schema, ask for every value and write the customized document."""
    prompt_provider = AcceptDefaultsPromptProvider() if accept_defaults else ClickPromptProvider()
    try:
        outcome = execute_values_customization_run(
            RunRequest(
                config_path=config_path,
                values_path=values_path,
                output_path=output_path,
                retry_invalid=retry_invalid,
            ),
            prompt_provider=prompt_provider,
        )
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc

    if outcome.modified_paths:
        click.echo("Modified keys:")
        for path in outcome.modified_paths:
            click.echo(f"  {path}")
    else:
        click.echo("No changes made.")
    click.echo(f"Output saved to {outcome.output_path}")


@cli.command(name="validate")
@click.argument("values_path", type=click.Path(path_type=str))
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help=f"Path to the YAML configuration file (default: ./{DEFAULT_CONFIG_FILENAME} if present)",
)
def validate(values_path: str, config_path: str | None) -> None:
    """Validate an existing values document against the schema."""
    try:
        outcome = execute_values_validation(values_path, config_path=config_path)
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc
    if not outcome.is_ok:
        details = "\n".join(violation.describe() for violation in outcome.violations)
        raise CliError(f"{values_path} is invalid:\n{details}")
    click.echo(f"{values_path} is valid")


@cli.command(name="paths")
@click.option(
    "--values",
    "values_path",
    required=False,
    default=DEFAULT_VALUES_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Values document to list",
)
def list_paths(values_path: str) -> None:
    """Print every leaf of a values document as `path = value`."""
    try:
        document = load_default_document(values_path)
    except DefaultsLoadError as exc:
        raise CliError(str(exc)) from exc
    for path, value in flatten_document(document).items():
        click.echo(f"{path} = {_render(value)}")


def _render(value: object) -> str:
    if value is None:
        return "null"
    if isinstance(value, (dict, list)):
        return repr(value)
    return literal_label(value)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except (click.Abort, KeyboardInterrupt):
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
