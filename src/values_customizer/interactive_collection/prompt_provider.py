"""Prompt providers used by the interactive collector."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Protocol

import click

from values_customizer.schema_management.schema_models import Scalar
from values_customizer.value_casting import literal_label


class EscapeChoice(Enum):
    """Synthetic choice appended to every enumerated list."""

    NOT_IN_LIST = "Not in list"


ESCAPE_CHOICE = EscapeChoice.NOT_IN_LIST


class PromptProvider(Protocol):
    """Capability the collector suspends on, one request at a time."""

    def request_text(self, message: str, default: str | None) -> str:
        """Return free text; an empty answer accepts ``default``."""

    def request_choice(
        self, message: str, options: Sequence[Scalar], default: Scalar | None
    ) -> Scalar | EscapeChoice:
        """Return one of ``options`` or ``ESCAPE_CHOICE``."""


class ClickPromptProvider:
    """Terminal prompts rendered with click."""

    def __init__(self, *, err: bool = False) -> None:
        self._err = err

    def request_text(self, message: str, default: str | None) -> str:
        return click.prompt(
            message,
            default="" if default is None else default,
            show_default=default is not None,
            type=str,
            err=self._err,
        )

    def request_choice(
        self, message: str, options: Sequence[Scalar], default: Scalar | None
    ) -> Scalar | EscapeChoice:
        labels = [literal_label(option) for option in options]
        answer = click.prompt(
            message,
            type=click.Choice([*labels, ESCAPE_CHOICE.value]),
            default=literal_label(default) if default is not None else None,
            show_choices=True,
            err=self._err,
        )
        if answer == ESCAPE_CHOICE.value:
            return ESCAPE_CHOICE
        return options[labels.index(answer)]


class AcceptDefaultsPromptProvider:
    """Non-interactive provider answering every prompt with its default."""

    def request_text(self, message: str, default: str | None) -> str:
        return default or ""

    def request_choice(
        self, message: str, options: Sequence[Scalar], default: Scalar | None
    ) -> Scalar | EscapeChoice:
        return ESCAPE_CHOICE if default is None else default
