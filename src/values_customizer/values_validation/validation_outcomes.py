"""Validation domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationViolation:
    """One offending path and the reason it was rejected."""

    path: str
    reason: str

    def describe(self) -> str:
        """Return a ``path: reason`` line, using ``<root>`` for the empty path."""
        return f"{self.path or '<root>'}: {self.reason}"


@dataclass(frozen=True)
class ValidationOutcome:
    """Verdict for one document checked against one schema."""

    document: Mapping[str, Any]
    violations: tuple[ValidationViolation, ...]

    @property
    def is_ok(self) -> bool:
        """Return True when no violations are present."""
        return not self.violations

    @property
    def offending_paths(self) -> tuple[str, ...]:
        """Return the distinct violation paths in report order."""
        return tuple(dict.fromkeys(violation.path for violation in self.violations))
