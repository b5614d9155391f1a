"""Structural and per-leaf validation of collected documents."""

from __future__ import annotations

import copy
import logging
import math
import re
from collections.abc import Mapping
from typing import Any

from values_customizer.schema_management.schema_models import (
    BooleanNode,
    EnumChoiceNode,
    LeafNode,
    LiteralUnionNode,
    NumberNode,
    ObjectNode,
    SchemaNode,
    StringNode,
    join_path,
)
from values_customizer.value_casting import literal_label

from .validation_outcomes import ValidationOutcome, ValidationViolation

_LOGGER = logging.getLogger(__name__)


def validate_document(document: Any, schema: ObjectNode) -> ValidationOutcome:
    """Check every leaf of ``document`` against ``schema`` without mutating it.

    Every offending path is reported, in schema declaration order followed by
    unexpected keys.
    """
    violations: list[ValidationViolation] = []
    _validate_node(document, schema, path="", violations=violations)
    snapshot = copy.deepcopy(dict(document)) if isinstance(document, Mapping) else {}
    outcome = ValidationOutcome(document=snapshot, violations=tuple(violations))
    _LOGGER.debug(
        "Validation %s with %d violation(s)",
        "accepted" if outcome.is_ok else "rejected",
        len(outcome.violations),
    )
    return outcome


def _validate_node(
    value: Any, node: SchemaNode, *, path: str, violations: list[ValidationViolation]
) -> None:
    if isinstance(node, ObjectNode):
        _validate_object(value, node, path=path, violations=violations)
        return
    reason = _leaf_violation(value, node)
    if reason is not None:
        violations.append(ValidationViolation(path=path, reason=reason))


def _validate_object(
    value: Any, node: ObjectNode, *, path: str, violations: list[ValidationViolation]
) -> None:
    if not isinstance(value, Mapping):
        violations.append(
            ValidationViolation(path=path, reason=f"expected a mapping, got {_kind(value)}")
        )
        return
    for key, child in node.children.items():
        child_path = join_path(path, key)
        if key not in value:
            violations.append(ValidationViolation(path=child_path, reason="missing value"))
            continue
        _validate_node(value[key], child, path=child_path, violations=violations)
    for key in value:
        if key not in node.children:
            violations.append(
                ValidationViolation(path=join_path(path, str(key)), reason="unexpected key")
            )


def _leaf_violation(value: Any, node: LeafNode) -> str | None:
    match node:
        case EnumChoiceNode(options=options):
            if isinstance(value, str) and value in options:
                return None
            return f"{_show(value)} is not one of: {', '.join(options)}"
        case LiteralUnionNode(options=options):
            if any(type(option) is type(value) and option == value for option in options):
                return None
            allowed = ", ".join(literal_label(option) for option in options)
            return f"{_show(value)} is not one of: {allowed}"
        case NumberNode():
            return _number_violation(value, node)
        case BooleanNode():
            return None if isinstance(value, bool) else f"expected a boolean, got {_kind(value)}"
        case StringNode():
            return _string_violation(value, node)
    raise TypeError(f"Unsupported leaf node: {type(node).__name__}")


def _number_violation(value: Any, node: NumberNode) -> str | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return f"expected a number, got {_kind(value)} {_show(value)}"
    if isinstance(value, float) and not math.isfinite(value):
        return f"expected a finite number, got {value}"
    if node.integer and isinstance(value, float) and not value.is_integer():
        return f"expected an integer, got {value}"
    if node.minimum is not None and value < node.minimum:
        return f"{value} is below the minimum of {node.minimum}"
    if node.maximum is not None and value > node.maximum:
        return f"{value} is above the maximum of {node.maximum}"
    return None


def _string_violation(value: Any, node: StringNode) -> str | None:
    if not isinstance(value, str):
        return f"expected a string, got {_kind(value)}"
    if node.min_length is not None and len(value) < node.min_length:
        return f"must be at least {node.min_length} characters long"
    if node.max_length is not None and len(value) > node.max_length:
        return f"must be at most {node.max_length} characters long"
    if node.pattern is not None and re.search(node.pattern, value) is None:
        return f"{_show(value)} does not match pattern {node.pattern!r}"
    return None


def _kind(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "mapping"
    if isinstance(value, (list, tuple)):
        return "list"
    return type(value).__name__


def _show(value: Any) -> str:
    return repr(value) if isinstance(value, str) else literal_label(value)
