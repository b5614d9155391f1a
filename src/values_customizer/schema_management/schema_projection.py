"""Schema loading and leaf projection service."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from typing import Any

import yaml

from .schema_models import (
    BooleanNode,
    EnumChoiceNode,
    LeafField,
    LiteralUnionNode,
    NumberNode,
    ObjectNode,
    Scalar,
    SchemaConfig,
    SchemaDocument,
    SchemaNode,
    StringNode,
    join_path,
    literal_label,
)

_LOGGER = logging.getLogger(__name__)

_SCALAR_TYPES = (str, int, float, bool)


class SchemaError(Exception):
    """Raised for schema parsing or projection failures."""


def load_schema_document(config: SchemaConfig) -> SchemaDocument:
    """Parse a declarative YAML/JSON schema definition into schema nodes."""
    try:
        parsed = yaml.safe_load(config.text)
    except yaml.YAMLError as exc:
        raise SchemaError(f"Invalid schema definition: {exc}") from exc

    root = parse_schema_node(parsed, path="")
    if not isinstance(root, ObjectNode):
        raise SchemaError("Schema root must define object properties.")

    source = str(config.source_path) if config.source_path else "inline"
    _LOGGER.debug("Loaded schema from %s with %d leaves", source, len(leaf_fields(root)))
    return SchemaDocument(root=root, source=source)


def parse_schema_node(definition: Any, *, path: str) -> SchemaNode:
    """Build the schema node described by one definition mapping."""
    label = path or "<root>"
    if not isinstance(definition, Mapping):
        raise SchemaError(f"Schema node '{label}' must be a mapping.")

    description = _optional_description(definition, label)
    node_type = definition.get("type")

    if "enum" in definition:
        return _parse_enum(definition["enum"], label, description)

    for union_key in ("oneOf", "anyOf"):
        if union_key in definition:
            return _parse_literal_union(definition[union_key], label, description)

    if node_type == "object" or (node_type is None and "properties" in definition):
        return _parse_object(definition.get("properties"), path, description)
    if node_type in ("number", "integer"):
        return NumberNode(
            minimum=_optional_number(definition.get("minimum"), f"{label}.minimum"),
            maximum=_optional_number(definition.get("maximum"), f"{label}.maximum"),
            integer=node_type == "integer",
            description=description,
        )
    if node_type == "boolean":
        return BooleanNode(description=description)
    if node_type == "string":
        pattern = definition.get("pattern")
        if pattern is not None and not isinstance(pattern, str):
            raise SchemaError(f"Schema node '{label}' pattern must be a string.")
        if pattern is not None:
            _require_valid_pattern(pattern, label)
        return StringNode(
            pattern=pattern,
            min_length=_optional_length(definition.get("minLength"), f"{label}.minLength"),
            max_length=_optional_length(definition.get("maxLength"), f"{label}.maxLength"),
            description=description,
        )
    raise SchemaError(f"Schema node '{label}' has unsupported type: {node_type!r}")


def leaf_fields(root: SchemaNode) -> list[LeafField]:
    """Return the leaves of a schema in prompt order."""
    fields: list[LeafField] = []
    _collect_leaves(root, prefix="", fields=fields)
    return fields


def _collect_leaves(node: SchemaNode, *, prefix: str, fields: list[LeafField]) -> None:
    if isinstance(node, ObjectNode):
        for key, child in node.children.items():
            _collect_leaves(child, prefix=join_path(prefix, key), fields=fields)
        return
    fields.append(LeafField(path=prefix, node=node))


def _parse_object(properties: Any, path: str, description: str | None) -> ObjectNode:
    label = path or "<root>"
    if not isinstance(properties, Mapping) or not properties:
        raise SchemaError(f"Object node '{label}' requires non-empty properties.")
    children: dict[str, SchemaNode] = {}
    for key, child in properties.items():
        if not isinstance(key, str) or not key:
            raise SchemaError(f"Object node '{label}' has an invalid property name: {key!r}")
        if "." in key:
            raise SchemaError(f"Property name '{key}' under '{label}' must not contain '.'.")
        children[key] = parse_schema_node(child, path=join_path(path, key))
    return ObjectNode(children=children, description=description)


def _parse_enum(values: Any, label: str, description: str | None) -> SchemaNode:
    options = _scalar_options(values, label, "enum")
    if all(isinstance(option, str) for option in options):
        return EnumChoiceNode(
            options=tuple(str(option) for option in options),
            description=description,
        )
    return LiteralUnionNode(options=options, description=description)


def _parse_literal_union(members: Any, label: str, description: str | None) -> LiteralUnionNode:
    if not isinstance(members, Sequence) or isinstance(members, str):
        raise SchemaError(f"Schema node '{label}' union must be a list.")
    constants: list[Any] = []
    for member in members:
        if not isinstance(member, Mapping) or "const" not in member:
            raise SchemaError(f"Schema node '{label}' union members must be const literals.")
        constants.append(member["const"])
    return LiteralUnionNode(
        options=_scalar_options(constants, label, "union"),
        description=description,
    )


def _scalar_options(values: Any, label: str, kind: str) -> tuple[Scalar, ...]:
    if not isinstance(values, Sequence) or isinstance(values, str):
        raise SchemaError(f"Schema node '{label}' {kind} must be a list.")
    if not values:
        raise SchemaError(f"Schema node '{label}' {kind} must not be empty.")
    options: list[Scalar] = []
    for value in values:
        if not isinstance(value, _SCALAR_TYPES):
            raise SchemaError(f"Schema node '{label}' {kind} options must be scalars.")
        if any(literal_label(value) == literal_label(seen) for seen in options):
            raise SchemaError(
                f"Schema node '{label}' {kind} has duplicate option label: {literal_label(value)}"
            )
        options.append(value)
    return tuple(options)


def _require_valid_pattern(pattern: str, label: str) -> None:
    try:
        re.compile(pattern)
    except re.error as exc:
        raise SchemaError(f"Schema node '{label}' has an invalid pattern: {exc}") from exc


def _optional_description(definition: Mapping[str, Any], label: str) -> str | None:
    value = definition.get("description")
    if value is None:
        return None
    if not isinstance(value, str):
        raise SchemaError(f"Schema node '{label}' description must be a string.")
    return value.strip() or None


def _optional_number(value: Any, field_name: str) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SchemaError(f"{field_name} must be a number.")
    return value


def _optional_length(value: Any, field_name: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise SchemaError(f"{field_name} must be a non-negative integer.")
    return value
