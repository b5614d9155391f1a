"""Schema management entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

Scalar = str | int | float | bool


@dataclass(frozen=True)
class ObjectNode:
    """Subtree whose children are prompted in declaration order."""

    children: Mapping[str, SchemaNode]
    description: str | None = None


@dataclass(frozen=True)
class EnumChoiceNode:
    """Leaf accepting one of a fixed set of strings."""

    options: tuple[str, ...]
    description: str | None = None


@dataclass(frozen=True)
class LiteralUnionNode:
    """Leaf accepting one of a fixed set of scalar constants."""

    options: tuple[Scalar, ...]
    description: str | None = None


@dataclass(frozen=True)
class NumberNode:
    """Numeric leaf with optional inclusive bounds."""

    minimum: float | None = None
    maximum: float | None = None
    integer: bool = False
    description: str | None = None


@dataclass(frozen=True)
class BooleanNode:
    """Boolean leaf."""

    description: str | None = None


@dataclass(frozen=True)
class StringNode:
    """Free-text leaf with optional format constraints."""

    pattern: str | None = None
    min_length: int | None = None
    max_length: int | None = None
    description: str | None = None


LeafNode = EnumChoiceNode | LiteralUnionNode | NumberNode | BooleanNode | StringNode
SchemaNode = ObjectNode | LeafNode


@dataclass(frozen=True)
class SchemaConfig:
    """Normalized schema source settings."""

    text: str
    source_path: Path | None = None


@dataclass(frozen=True)
class SchemaDocument:
    """Parsed schema with the source it was read from."""

    root: ObjectNode
    source: str = "inline"


@dataclass(frozen=True)
class LeafField:
    """Flattened schema leaf with its dot-joined path."""

    path: str
    node: LeafNode = field(compare=False)


def is_object(node: SchemaNode) -> bool:
    """Return True when the node has children."""
    return isinstance(node, ObjectNode)


def enumerated_options(node: SchemaNode) -> tuple[Scalar, ...]:
    """Return the enumerated options of a leaf, or an empty tuple."""
    match node:
        case EnumChoiceNode(options=options) | LiteralUnionNode(options=options):
            return tuple(options)
        case _:
            return ()


def join_path(prefix: str, key: str) -> str:
    """Extend a dot-joined path with one more segment."""
    return key if not prefix else f"{prefix}.{key}"


def literal_label(value: object) -> str:
    """Render a scalar the way it is shown and typed at the terminal."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
