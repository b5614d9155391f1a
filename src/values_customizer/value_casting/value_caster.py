"""Best-effort conversion of terminal text into schema-typed values."""

from __future__ import annotations

import math

from values_customizer.schema_management.schema_models import (
    BooleanNode,
    EnumChoiceNode,
    LeafNode,
    LiteralUnionNode,
    NumberNode,
    Scalar,
    StringNode,
    literal_label,
)


def cast_value(raw_text: str, node: LeafNode) -> Scalar:
    """Convert ``raw_text`` for the given leaf kind.

    Text that cannot be converted is returned unchanged; the validator decides
    whether the final document is acceptable.
    """
    match node:
        case NumberNode():
            return parse_number(raw_text)
        case BooleanNode():
            return raw_text.lower() == "true"
        case LiteralUnionNode(options=options):
            return _cast_literal(raw_text, options)
        case EnumChoiceNode() | StringNode():
            return raw_text
    raise TypeError(f"Unsupported leaf node: {type(node).__name__}")


def parse_number(raw_text: str) -> int | float | str:
    """Parse decimal integer or float text, falling back to the raw text.

    Digit separators and non-finite spellings such as ``inf`` stay text.
    """
    stripped = raw_text.strip()
    if not stripped or "_" in stripped:
        return raw_text
    try:
        return int(stripped)
    except ValueError:
        pass
    try:
        number = float(stripped)
    except ValueError:
        return raw_text
    return number if math.isfinite(number) else raw_text


def _cast_literal(raw_text: str, options: tuple[Scalar, ...]) -> Scalar:
    for option in options:
        if literal_label(option) == raw_text:
            return option
    if any(_is_number(option) for option in options):
        return parse_number(raw_text)
    return raw_text


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
