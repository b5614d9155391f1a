"""Schema management exports."""

from .builtin_schema import HELM_VALUES_SCHEMA_TEXT, builtin_schema_config
from .schema_models import (
    BooleanNode,
    EnumChoiceNode,
    LeafField,
    LeafNode,
    LiteralUnionNode,
    NumberNode,
    ObjectNode,
    Scalar,
    SchemaConfig,
    SchemaDocument,
    SchemaNode,
    StringNode,
    enumerated_options,
    is_object,
    join_path,
    literal_label,
)
from .schema_projection import SchemaError, leaf_fields, load_schema_document, parse_schema_node

__all__ = [
    "BooleanNode",
    "EnumChoiceNode",
    "LeafField",
    "LeafNode",
    "LiteralUnionNode",
    "NumberNode",
    "ObjectNode",
    "Scalar",
    "SchemaConfig",
    "SchemaDocument",
    "SchemaNode",
    "StringNode",
    "SchemaError",
    "HELM_VALUES_SCHEMA_TEXT",
    "builtin_schema_config",
    "enumerated_options",
    "is_object",
    "join_path",
    "leaf_fields",
    "literal_label",
    "load_schema_document",
    "parse_schema_node",
]
