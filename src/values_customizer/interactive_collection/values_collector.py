"""Schema-driven interactive value collection."""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable, Mapping
from typing import Any

from values_customizer.document_paths import PATH_SEPARATOR, Document, changed_paths
from values_customizer.schema_management.schema_models import (
    EnumChoiceNode,
    LeafNode,
    LiteralUnionNode,
    ObjectNode,
    Scalar,
    SchemaNode,
    enumerated_options,
    join_path,
)
from values_customizer.value_casting import cast_value, literal_label

from .collection_outcomes import CollectionResult
from .prompt_provider import ESCAPE_CHOICE, PromptProvider

_LOGGER = logging.getLogger(__name__)


class CollectionError(Exception):
    """Raised when a leaf cannot be prompted for."""


def collect_values(
    schema: ObjectNode,
    defaults: Document | None,
    prompts: PromptProvider,
    *,
    only_paths: Iterable[str] | None = None,
    baseline: Document | None = None,
) -> CollectionResult:
    """Prompt for every schema leaf and assemble the nested result.

    Args:
      schema: Root object node; its declaration order drives prompt order.
      defaults: Current values used to pre-fill prompts. Subtrees whose shape
        does not match the schema are treated as absent.
      prompts: Provider answering one request at a time.
      only_paths: When given, only leaves at or under these paths are prompted;
        every other leaf keeps its current value.
      baseline: Document that modified paths are measured against; defaults to
        ``defaults``. Re-entry rounds pass the original default document here.

    Returns:
      The collected document and the paths that differ from the baseline.

    Raises:
      CollectionError: If an enumerated leaf has no options or the provider
        answers outside the offered options.
    """
    selected = None if only_paths is None else frozenset(only_paths)
    values = _collect_object(schema, defaults, prompts, path="", selected=selected)
    if baseline is None:
        baseline = defaults if isinstance(defaults, Mapping) else {}
    return CollectionResult(values=values, modified_paths=changed_paths(baseline, values))


def _collect_object(
    node: ObjectNode,
    current: Any,
    prompts: PromptProvider,
    *,
    path: str,
    selected: Collection[str] | None,
) -> dict[str, Any]:
    if current is not None and not isinstance(current, Mapping):
        _LOGGER.debug("Ignoring non-mapping default at '%s'", path or "<root>")
        current = None
    result: dict[str, Any] = {}
    for key, child in node.children.items():
        child_default = current.get(key) if current is not None else None
        result[key] = _collect_node(
            child, child_default, prompts, path=join_path(path, key), selected=selected
        )
    return result


def _collect_node(
    node: SchemaNode,
    current: Any,
    prompts: PromptProvider,
    *,
    path: str,
    selected: Collection[str] | None,
) -> Any:
    if isinstance(node, ObjectNode):
        return _collect_object(node, current, prompts, path=path, selected=selected)

    default = current
    if isinstance(current, (Mapping, list)):
        _LOGGER.debug("Ignoring non-scalar default at '%s'", path)
        default = None
    if default is not None and selected is not None and not _is_selected(path, selected):
        return default

    value = _collect_leaf(node, default, prompts, path=path)
    _LOGGER.debug("Collected %s = %r", path, value)
    return value


def _collect_leaf(
    node: LeafNode, default: Scalar | None, prompts: PromptProvider, *, path: str
) -> Scalar:
    label = f"{path} ({node.description})" if node.description else path
    shown_default = None if default is None else literal_label(default)

    if not isinstance(node, (EnumChoiceNode, LiteralUnionNode)):
        raw = prompts.request_text(f"Enter value for {label}", shown_default)
        return _resolve_text(raw, node, default)

    options = enumerated_options(node)
    if not options:
        raise CollectionError(f"Leaf '{path}' declares no options to choose from.")
    offered_default = default if _contains(options, default) else None
    answer = prompts.request_choice(f"Choose value for {label}", options, offered_default)
    if answer is ESCAPE_CHOICE:
        raw = prompts.request_text(f"Enter custom value for {label}", shown_default)
        return _resolve_text(raw, node, default)
    if not _contains(options, answer):
        raise CollectionError(
            f"Answer {answer!r} for '{path}' is not one of the offered options."
        )
    return answer


def _resolve_text(raw: str, node: LeafNode, default: Scalar | None) -> Scalar:
    if raw == "" and default is not None:
        return default
    return cast_value(raw, node)


def _contains(options: tuple[Scalar, ...], value: object) -> bool:
    return any(type(option) is type(value) and option == value for option in options)


def _is_selected(path: str, selected: Collection[str]) -> bool:
    return any(
        not prefix or path == prefix or path.startswith(prefix + PATH_SEPARATOR)
        for prefix in selected
    )
