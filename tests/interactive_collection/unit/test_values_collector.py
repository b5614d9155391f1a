"""Interactive collector tests."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

import pytest
from values_customizer.document_paths import flatten_document
from values_customizer.interactive_collection import (
    ESCAPE_CHOICE,
    AcceptDefaultsPromptProvider,
    CollectionError,
    EscapeChoice,
    collect_values,
)
from values_customizer.schema_management import (
    BooleanNode,
    EnumChoiceNode,
    LiteralUnionNode,
    NumberNode,
    ObjectNode,
    Scalar,
    StringNode,
    builtin_schema_config,
    leaf_fields,
    load_schema_document,
)


class ScriptedPrompts:
    """Answers prompts from per-path scripts; unscripted prompts accept the default."""

    def __init__(
        self,
        *,
        choices: Mapping[str, object] | None = None,
        texts: Mapping[str, str] | None = None,
    ) -> None:
        self.choices = dict(choices or {})
        self.texts = dict(texts or {})
        self.requests: list[tuple[object, ...]] = []

    def request_text(self, message: str, default: str | None) -> str:
        path = _path_of(message)
        self.requests.append(("text", path, default))
        return self.texts.get(path, default or "")

    def request_choice(
        self, message: str, options: Sequence[Scalar], default: Scalar | None
    ) -> Scalar | EscapeChoice:
        path = _path_of(message)
        self.requests.append(("choice", path, tuple(options), default))
        if path in self.choices:
            return self.choices[path]  # type: ignore[return-value]
        return ESCAPE_CHOICE if default is None else default


def _path_of(message: str) -> str:
    return message.split(" for ", 1)[1].split(" (", 1)[0]


def _helm_schema() -> ObjectNode:
    return load_schema_document(builtin_schema_config()).root


def _helm_defaults() -> dict[str, object]:
    return {
        "replicaCount": 3,
        "image": {"repository": "nginx", "tag": "1.25", "pullPolicy": "IfNotPresent"},
        "service": {"type": "ClusterIP", "port": 80},
    }


def test_accepting_every_default_reproduces_default_document() -> None:
    prompts = ScriptedPrompts()

    result = collect_values(_helm_schema(), _helm_defaults(), prompts)

    assert result.values == _helm_defaults()
    assert result.modified_paths == ()


def test_prompts_follow_schema_declaration_order() -> None:
    prompts = ScriptedPrompts()

    collect_values(_helm_schema(), _helm_defaults(), prompts)

    assert [(request[0], request[1]) for request in prompts.requests] == [
        ("choice", "replicaCount"),
        ("choice", "image.repository"),
        ("text", "image.tag"),
        ("choice", "image.pullPolicy"),
        ("choice", "service.type"),
        ("text", "service.port"),
    ]
    assert prompts.requests[0][2] == tuple(range(1, 11))
    assert prompts.requests[0][3] == 3
    assert prompts.requests[2][2] == "1.25"
    assert prompts.requests[5][2] == "80"


def test_escape_choice_routes_free_text_through_caster() -> None:
    prompts = ScriptedPrompts(
        choices={"replicaCount": ESCAPE_CHOICE},
        texts={"replicaCount": "7"},
    )

    result = collect_values(_helm_schema(), _helm_defaults(), prompts)

    assert result.values == {**_helm_defaults(), "replicaCount": 7}
    assert result.modified_paths == ("replicaCount",)
    assert ("text", "replicaCount", "3") in prompts.requests


def test_selected_option_is_returned_verbatim() -> None:
    prompts = ScriptedPrompts(choices={"image.repository": "redis", "replicaCount": 10})

    result = collect_values(_helm_schema(), _helm_defaults(), prompts)

    assert result.values["image"]["repository"] == "redis"
    assert result.values["replicaCount"] == 10
    assert result.modified_paths == ("replicaCount", "image.repository")


def test_empty_text_answer_keeps_typed_default() -> None:
    prompts = ScriptedPrompts(texts={"service.port": "", "image.tag": ""})

    result = collect_values(_helm_schema(), _helm_defaults(), prompts)

    assert result.values["service"]["port"] == 80
    assert result.values["image"]["tag"] == "1.25"


def test_free_text_for_number_leaf_is_cast() -> None:
    prompts = ScriptedPrompts(texts={"service.port": "8080"})

    result = collect_values(_helm_schema(), _helm_defaults(), prompts)

    assert result.values["service"]["port"] == 8080


def test_shape_mismatch_is_treated_as_missing_default() -> None:
    defaults = {"replicaCount": {"unexpected": "mapping"}, "image": "nginx:latest"}
    prompts = ScriptedPrompts(
        choices={"replicaCount": 2, "image.repository": "httpd", "image.pullPolicy": "Always"},
        texts={"image.tag": "2.4", "service.port": "443"},
    )

    result = collect_values(_helm_schema(), defaults, prompts)

    assert result.values == {
        "replicaCount": 2,
        "image": {"repository": "httpd", "tag": "2.4", "pullPolicy": "Always"},
        "service": {"type": "", "port": 443},
    }
    assert ("text", "image.tag", None) in prompts.requests
    assert ("choice", "image.repository", ("nginx", "httpd", "redis"), None) in prompts.requests


def test_default_outside_options_is_not_offered_as_choice_default() -> None:
    defaults = {**_helm_defaults(), "replicaCount": 25}
    prompts = ScriptedPrompts(texts={"replicaCount": ""})

    result = collect_values(_helm_schema(), defaults, prompts)

    assert prompts.requests[0] == ("choice", "replicaCount", tuple(range(1, 11)), None)
    assert result.values["replicaCount"] == 25


def test_result_never_contains_keys_missing_from_schema() -> None:
    defaults = {**_helm_defaults(), "ingress": {"enabled": True}}
    defaults["image"] = {**defaults["image"], "digest": "sha256:abc"}

    result = collect_values(_helm_schema(), defaults, ScriptedPrompts())

    assert "ingress" not in result.values
    assert "digest" not in result.values["image"]


def test_result_covers_every_schema_leaf_without_defaults() -> None:
    schema = ObjectNode(
        children={
            "enabled": BooleanNode(),
            "limits": ObjectNode(
                children={
                    "cpu": NumberNode(minimum=0),
                    "tier": EnumChoiceNode(options=("low", "high")),
                    "deep": ObjectNode(children={"name": StringNode()}),
                }
            ),
            "size": LiteralUnionNode(options=("s", "m")),
        }
    )

    result = collect_values(schema, None, AcceptDefaultsPromptProvider())

    assert list(flatten_document(result.values)) == [field.path for field in leaf_fields(schema)]
    assert result.values["enabled"] is False


def test_description_is_shown_in_prompt() -> None:
    schema = ObjectNode(children={"tag": StringNode(description="Image tag")})
    messages: list[str] = []

    class _Recording(ScriptedPrompts):
        def request_text(self, message: str, default: str | None) -> str:
            messages.append(message)
            return super().request_text(message, default)

    collect_values(schema, {"tag": "v1"}, _Recording())

    assert messages == ["Enter value for tag (Image tag)"]


def test_enumerated_leaf_without_options_is_fatal() -> None:
    schema = ObjectNode(children={"mode": EnumChoiceNode(options=())})

    with pytest.raises(CollectionError, match="declares no options"):
        collect_values(schema, {}, ScriptedPrompts())


def test_answer_outside_offered_options_is_fatal() -> None:
    prompts = ScriptedPrompts(choices={"image.repository": "busybox"})

    with pytest.raises(CollectionError, match="not one of the offered options"):
        collect_values(_helm_schema(), _helm_defaults(), prompts)


def test_interrupt_propagates_and_stops_the_walk() -> None:
    class _Interrupting(ScriptedPrompts):
        def request_text(self, message: str, default: str | None) -> str:
            raise KeyboardInterrupt

    prompts = _Interrupting()

    with pytest.raises(KeyboardInterrupt):
        collect_values(_helm_schema(), _helm_defaults(), prompts)

    assert [request[1] for request in prompts.requests] == ["replicaCount", "image.repository"]


def test_only_paths_prompts_selected_leaves_and_keeps_the_rest() -> None:
    current = {**_helm_defaults(), "replicaCount": "eleven"}
    prompts = ScriptedPrompts(choices={"replicaCount": 4})

    result = collect_values(_helm_schema(), current, prompts, only_paths=["replicaCount"])

    assert [request[1] for request in prompts.requests] == ["replicaCount"]
    assert result.values == {**_helm_defaults(), "replicaCount": 4}


def test_modified_paths_are_measured_against_baseline() -> None:
    current = {
        "replicaCount": "eleven",
        "image": {"repository": "redis", "tag": "1.25", "pullPolicy": "IfNotPresent"},
        "service": {"type": "ClusterIP", "port": 80},
    }
    prompts = ScriptedPrompts(choices={"replicaCount": 3})

    result = collect_values(
        _helm_schema(),
        current,
        prompts,
        only_paths=["replicaCount"],
        baseline=_helm_defaults(),
    )

    assert result.values["replicaCount"] == 3
    assert result.modified_paths == ("image.repository",)


def test_only_paths_selects_whole_subtrees() -> None:
    prompts = ScriptedPrompts()

    collect_values(_helm_schema(), _helm_defaults(), prompts, only_paths=["image"])

    assert [request[1] for request in prompts.requests] == [
        "image.repository",
        "image.tag",
        "image.pullPolicy",
    ]


def test_only_paths_still_prompts_leaves_without_current_value() -> None:
    current = _helm_defaults()
    del current["service"]
    prompts = ScriptedPrompts(
        choices={"service.type": "NodePort"},
        texts={"service.port": "30080"},
    )

    result = collect_values(_helm_schema(), current, prompts, only_paths=["replicaCount"])

    assert [request[1] for request in prompts.requests] == [
        "replicaCount",
        "service.type",
        "service.port",
    ]
    assert result.values["service"] == {"type": "NodePort", "port": 30080}
