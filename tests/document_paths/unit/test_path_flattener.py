"""Path flattener tests."""

from __future__ import annotations

from values_customizer.document_paths import (
    changed_paths,
    flatten_document,
    unflatten_document,
)


def _sample_document() -> dict[str, object]:
    return {
        "replicaCount": 3,
        "image": {"repository": "nginx", "tag": "1.25", "pullPolicy": "IfNotPresent"},
        "service": {"type": "ClusterIP", "port": 80, "tls": {"enabled": False, "secret": None}},
    }


def test_flatten_uses_depth_first_key_order() -> None:
    flat = flatten_document(_sample_document())

    assert list(flat) == [
        "replicaCount",
        "image.repository",
        "image.tag",
        "image.pullPolicy",
        "service.type",
        "service.port",
        "service.tls.enabled",
        "service.tls.secret",
    ]
    assert flat["service.tls.enabled"] is False
    assert flat["service.tls.secret"] is None


def test_unflatten_restores_nested_document() -> None:
    document = _sample_document()

    assert unflatten_document(flatten_document(document)) == document


def test_round_trip_keeps_empty_mappings_and_lists_as_leaves() -> None:
    document = {"resources": {}, "ingress": {"hosts": ["a.example.com"], "annotations": {}}}

    flat = flatten_document(document)

    assert flat == {
        "resources": {},
        "ingress.hosts": ["a.example.com"],
        "ingress.annotations": {},
    }
    assert unflatten_document(flat) == document


def test_unflatten_replaces_leaf_that_must_become_a_mapping() -> None:
    rebuilt = unflatten_document({"a": 1, "a.b": 2})

    assert rebuilt == {"a": {"b": 2}}


def test_unflatten_last_leaf_wins_over_earlier_mapping() -> None:
    rebuilt = unflatten_document({"a.b": 2, "a": 1})

    assert rebuilt == {"a": 1}


def test_flatten_and_unflatten_do_not_mutate_inputs() -> None:
    document = _sample_document()
    flat = flatten_document(document)
    snapshot = dict(flat)

    rebuilt = unflatten_document(flat)
    rebuilt["image"]["tag"] = "changed"

    assert flat == snapshot
    assert document["image"]["tag"] == "1.25"


def test_changed_paths_reports_new_and_modified_leaves() -> None:
    before = _sample_document()
    after = unflatten_document(
        {
            **flatten_document(before),
            "replicaCount": 7,
            "image.tag": "1.26",
            "extra.flag": True,
        }
    )

    assert changed_paths(before, after) == ("replicaCount", "image.tag", "extra.flag")


def test_changed_paths_distinguishes_value_types() -> None:
    assert changed_paths({"port": 80}, {"port": "80"}) == ("port",)
    assert changed_paths({"enabled": 1}, {"enabled": True}) == ("enabled",)
    assert changed_paths({"port": 80}, {"port": 80}) == ()

