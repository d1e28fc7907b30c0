# topmark:header:start
#
#   project      : SharpShape
#   file         : test_ir_io.py
#   file_relpath : tests/ir/test_ir_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for loading IR documents from JSON."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pytest

from sharpshape.core.errors import IRFormatError
from sharpshape.ir.io import graph_from_dict, graph_to_dict, load_graph, loads_graph, parse_type
from sharpshape.ir.types import (
    INTEGER,
    NOTHING,
    NULL,
    STRING,
    ArrayType,
    ClassType,
    MapType,
    make_union,
)
from tests.conftest import parametrize

if TYPE_CHECKING:
    from pathlib import Path

SAMPLE: dict[str, Any] = {
    "top_level": {"kind": "class", "ref": "TopLevel"},
    "classes": {
        "TopLevel": {
            "names": ["TopLevel", "Root"],
            "properties": {
                "id": {"kind": "union", "members": ["integer", "string", "null"]},
                "tags": {"kind": "array", "items": "string"},
                "extra": {"kind": "map", "values": {"kind": "class", "ref": "Extra"}},
            },
        },
        "Extra": {"properties": {"anything": "nothing"}},
    },
}


def test_loads_sample_document() -> None:
    graph = loads_graph(json.dumps(SAMPLE))
    assert graph.top_level == ClassType("TopLevel")
    assert list(graph.classes) == ["TopLevel", "Extra"]

    top = graph.class_definition("TopLevel")
    assert top.names == ("TopLevel", "Root")
    assert list(top.properties) == ["extra", "id", "tags"]
    assert top.properties["id"] == make_union(INTEGER, STRING, NULL)
    assert top.properties["tags"] == ArrayType(STRING)
    assert top.properties["extra"] == MapType(ClassType("Extra"))

    extra = graph.class_definition("Extra")
    assert extra.names == ("Extra",)
    assert extra.properties["anything"] == NOTHING


def test_load_graph_from_file(tmp_path: Path) -> None:
    path = tmp_path / "shapes.json"
    path.write_text(json.dumps(SAMPLE), encoding="utf-8")
    assert load_graph(path) == loads_graph(json.dumps(SAMPLE))


def test_nested_unions_are_flattened() -> None:
    node = {
        "kind": "union",
        "members": ["integer", {"kind": "union", "members": ["string", "null"]}],
    }
    assert parse_type(node) == make_union(INTEGER, STRING, NULL)


def test_graph_document_round_trip() -> None:
    graph = graph_from_dict(SAMPLE)
    assert graph_from_dict(graph_to_dict(graph)) == graph


@parametrize(
    "node, message",
    [
        (42, "type node must be an object"),
        ({}, "needs a string 'kind'"),
        ({"kind": "number"}, "unknown type kind 'number'"),
        ({"kind": "array"}, "array node needs 'items'"),
        ({"kind": "map"}, "map node needs 'values'"),
        ({"kind": "class", "ref": ""}, "non-empty string 'ref'"),
        ({"kind": "union", "members": "integer"}, "'members' list"),
        ({"kind": "union", "members": []}, "has no members"),
        ({"kind": "union", "members": ["integer", "integer"]}, "two distinct members"),
    ],
)
def test_parse_type_errors(node: Any, message: str) -> None:
    with pytest.raises(IRFormatError, match=message):
        parse_type(node, location="/top_level")


def test_error_location_points_at_nested_node() -> None:
    doc = {
        "top_level": "string",
        "classes": {"A/B": {"properties": {"x": {"kind": "array", "items": "float"}}}},
    }
    with pytest.raises(IRFormatError) as exc_info:
        graph_from_dict(doc)
    assert exc_info.value.location == "/classes/A~1B/properties/x/items"
    assert str(exc_info.value).startswith("/classes/A~1B/properties/x/items: ")


def test_missing_top_level() -> None:
    with pytest.raises(IRFormatError, match="^/: IR document needs a 'top_level' type$"):
        graph_from_dict({"classes": {}})


def test_undefined_class_reference() -> None:
    doc = {"top_level": {"kind": "array", "items": {"kind": "class", "ref": "Missing"}}}
    with pytest.raises(IRFormatError, match="undefined class 'Missing'"):
        graph_from_dict(doc)


def test_invalid_names() -> None:
    doc = {"top_level": "null", "classes": {"A": {"names": [1, 2]}}}
    with pytest.raises(IRFormatError, match="'names' must be a list of strings"):
        graph_from_dict(doc)


def test_invalid_json_text() -> None:
    with pytest.raises(IRFormatError, match="invalid JSON"):
        loads_graph("{not json")


def test_ir_format_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        loads_graph("[]")
