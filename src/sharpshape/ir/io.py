# topmark:header:start
#
#   project      : SharpShape
#   file         : io.py
#   file_relpath : src/sharpshape/ir/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load IR graphs from JSON documents.

Document layout::

    {
      "top_level": {"kind": "class", "ref": "TopLevel"},
      "classes": {
        "TopLevel": {
          "names": ["TopLevel"],
          "properties": {"id": {"kind": "integer"}}
        }
      }
    }

Type nodes are objects with a ``kind`` of ``nothing``, ``null``, ``bool``,
``integer``, ``double``, ``string``, ``array`` (``items``), ``map``
(``values``), ``class`` (``ref``) or ``union`` (``members``). A bare string
such as ``"integer"`` is accepted as shorthand for a primitive node.

All validation errors raise `IRFormatError` with the location of the offending
node.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Final, cast

from sharpshape.config.logging import get_logger
from sharpshape.core.errors import IRFormatError
from sharpshape.ir.graph import ClassDefinition, Graph, sorted_members
from sharpshape.ir.types import (
    BOOL,
    DOUBLE,
    INTEGER,
    NOTHING,
    NULL,
    STRING,
    ArrayType,
    ClassType,
    MapType,
    UnionType,
    make_union,
)

if TYPE_CHECKING:
    from pathlib import Path

    from sharpshape.config.logging import SharpShapeLogger
    from sharpshape.ir.types import IRType

logger: SharpShapeLogger = get_logger(__name__)

PRIMITIVE_KINDS: Final[dict[str, IRType]] = {
    "nothing": NOTHING,
    "null": NULL,
    "bool": BOOL,
    "integer": INTEGER,
    "double": DOUBLE,
    "string": STRING,
}


def _expect_object(value: Any, location: str, what: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise IRFormatError(f"{what} must be an object", location=location)
    return cast("dict[str, Any]", value)


def parse_type(node: Any, *, location: str = "") -> IRType:
    """Parse one type node.

    Args:
        node (Any): Decoded JSON value describing the type.
        location (str): Location of ``node`` for error messages.

    Returns:
        IRType: The parsed type. Unions are flattened; a union that collapses to
        fewer than two members is rejected.

    Raises:
        IRFormatError: If the node is malformed.
    """
    if isinstance(node, str):
        node = {"kind": node}
    obj = _expect_object(node, location, "type node")
    kind = obj.get("kind")
    if not isinstance(kind, str):
        raise IRFormatError("type node needs a string 'kind'", location=location)

    if kind in PRIMITIVE_KINDS:
        return PRIMITIVE_KINDS[kind]
    if kind == "array":
        if "items" not in obj:
            raise IRFormatError("array node needs 'items'", location=location)
        return ArrayType(parse_type(obj["items"], location=f"{location}/items"))
    if kind == "map":
        if "values" not in obj:
            raise IRFormatError("map node needs 'values'", location=location)
        return MapType(parse_type(obj["values"], location=f"{location}/values"))
    if kind == "class":
        ref = obj.get("ref")
        if not isinstance(ref, str) or not ref:
            raise IRFormatError("class node needs a non-empty string 'ref'", location=location)
        return ClassType(ref)
    if kind == "union":
        members = obj.get("members")
        if not isinstance(members, list):
            raise IRFormatError("union node needs a 'members' list", location=location)
        parsed: list[IRType] = [
            parse_type(m, location=f"{location}/members/{i}")
            for i, m in enumerate(cast("list[Any]", members))
        ]
        if not parsed:
            raise IRFormatError("union node has no members", location=location)
        merged = make_union(parsed)
        if not isinstance(merged, UnionType):
            raise IRFormatError(
                "union node must have at least two distinct members", location=location
            )
        return merged
    raise IRFormatError(f"unknown type kind '{kind}'", location=location)


def _parse_class(ref: str, node: Any, location: str) -> ClassDefinition:
    obj = _expect_object(node, location, "class definition")

    names_any = obj.get("names", [])
    if isinstance(names_any, str):
        names_any = [names_any]
    if not isinstance(names_any, list) or not all(isinstance(n, str) for n in names_any):
        raise IRFormatError("'names' must be a list of strings", location=f"{location}/names")
    names = tuple(cast("list[str]", names_any)) or (ref,)

    props_obj = _expect_object(obj.get("properties", {}), f"{location}/properties", "properties")
    properties: dict[str, IRType] = {
        key: parse_type(value, location=f"{location}/properties/{_escape_pointer(key)}")
        for key, value in props_obj.items()
    }
    return ClassDefinition(ref=ref, names=names, properties=properties)


def _escape_pointer(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


def _check_refs(graph: Graph) -> None:
    for node in graph.iter_types():
        if isinstance(node, ClassType) and node.ref not in graph.classes:
            raise IRFormatError(f"reference to undefined class '{node.ref}'")


def graph_from_dict(data: Any) -> Graph:
    """Build a graph from a decoded IR document.

    Raises:
        IRFormatError: If the document is malformed or references undefined classes.
    """
    doc = _expect_object(data, "", "IR document")
    if "top_level" not in doc:
        raise IRFormatError("IR document needs a 'top_level' type")

    classes_obj = _expect_object(doc.get("classes", {}), "/classes", "'classes'")
    classes: dict[str, ClassDefinition] = {
        ref: _parse_class(ref, node, f"/classes/{_escape_pointer(ref)}")
        for ref, node in classes_obj.items()
    }
    top_level = parse_type(doc["top_level"], location="/top_level")

    graph = Graph(classes=classes, top_level=top_level)
    _check_refs(graph)
    logger.debug("Loaded IR graph with %d class(es)", len(classes))
    return graph


def loads_graph(text: str) -> Graph:
    """Parse an IR document from JSON text.

    Raises:
        IRFormatError: If the text is not valid JSON or not a valid IR document.
    """
    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise IRFormatError(
            f"invalid JSON: {exc.msg} (line {exc.lineno}, column {exc.colno})"
        ) from exc
    return graph_from_dict(data)


def load_graph(path: Path) -> Graph:
    """Read and parse an IR document from ``path`` (UTF-8).

    Raises:
        OSError: If the file cannot be read.
        IRFormatError: If the content is not a valid IR document.
    """
    logger.debug("Reading IR document: %s", path)
    return loads_graph(path.read_text(encoding="utf-8"))


def type_to_dict(t: IRType) -> dict[str, Any]:
    """Serialize a type node back to its document form (unions in canonical order)."""
    for kind, prim in PRIMITIVE_KINDS.items():
        if t == prim:
            return {"kind": kind}
    match t:
        case ArrayType(items=items):
            return {"kind": "array", "items": type_to_dict(items)}
        case MapType(values=values):
            return {"kind": "map", "values": type_to_dict(values)}
        case ClassType(ref=ref):
            return {"kind": "class", "ref": ref}
        case UnionType(members=members):
            return {"kind": "union", "members": [type_to_dict(m) for m in sorted_members(members)]}
        case _:
            raise TypeError(f"Not an IR type: {t!r}")


def graph_to_dict(graph: Graph) -> dict[str, Any]:
    """Serialize ``graph`` to its document form."""
    return {
        "top_level": type_to_dict(graph.top_level),
        "classes": {
            cls.ref: {
                "names": list(cls.names),
                "properties": {k: type_to_dict(v) for k, v in cls.properties.items()},
            }
            for cls in graph.iter_classes()
        },
    }
