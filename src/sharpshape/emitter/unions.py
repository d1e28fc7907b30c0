# topmark:header:start
#
#   project      : SharpShape
#   file         : unions.py
#   file_relpath : src/sharpshape/emitter/unions.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Union model: nullable collapsing and union/field naming.

A union of exactly ``{T, Null}`` is rendered as ``T`` made nullable. Every other
union becomes a generated struct whose name joins the styled display names of its
non-null members with ``Or`` (``{Integer, String, Null}`` → ``IntegerOrString``),
and which holds one field per non-null member.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sharpshape.constants import UNION_NAME_SEPARATOR
from sharpshape.ir.graph import sorted_members
from sharpshape.ir.types import (
    ArrayType,
    BoolType,
    ClassType,
    DoubleType,
    IntegerType,
    MapType,
    NothingType,
    NullType,
    StringType,
    UnionType,
)
from sharpshape.naming.legalize import style_name

if TYPE_CHECKING:
    from sharpshape.ir.graph import Graph
    from sharpshape.ir.types import IRType


def display_name(graph: Graph, t: IRType) -> str:
    """Return the logical, unstyled display name of ``t``.

    Used to derive union type names and union field names.
    """
    match t:
        case NothingType():
            return "Anything"
        case NullType():
            return "Null"
        case BoolType():
            return "Bool"
        case IntegerType():
            return "Integer"
        case DoubleType():
            return "Double"
        case StringType():
            return "String"
        case ArrayType(items=items):
            return f"{display_name(graph, items)} Array"
        case MapType(values=values):
            return f"{display_name(graph, values)} Map"
        case ClassType(ref=ref):
            return graph.class_definition(ref).base_name
        case UnionType():
            return "Union"


def non_null_members(union: UnionType) -> list[IRType]:
    """Return the union's non-null members in canonical order."""
    return [m for m in sorted_members(union.members) if not isinstance(m, NullType)]


def union_base_name(graph: Graph, union: UnionType) -> str:
    """Return the preferred (not yet deduplicated) name of a generated union type."""
    parts = sorted(display_name(graph, m) for m in non_null_members(union))
    return UNION_NAME_SEPARATOR.join(style_name(p) for p in parts)


def union_field_base_name(graph: Graph, member: IRType) -> str:
    """Return the preferred (not yet deduplicated) field name for one union member."""
    return style_name(display_name(graph, member))
