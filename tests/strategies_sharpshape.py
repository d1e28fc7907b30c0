# topmark:header:start
#
#   project      : SharpShape
#   file         : strategies_sharpshape.py
#   file_relpath : tests/strategies_sharpshape.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for raw names, IR types and small IR graphs.

Graphs are kept small on purpose: the interesting cases are name collisions
between JSON keys, class names and union names, which show up quickly with a
narrow alphabet.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Literal

from hypothesis import strategies as st

from sharpshape.ir.graph import ClassDefinition, Graph
from sharpshape.ir.types import (
    BOOL,
    DOUBLE,
    INTEGER,
    NOTHING,
    NULL,
    STRING,
    ArrayType,
    ClassType,
    IRType,
    MapType,
    make_union,
)

Draw = Callable[[st.SearchStrategy[Any]], Any]

BLACKLIST_CATEGORIES: tuple[Literal["Cs"], ...] = ("Cs",)

# Names that collide with each other or with helper types once styled.
COLLIDING_NAMES: tuple[str, ...] = (
    "type",
    "Type",
    "converter",
    "Converter",
    "convert",
    "exception",
    "json reader",
    "item",
    "Item",
    "item_",
    "other item",
    "OtherItem",
    "integer or string",
    "",
    "1",
    "$ref",
)

PRIMITIVES: tuple[IRType, ...] = (NOTHING, NULL, BOOL, INTEGER, DOUBLE, STRING)

s_any_text: st.SearchStrategy[str] = st.text(
    alphabet=st.characters(blacklist_categories=BLACKLIST_CATEGORIES),
    max_size=24,
)

s_raw_name: st.SearchStrategy[str] = st.one_of(
    st.sampled_from(COLLIDING_NAMES),
    s_any_text,
)


def s_ir_type(class_refs: tuple[str, ...]) -> st.SearchStrategy[IRType]:
    """Strategy for IR types referencing only ``class_refs``."""
    leaves: list[st.SearchStrategy[IRType]] = [st.sampled_from(PRIMITIVES)]
    if class_refs:
        leaves.append(st.sampled_from(class_refs).map(ClassType))
    base: st.SearchStrategy[IRType] = st.one_of(leaves)

    def extend(children: st.SearchStrategy[IRType]) -> st.SearchStrategy[IRType]:
        return st.one_of(
            children.map(ArrayType),
            children.map(MapType),
            st.lists(children, min_size=2, max_size=4).map(make_union),
        )

    return st.recursive(base, extend, max_leaves=6)


@st.composite
def s_graph(draw: Draw) -> Graph:
    """Strategy for small, valid IR graphs with colliding names."""
    count: int = draw(st.integers(min_value=1, max_value=4))
    refs = tuple(f"c{i}" for i in range(count))
    classes: dict[str, ClassDefinition] = {}
    for ref in refs:
        names: list[str] = draw(st.lists(s_raw_name, max_size=2))
        keys: list[str] = draw(st.lists(s_raw_name, max_size=5, unique=True))
        properties: dict[str, IRType] = {key: draw(s_ir_type(refs)) for key in keys}
        classes[ref] = ClassDefinition(ref=ref, names=tuple(names), properties=properties)
    top_level: IRType = draw(s_ir_type(refs))
    return Graph(classes=classes, top_level=top_level)
