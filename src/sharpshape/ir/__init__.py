# topmark:header:start
#
#   project      : SharpShape
#   file         : __init__.py
#   file_relpath : src/sharpshape/ir/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Typed intermediate representation (IR) of inferred JSON shapes."""

from __future__ import annotations

from sharpshape.ir.graph import ClassDefinition, Graph
from sharpshape.ir.types import (
    BOOL,
    DOUBLE,
    INTEGER,
    NOTHING,
    NULL,
    STRING,
    ArrayType,
    BoolType,
    ClassType,
    DoubleType,
    IntegerType,
    IRType,
    MapType,
    NothingType,
    NullType,
    StringType,
    UnionType,
    make_union,
)

__all__ = [
    "BOOL",
    "DOUBLE",
    "INTEGER",
    "NOTHING",
    "NULL",
    "STRING",
    "ArrayType",
    "BoolType",
    "ClassDefinition",
    "ClassType",
    "DoubleType",
    "Graph",
    "IRType",
    "IntegerType",
    "MapType",
    "NothingType",
    "NullType",
    "StringType",
    "UnionType",
    "make_union",
]
