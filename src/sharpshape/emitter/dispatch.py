# topmark:header:start
#
#   project      : SharpShape
#   file         : dispatch.py
#   file_relpath : src/sharpshape/emitter/dispatch.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Token-driven dispatch for generated unions.

A generated union decodes a value by looking only at the kind of the next JSON
token. [`build_dispatch_table`][sharpshape.emitter.dispatch.build_dispatch_table]
computes, in a fixed order, which union member each token kind populates:

1. ``Null`` → no member (only when ``Null`` is an alternative);
2. ``Integer`` → the ``Integer`` member, or the ``Double`` member when the union
   has no ``Integer`` member;
3. ``Float`` → the ``Double`` member;
4. ``Boolean`` → the ``Bool`` member;
5. ``String`` and ``Date`` → the ``String`` member;
6. ``StartArray`` → the first array member;
7. ``StartObject`` → the first class member, else the first map member.

Token kinds without a case are unconvertible. The C# union emitter renders the
table as a ``switch``; [`UnionDecoder`][sharpshape.emitter.dispatch.UnionDecoder]
interprets the same table against Python JSON values.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from sharpshape.core.errors import UnionDecodeError
from sharpshape.emitter.unions import non_null_members
from sharpshape.ir.types import (
    BOOL,
    DOUBLE,
    INTEGER,
    NULL,
    STRING,
    ArrayType,
    ClassType,
    MapType,
)

if TYPE_CHECKING:
    from sharpshape.emitter.context import RenderContext
    from sharpshape.ir.types import IRType, UnionType


class TokenKind(Enum):
    """JSON token kinds, spelled as Newtonsoft's ``JsonToken`` members."""

    NULL = "Null"
    INTEGER = "Integer"
    FLOAT = "Float"
    BOOLEAN = "Boolean"
    STRING = "String"
    DATE = "Date"
    START_ARRAY = "StartArray"
    START_OBJECT = "StartObject"


@dataclass(frozen=True)
class DispatchCase:
    """One arm of the dispatch ``switch``.

    Attributes:
        tokens (tuple[TokenKind, ...]): Token kinds handled by this arm.
        member (IRType | None): Member populated by this arm; None for ``Null``.
    """

    tokens: tuple[TokenKind, ...]
    member: IRType | None


def _first(members: list[IRType], shape: type) -> IRType | None:
    return next((m for m in members if isinstance(m, shape)), None)


def build_dispatch_table(union: UnionType) -> tuple[DispatchCase, ...]:
    """Return the dispatch arms for ``union`` in emission order."""
    members = non_null_members(union)
    cases: list[DispatchCase] = []

    if union.has(NULL):
        cases.append(DispatchCase((TokenKind.NULL,), None))

    has_integer = union.has(INTEGER)
    if has_integer:
        cases.append(DispatchCase((TokenKind.INTEGER,), INTEGER))
    if union.has(DOUBLE):
        # An integer literal is a valid double.
        tokens = (TokenKind.FLOAT,) if has_integer else (TokenKind.INTEGER, TokenKind.FLOAT)
        cases.append(DispatchCase(tokens, DOUBLE))
    if union.has(BOOL):
        cases.append(DispatchCase((TokenKind.BOOLEAN,), BOOL))
    if union.has(STRING):
        cases.append(DispatchCase((TokenKind.STRING, TokenKind.DATE), STRING))

    array_member = _first(members, ArrayType)
    if array_member is not None:
        cases.append(DispatchCase((TokenKind.START_ARRAY,), array_member))

    object_member = _first(members, ClassType) or _first(members, MapType)
    if object_member is not None:
        cases.append(DispatchCase((TokenKind.START_OBJECT,), object_member))

    return tuple(cases)


def token_kind_of(value: Any) -> TokenKind | None:
    """Return the kind of the token that starts ``value`` (a decoded JSON value)."""
    if value is None:
        return TokenKind.NULL
    # bool is a subclass of int
    if isinstance(value, bool):
        return TokenKind.BOOLEAN
    if isinstance(value, int):
        return TokenKind.INTEGER
    if isinstance(value, float):
        return TokenKind.FLOAT
    if isinstance(value, str):
        return TokenKind.STRING
    if isinstance(value, list):
        return TokenKind.START_ARRAY
    if isinstance(value, dict):
        return TokenKind.START_OBJECT
    return None


@dataclass(frozen=True)
class DecodedUnion:
    """Result of decoding one value into a generated union.

    Attributes:
        union_name (str): Emitted name of the union.
        field (str | None): Emitted name of the populated field; None when the value
            was ``null``.
        value (Any): Value stored in ``field`` (None when ``field`` is None).
    """

    union_name: str
    field: str | None
    value: Any

    def get(self, field: str) -> Any:
        """Return the value of ``field``; fields that were not populated are None."""
        return self.value if field == self.field else None


class UnionDecoder:
    """Decode Python JSON values the way the generated C# union constructor does.

    Composite members (arrays, maps, classes) are not decoded further; the value is
    kept as is, mirroring the delegation to the JSON serializer in C#.

    Args:
        context (RenderContext): Rendering context holding the union's names.
        union (UnionType): A generated (non-nullable) union.
    """

    def __init__(self, context: RenderContext, union: UnionType) -> None:
        self.context = context
        self.union = union
        self.name = context.union_name(union)
        self.cases = build_dispatch_table(union)

    def case_for(self, kind: TokenKind) -> DispatchCase | None:
        """Return the arm handling ``kind``, if any."""
        return next((case for case in self.cases if kind in case.tokens), None)

    def decode(self, value: Any) -> DecodedUnion:
        """Decode ``value``.

        Raises:
            UnionDecodeError: If no arm handles the value's token kind.
        """
        kind = token_kind_of(value)
        case = self.case_for(kind) if kind is not None else None
        if case is None:
            raise UnionDecodeError(self.name)
        if case.member is None:
            return DecodedUnion(self.name, None, None)
        if case.member == DOUBLE:
            value = float(value)
        return DecodedUnion(self.name, self.context.field_name(self.union, case.member), value)

    def decode_json(self, text: str) -> DecodedUnion:
        """Parse one JSON value from ``text`` and decode it."""
        return self.decode(json.loads(text))
