# topmark:header:start
#
#   project      : SharpShape
#   file         : types.py
#   file_relpath : src/sharpshape/ir/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IR type nodes.

`IRType` is a closed sum over the frozen dataclasses below. Consumers dispatch on
it with ``match`` statements; there is no open-ended base class to subclass.

Invariants:
    - `UnionType.members` is a set with at least two members and never contains
      another `UnionType` (use [`make_union`][sharpshape.ir.types.make_union] to
      flatten and collapse).
    - Nodes are immutable and hashable, so they can key name registries.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass(frozen=True, slots=True)
class NothingType:
    """No samples seen: the type is unknown."""


@dataclass(frozen=True, slots=True)
class NullType:
    """JSON ``null``."""


@dataclass(frozen=True, slots=True)
class BoolType:
    """JSON ``true``/``false``."""


@dataclass(frozen=True, slots=True)
class IntegerType:
    """JSON number without fraction or exponent."""


@dataclass(frozen=True, slots=True)
class DoubleType:
    """JSON number with fraction or exponent."""


@dataclass(frozen=True, slots=True)
class StringType:
    """JSON string."""


@dataclass(frozen=True, slots=True)
class ArrayType:
    """Homogeneous JSON array."""

    items: IRType


@dataclass(frozen=True, slots=True)
class MapType:
    """JSON object used as a string-keyed dictionary with homogeneous values."""

    values: IRType


@dataclass(frozen=True, slots=True)
class ClassType:
    """Reference to a class definition in the graph."""

    ref: str


@dataclass(frozen=True, slots=True)
class UnionType:
    """Set of alternative types for one value."""

    members: frozenset[IRType]

    def __post_init__(self) -> None:
        if len(self.members) < 2:
            raise ValueError(f"A union needs at least two members, got {len(self.members)}")
        if any(isinstance(m, UnionType) for m in self.members):
            raise ValueError("Unions must be flat; use make_union() to merge nested unions")

    def has(self, member: IRType) -> bool:
        """Return True if ``member`` is one of the alternatives."""
        return member in self.members


IRType = Union[
    NothingType,
    NullType,
    BoolType,
    IntegerType,
    DoubleType,
    StringType,
    ArrayType,
    MapType,
    ClassType,
    UnionType,
]

NOTHING = NothingType()
NULL = NullType()
BOOL = BoolType()
INTEGER = IntegerType()
DOUBLE = DoubleType()
STRING = StringType()


def make_union(*types: IRType | Iterable[IRType]) -> IRType:
    """Build a flat union from ``types``.

    Nested unions are flattened and duplicates dropped. When only one distinct type
    remains, that type is returned instead of a union.

    Raises:
        ValueError: If no type is given.
    """
    members: set[IRType] = set()
    for item in types:
        candidates = item if isinstance(item, (list, tuple, set, frozenset)) else (item,)
        for t in candidates:
            if isinstance(t, UnionType):
                members.update(t.members)
            else:
                members.add(t)
    if not members:
        raise ValueError("make_union() needs at least one type")
    if len(members) == 1:
        return next(iter(members))
    return UnionType(frozenset(members))
