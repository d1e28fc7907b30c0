# topmark:header:start
#
#   project      : SharpShape
#   file         : types.py
#   file_relpath : src/sharpshape/emitter/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type-to-syntax mapper: render IR types as C# type expressions.

The mapper only reads the name registry. Since the registry is frozen before
rendering starts, the same IR type always renders to the same text within one
rendering pass.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sharpshape.emitter import syntax
from sharpshape.ir.graph import nullable_member
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

if TYPE_CHECKING:
    from sharpshape.ir.types import IRType
    from sharpshape.naming.registry import NameRegistry


def class_key(ref: str) -> tuple[str, str]:
    """Registry key of a class in the ``types`` scope."""
    return ("class", ref)


def union_key(union: UnionType) -> tuple[str, UnionType]:
    """Registry key of a generated union in the ``types`` scope."""
    return ("union", union)


class TypeMapper:
    """Render IR types to C# type expressions.

    Args:
        registry (NameRegistry): Registry holding the class and union names.

    Raises:
        UnregisteredNameError: From `render` when a class or union was never named.
    """

    def __init__(self, registry: NameRegistry) -> None:
        self.registry = registry

    def class_name(self, ref: str) -> str:
        """Return the emitted name of class ``ref``."""
        return self.registry.types.lookup(class_key(ref))

    def union_name(self, union: UnionType) -> str:
        """Return the emitted name of a generated union."""
        return self.registry.types.lookup(union_key(union))

    def render(self, t: IRType) -> str:
        """Return the C# type expression for ``t``."""
        match t:
            case NothingType() | NullType():
                return syntax.OBJECT
            case IntegerType():
                return syntax.LONG
            case DoubleType():
                return syntax.DOUBLE
            case BoolType():
                return syntax.BOOL
            case StringType():
                return syntax.STRING
            case ArrayType(items=items):
                return syntax.array_of(self.render(items))
            case MapType(values=values):
                return syntax.dictionary_of(self.render(values))
            case ClassType(ref=ref):
                return self.class_name(ref)
            case UnionType():
                member = nullable_member(t)
                if member is not None:
                    return syntax.nullable(self.render(member))
                return self.union_name(t)

    def render_nullable(self, t: IRType) -> str:
        """Return a type expression for ``t`` that can hold null."""
        return syntax.nullable(self.render(t))
