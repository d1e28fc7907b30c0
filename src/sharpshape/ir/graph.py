# topmark:header:start
#
#   project      : SharpShape
#   file         : graph.py
#   file_relpath : src/sharpshape/ir/graph.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IR graph: class definitions plus the designated top-level type.

The graph is built by the IR loader (or by callers of the Python API) and is
read-only afterwards: the emitter never adds classes or unions, it only names
the ones that exist.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from sharpshape.core.errors import UnknownClassError
from sharpshape.ir.types import ArrayType, ClassType, MapType, NullType, UnionType

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from sharpshape.ir.types import IRType


def combine_names(names: tuple[str, ...], *, fallback: str) -> str:
    """Combine candidate class names merged during inference into one base name.

    The shortest distinct name wins; ties are broken lexicographically so the
    result does not depend on merge order.

    Args:
        names (tuple[str, ...]): Candidate names (may contain duplicates or be empty).
        fallback (str): Name used when ``names`` is empty.

    Returns:
        str: The base name.
    """
    distinct = sorted(set(names), key=lambda n: (len(n), n))
    return distinct[0] if distinct else fallback


@dataclass(frozen=True)
class ClassDefinition:
    """One record shape.

    Attributes:
        ref (str): Stable reference used by `ClassType` nodes.
        names (tuple[str, ...]): Candidate display names from inference.
        properties (Mapping[str, IRType]): Property types keyed by raw JSON key,
            iterated in sorted key order.
    """

    ref: str
    names: tuple[str, ...] = ()
    properties: Mapping[str, IRType] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        ordered = {key: self.properties[key] for key in sorted(self.properties)}
        object.__setattr__(self, "properties", MappingProxyType(ordered))
        object.__setattr__(self, "names", tuple(self.names))

    @property
    def base_name(self) -> str:
        """Single display name combined from `names` (falls back to `ref`)."""
        return combine_names(self.names, fallback=self.ref)


@dataclass(frozen=True)
class Graph:
    """Immutable IR graph.

    Attributes:
        classes (Mapping[str, ClassDefinition]): Class definitions by ref, in
            declaration order.
        top_level (IRType): Type of the document root.
    """

    classes: Mapping[str, ClassDefinition]
    top_level: IRType

    def __post_init__(self) -> None:
        object.__setattr__(self, "classes", MappingProxyType(dict(self.classes)))

    def class_definition(self, ref: str) -> ClassDefinition:
        """Return the class definition for ``ref``.

        Raises:
            UnknownClassError: If ``ref`` is not defined in this graph.
        """
        try:
            return self.classes[ref]
        except KeyError:
            raise UnknownClassError(f"Unknown class reference '{ref}'") from None

    def iter_classes(self) -> Iterator[ClassDefinition]:
        """Yield class definitions in declaration order."""
        yield from self.classes.values()

    def iter_types(self) -> Iterator[IRType]:
        """Yield every type node reachable from the top level and the classes.

        Nodes are visited depth first: the top-level type first, then every class's
        properties in key order. Class references are yielded but not followed, since
        every class is visited on its own.
        """
        yield from _walk(self.top_level)
        for cls in self.iter_classes():
            for prop_type in cls.properties.values():
                yield from _walk(prop_type)

    def non_nullable_unions(self) -> list[UnionType]:
        """Return the unions that need a generated type, in first-seen order."""
        seen: dict[UnionType, None] = {}
        for node in self.iter_types():
            if isinstance(node, UnionType) and nullable_member(node) is None:
                seen.setdefault(node, None)
        return list(seen)


def _walk(t: IRType) -> Iterator[IRType]:
    yield t
    match t:
        case ArrayType(items=items):
            yield from _walk(items)
        case MapType(values=values):
            yield from _walk(values)
        case UnionType(members=members):
            for member in sorted_members(members):
                yield from _walk(member)
        case _:
            pass


def nullable_member(union: UnionType) -> IRType | None:
    """Return ``T`` if ``union`` is exactly ``{T, Null}``, else None."""
    if len(union.members) != 2:
        return None
    others = [m for m in union.members if not isinstance(m, NullType)]
    return others[0] if len(others) == 1 else None


def type_sort_key(t: IRType) -> str:
    """Structural sort key; stable across runs, unlike ``hash()``."""
    match t:
        case ArrayType(items=items):
            return f"array<{type_sort_key(items)}>"
        case MapType(values=values):
            return f"map<{type_sort_key(values)}>"
        case ClassType(ref=ref):
            return f"class:{ref}"
        case UnionType(members=members):
            return "union<" + ",".join(sorted(type_sort_key(m) for m in members)) + ">"
        case _:
            return type(t).__name__


def sorted_members(members: frozenset[IRType]) -> list[IRType]:
    """Return union members in a deterministic order."""
    return sorted(members, key=type_sort_key)


__all__ = [
    "ClassDefinition",
    "Graph",
    "combine_names",
    "nullable_member",
    "sorted_members",
    "type_sort_key",
]
