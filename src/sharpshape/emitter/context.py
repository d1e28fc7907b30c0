# topmark:header:start
#
#   project      : SharpShape
#   file         : context.py
#   file_relpath : src/sharpshape/emitter/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Name planning and the read-only rendering context.

[`plan_names`][sharpshape.emitter.context.plan_names] performs the single
allocation pass that precedes rendering:

1. class names, in declaration order, in the shared ``types`` scope;
2. generated union names, in first-seen order, in the same scope (so a union can
   never take a class's name);
3. property names, one scope per class, with the class name forbidden;
4. union field names, one scope per union, with the union name forbidden.

The registry is then frozen and wrapped in a
[`RenderContext`][sharpshape.emitter.context.RenderContext].
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from sharpshape.config.logging import get_logger
from sharpshape.emitter.types import TypeMapper, class_key, union_key
from sharpshape.emitter.unions import non_null_members, union_base_name, union_field_base_name
from sharpshape.naming.legalize import style_name
from sharpshape.naming.registry import NameRegistry

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sharpshape.config.logging import SharpShapeLogger
    from sharpshape.ir.graph import ClassDefinition, Graph
    from sharpshape.ir.types import IRType, UnionType

logger: SharpShapeLogger = get_logger(__name__)


def properties_scope_key(ref: str) -> tuple[str, str]:
    """Registry scope key for the properties of class ``ref``."""
    return ("properties", ref)


def fields_scope_key(union: UnionType) -> tuple[str, UnionType]:
    """Registry scope key for the fields of a generated union."""
    return ("fields", union)


@dataclass(frozen=True)
class RenderContext:
    """Everything the emitters read while rendering.

    Attributes:
        graph (Graph): The IR graph being rendered.
        registry (NameRegistry): Frozen registry with every emitted name.
        mapper (TypeMapper): Type-to-syntax mapper backed by ``registry``.
        unions (tuple[UnionType, ...]): Generated unions in emission order.
    """

    graph: Graph
    registry: NameRegistry
    mapper: TypeMapper
    unions: tuple[UnionType, ...]

    def class_name(self, ref: str) -> str:
        """Return the emitted name of class ``ref``."""
        return self.mapper.class_name(ref)

    def union_name(self, union: UnionType) -> str:
        """Return the emitted name of a generated union."""
        return self.mapper.union_name(union)

    def property_name(self, ref: str, key: str) -> str:
        """Return the emitted member name of property ``key`` in class ``ref``."""
        return self.registry.lookup(properties_scope_key(ref), key)

    def field_name(self, union: UnionType, member: IRType) -> str:
        """Return the emitted field name of ``member`` inside ``union``."""
        return self.registry.lookup(fields_scope_key(union), member)

    @property
    def has_unions(self) -> bool:
        """Whether the output needs the union converter."""
        return bool(self.unions)


def _plan_properties(registry: NameRegistry, cls: ClassDefinition, class_name: str) -> None:
    scope = registry.scope(
        properties_scope_key(cls.ref),
        label=f"properties of {class_name}",
        forbidden=(class_name,),
    )
    for key in cls.properties:
        name = scope.allocate(key, style_name(key))
        logger.trace("Property %s.%r -> %s", class_name, key, name)


def _plan_fields(registry: NameRegistry, graph: Graph, union: UnionType, union_name: str) -> None:
    scope = registry.scope(
        fields_scope_key(union),
        label=f"fields of {union_name}",
        forbidden=(union_name,),
    )
    for member in non_null_members(union):
        name = scope.allocate(member, union_field_base_name(graph, member))
        logger.trace("Union field %s.%s", union_name, name)


def plan_names(graph: Graph, forbidden: Iterable[str] = ()) -> RenderContext:
    """Allocate every emitted name for ``graph`` and freeze the registry.

    Args:
        graph (Graph): The IR graph to render.
        forbidden (Iterable[str]): Global forbidden identifiers.

    Returns:
        RenderContext: Read-only context for the emitters.
    """
    registry = NameRegistry(forbidden)

    class_names: dict[str, str] = {}
    for cls in graph.iter_classes():
        preferred = style_name(cls.base_name)
        class_names[cls.ref] = registry.types.allocate(class_key(cls.ref), preferred)

    unions = graph.non_nullable_unions()
    union_names: dict[UnionType, str] = {}
    for union in unions:
        preferred = union_base_name(graph, union)
        union_names[union] = registry.types.allocate(union_key(union), preferred)

    for cls in graph.iter_classes():
        _plan_properties(registry, cls, class_names[cls.ref])
    for union in unions:
        _plan_fields(registry, graph, union, union_names[union])

    registry.freeze()
    logger.debug(
        "Planned names for %d class(es) and %d union(s)",
        len(class_names),
        len(union_names),
    )
    return RenderContext(
        graph=graph,
        registry=registry,
        mapper=TypeMapper(registry),
        unions=tuple(unions),
    )
