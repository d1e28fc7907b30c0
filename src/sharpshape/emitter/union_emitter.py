# topmark:header:start
#
#   project      : SharpShape
#   file         : union_emitter.py
#   file_relpath : src/sharpshape/emitter/union_emitter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Union emitter.

A generated union is a ``struct`` with one nullable field per non-null member
and a constructor taking the reader positioned at the value. The constructor
resets every field, then switches on ``reader.TokenType`` following the
dispatch table from `sharpshape.emitter.dispatch`: each arm deserializes the
value into exactly one field and returns. Token kinds without an arm fall
through to an exception naming the union.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sharpshape.config.logging import get_logger
from sharpshape.emitter.dispatch import build_dispatch_table
from sharpshape.emitter.syntax import string_literal
from sharpshape.emitter.unions import non_null_members

if TYPE_CHECKING:
    from sharpshape.config.logging import SharpShapeLogger
    from sharpshape.emitter.context import RenderContext
    from sharpshape.emitter.writer import SourceWriter
    from sharpshape.ir.types import UnionType

logger: SharpShapeLogger = get_logger(__name__)


def emit_union(writer: SourceWriter, ctx: RenderContext, union: UnionType) -> None:
    """Emit the struct and token-driven constructor of a generated union."""
    name = ctx.union_name(union)
    members = non_null_members(union)
    logger.debug("Emitting union %s (%d members)", name, len(members))

    with writer.block(f"public struct {name}"):
        for member in members:
            writer.line(
                f"public {ctx.mapper.render_nullable(member)} {ctx.field_name(union, member)};"
            )
        writer.blank()
        with writer.block(f"public {name}(JsonReader reader, JsonSerializer serializer)"):
            for member in members:
                writer.line(f"{ctx.field_name(union, member)} = null;")
            writer.blank()
            _emit_switch(writer, ctx, union)
            writer.line(f"throw new Exception({string_literal('Cannot convert ' + name)});")


def _emit_switch(writer: SourceWriter, ctx: RenderContext, union: UnionType) -> None:
    with writer.block("switch (reader.TokenType)"):
        for case in build_dispatch_table(union):
            for token in case.tokens:
                writer.line(f"case JsonToken.{token.value}:")
            with writer.indented():
                if case.member is not None:
                    field = ctx.field_name(union, case.member)
                    target = ctx.mapper.render(case.member)
                    writer.line(f"{field} = serializer.Deserialize<{target}>(reader);")
                writer.line("return;")
