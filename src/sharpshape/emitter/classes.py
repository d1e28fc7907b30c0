# topmark:header:start
#
#   project      : SharpShape
#   file         : classes.py
#   file_relpath : src/sharpshape/emitter/classes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Class emitter.

Renders one record shape as a ``partial class`` with one auto-property per JSON
key. Each property carries a ``[JsonProperty]`` attribute with the raw key, so
the styled member name never affects the wire format. Decoding is left to the
serializer: a property's declared type is enough, because a plain class has no
ambiguity per field.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sharpshape.config.logging import get_logger
from sharpshape.emitter.syntax import string_literal

if TYPE_CHECKING:
    from sharpshape.config.logging import SharpShapeLogger
    from sharpshape.emitter.context import RenderContext
    from sharpshape.emitter.writer import SourceWriter
    from sharpshape.ir.graph import ClassDefinition

logger: SharpShapeLogger = get_logger(__name__)


def emit_class(writer: SourceWriter, ctx: RenderContext, cls: ClassDefinition) -> None:
    """Emit the declaration of ``cls``."""
    name = ctx.class_name(cls.ref)
    logger.debug("Emitting class %s (%d properties)", name, len(cls.properties))
    with writer.block(f"public partial class {name}"):
        for key, prop_type in cls.properties.items():
            writer.line(f"[JsonProperty({string_literal(key)})]")
            writer.line(
                f"public {ctx.mapper.render(prop_type)} {ctx.property_name(cls.ref, key)}"
                " { get; set; }"
            )
