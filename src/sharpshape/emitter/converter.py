# topmark:header:start
#
#   project      : SharpShape
#   file         : converter.py
#   file_relpath : src/sharpshape/emitter/converter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Top-level converter emitter.

Renders the public entry point, ``Convert.FromJson``, and (only when the graph
has generated unions) the ``Converter`` that routes union-typed values to their
token-driven constructors. Writing unions back to JSON is not supported: the
generated ``WriteJson`` always throws.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sharpshape.config.logging import get_logger

if TYPE_CHECKING:
    from sharpshape.config.logging import SharpShapeLogger
    from sharpshape.emitter.context import RenderContext
    from sharpshape.emitter.writer import SourceWriter

logger: SharpShapeLogger = get_logger(__name__)

CONVERT_CLASS = "Convert"
CONVERTER_CLASS = "Converter"


def emit_convert(writer: SourceWriter, ctx: RenderContext) -> None:
    """Emit the static ``Convert`` class with ``FromJson``."""
    top_level = ctx.mapper.render(ctx.graph.top_level)
    with writer.block(f"public static class {CONVERT_CLASS}"):
        writer.line(
            f"public static {top_level} FromJson(string json) => "
            f"JsonConvert.DeserializeObject<{top_level}>(json, Settings);"
        )
        writer.blank()
        writer.line("static JsonSerializerSettings Settings = new JsonSerializerSettings")
        writer.line("{")
        with writer.indented():
            writer.line("MetadataPropertyHandling = MetadataPropertyHandling.Ignore,")
            writer.line("DateParseHandling = DateParseHandling.None,")
            if ctx.has_unions:
                writer.line(f"Converters = {{ new {CONVERTER_CLASS}() }},")
        writer.line("};")


def emit_converter(writer: SourceWriter, ctx: RenderContext) -> None:
    """Emit the ``JsonConverter`` dispatching to the generated unions.

    Callers only invoke this when ``ctx.has_unions`` is true.
    """
    names = [ctx.union_name(u) for u in ctx.unions]
    logger.debug("Emitting converter for %d union(s)", len(names))
    with writer.block(f"public class {CONVERTER_CLASS} : JsonConverter"):
        checks = " || ".join(f"t == typeof({n})" for n in names)
        writer.line(f"public override bool CanConvert(Type t) => {checks};")
        writer.blank()
        with writer.block(
            "public override object ReadJson(JsonReader reader, Type t, "
            "object existingValue, JsonSerializer serializer)"
        ):
            for n in names:
                writer.line(f"if (t == typeof({n}))")
                with writer.indented():
                    writer.line(f"return new {n}(reader, serializer);")
            writer.line('throw new Exception("Unknown type");')
        writer.blank()
        with writer.block(
            "public override void WriteJson(JsonWriter writer, object value, "
            "JsonSerializer serializer)"
        ):
            writer.line("throw new NotImplementedException();")
