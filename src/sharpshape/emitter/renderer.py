# topmark:header:start
#
#   project      : SharpShape
#   file         : renderer.py
#   file_relpath : src/sharpshape/emitter/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""C# renderer: one deterministic pass from IR graph to source text.

Output layout:

- a header comment explaining how to use the generated code;
- ``namespace <Namespace>`` containing the ``using`` declarations, the
  ``Convert`` class (plus ``Converter`` when unions exist), one class per class
  definition and one struct per generated union, separated by blank lines.

The renderer performs no I/O.
"""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING

from sharpshape.config.logging import get_logger
from sharpshape.emitter.classes import emit_class
from sharpshape.emitter.context import plan_names
from sharpshape.emitter.converter import emit_convert, emit_converter
from sharpshape.emitter.union_emitter import emit_union
from sharpshape.emitter.writer import SourceWriter

if TYPE_CHECKING:
    from collections.abc import Callable

    from sharpshape.config.logging import SharpShapeLogger
    from sharpshape.config.model import Config
    from sharpshape.emitter.context import RenderContext
    from sharpshape.ir.graph import Graph

logger: SharpShapeLogger = get_logger(__name__)

USINGS: tuple[str, ...] = (
    "using System;",
    "using System.Net;",
    "using System.Collections.Generic;",
)
JSON_USINGS: tuple[str, ...] = ("using Newtonsoft.Json;",)


class CSharpRenderer:
    """Render IR graphs to C# source.

    Args:
        config (Config): Frozen configuration (namespace, indentation, newline, ...).
    """

    def __init__(self, config: Config) -> None:
        self.config = config

    def plan(self, graph: Graph) -> RenderContext:
        """Allocate every emitted name for ``graph``."""
        return plan_names(graph, self.config.effective_forbidden_names)

    def render(self, graph: Graph) -> str:
        """Return the complete C# source for ``graph``."""
        ctx = self.plan(graph)
        writer = SourceWriter(
            indent_unit=" " * self.config.indent_width,
            newline=self.config.newline.value,
        )
        if self.config.header_comment:
            self._emit_header(writer)

        with writer.block(f"namespace {self.config.namespace}"):
            writer.lines(USINGS)
            writer.blank()
            writer.lines(JSON_USINGS)
            writer.blank()
            writer.separated(self._body_emitters(writer, ctx))

        logger.info(
            "Rendered %d class(es) and %d union(s) into namespace %s",
            len(graph.classes),
            len(ctx.unions),
            self.config.namespace,
        )
        return writer.getvalue()

    def _emit_header(self, writer: SourceWriter) -> None:
        ns = self.config.namespace
        writer.lines(
            [
                "// To parse this JSON data, add NuGet 'Newtonsoft.Json' then do:",
                "//",
                f"//    using {ns};",
                "//",
                f"//    var data = {ns}.Convert.FromJson(jsonString);",
                "//",
            ]
        )

    def _body_emitters(self, writer: SourceWriter, ctx: RenderContext) -> list[Callable[[], None]]:
        emitters: list[Callable[[], None]] = [partial(emit_convert, writer, ctx)]
        if ctx.has_unions:
            emitters.append(partial(emit_converter, writer, ctx))
        emitters.extend(partial(emit_class, writer, ctx, cls) for cls in ctx.graph.iter_classes())
        emitters.extend(partial(emit_union, writer, ctx, union) for union in ctx.unions)
        return emitters
