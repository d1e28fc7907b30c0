# topmark:header:start
#
#   project      : SharpShape
#   file         : api.py
#   file_relpath : src/sharpshape/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public API for rendering C# from IR graphs.

Examples:
    ```python
    from sharpshape.api import render_csharp
    from sharpshape.ir import INTEGER, STRING, ClassDefinition, ClassType, Graph, make_union

    graph = Graph(
        classes={
            "TopLevel": ClassDefinition(
                ref="TopLevel",
                names=("TopLevel",),
                properties={"id": make_union(INTEGER, STRING)},
            )
        },
        top_level=ClassType("TopLevel"),
    )
    print(render_csharp(graph))
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sharpshape.config.model import Config
from sharpshape.emitter.context import plan_names
from sharpshape.emitter.dispatch import UnionDecoder
from sharpshape.emitter.renderer import CSharpRenderer
from sharpshape.ir.io import load_graph

if TYPE_CHECKING:
    from pathlib import Path

    from sharpshape.ir.graph import Graph
    from sharpshape.ir.types import UnionType


def render_csharp(graph: Graph, config: Config | None = None) -> str:
    """Render ``graph`` to C# source.

    Args:
        graph (Graph): The IR graph.
        config (Config | None): Frozen configuration; defaults apply when None.

    Returns:
        str: The generated source text.
    """
    return CSharpRenderer(config or Config()).render(graph)


def render_file(path: Path, config: Config | None = None) -> str:
    """Load an IR document from ``path`` and render it to C# source.

    Raises:
        OSError: If the file cannot be read.
        IRFormatError: If the document is malformed.
    """
    return render_csharp(load_graph(path), config)


def union_decoder(graph: Graph, union: UnionType, config: Config | None = None) -> UnionDecoder:
    """Return a reference decoder for one generated union of ``graph``.

    The decoder uses the names the renderer would emit for the same graph and config.
    """
    cfg = config or Config()
    return UnionDecoder(plan_names(graph, cfg.effective_forbidden_names), union)
