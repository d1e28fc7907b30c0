# topmark:header:start
#
#   project      : SharpShape
#   file         : render.py
#   file_relpath : src/sharpshape/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SharpShape `render` command.

Reads an IR document (a file path, or ``-`` for STDIN), renders it to C# and
writes the result to STDOUT or to ``--output``.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click

from sharpshape.api import render_csharp
from sharpshape.cli.config_resolver import resolve_config
from sharpshape.cli.errors import (
    SharpShapeFileNotFoundError,
    SharpShapeIOError,
    from_core_error,
)
from sharpshape.cli.options import config_file_option
from sharpshape.config.logging import get_logger
from sharpshape.config.model import MutableConfig, Newline
from sharpshape.core.errors import SharpShapeError
from sharpshape.ir.io import loads_graph

if TYPE_CHECKING:
    from sharpshape.cli.console import ClickConsole
    from sharpshape.config.logging import SharpShapeLogger

logger: SharpShapeLogger = get_logger(__name__)


def _read_input(ir_file: str) -> str:
    if ir_file == "-":
        return sys.stdin.read()
    path = Path(ir_file)
    if not path.exists():
        raise SharpShapeFileNotFoundError(f"IR document not found: {path}")
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SharpShapeIOError(f"Cannot read {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise SharpShapeIOError(f"{path} is not valid UTF-8: {exc}") from exc


@click.command(
    name="render",
    help="Render C# types and converters for an IR document (use '-' to read STDIN).",
)
@click.argument("ir_file", metavar="IR_FILE")
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    default=None,
    help="Write the generated source to this file instead of STDOUT.",
)
@click.option("--namespace", default=None, help="C# namespace of the generated code.")
@click.option(
    "--indent-width",
    type=click.IntRange(min=0),
    default=None,
    help="Spaces per indentation level.",
)
@click.option(
    "--newline",
    type=click.Choice([n.name.lower() for n in Newline]),
    default=None,
    help="Line terminator of the generated source.",
)
@click.option(
    "--header/--no-header",
    "header_comment",
    default=None,
    help="Emit (or omit) the usage comment at the top of the output.",
)
@config_file_option
@click.pass_context
def render_command(
    ctx: click.Context,
    *,
    ir_file: str,
    output: Path | None,
    namespace: str | None,
    indent_width: int | None,
    newline: str | None,
    header_comment: bool | None,
    config_path: Path | None,
) -> None:
    """Render C# source for an IR document.

    Args:
        ctx (click.Context): Click context carrying the console.
        ir_file (str): Path to the IR document, or ``-`` for STDIN.
        output (Path | None): Output file; STDOUT when None.
        namespace (str | None): Namespace override.
        indent_width (int | None): Indentation override.
        newline (str | None): Newline style override (``lf``/``crlf``).
        header_comment (bool | None): Header comment override.
        config_path (Path | None): Extra TOML config file.
    """
    console: ClickConsole = ctx.obj["console"]

    overrides = MutableConfig(
        namespace=namespace,
        indent_width=indent_width,
        newline=Newline.from_name(newline) if newline else None,
        header_comment=header_comment,
    )
    config = resolve_config(config_path=config_path, overrides=overrides)

    text = _read_input(ir_file)
    try:
        source = render_csharp(loads_graph(text), config)
    except SharpShapeError as exc:
        raise from_core_error(exc) from exc

    if output is None:
        console.print(source, nl=False)
        return
    try:
        # newline="" keeps the configured line terminators as rendered
        with output.open("w", encoding="utf-8", newline="") as fh:
            fh.write(source)
    except OSError as exc:
        raise SharpShapeIOError(f"Cannot write {output}: {exc}") from exc
    logger.info("Wrote %s", output)
