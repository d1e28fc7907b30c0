# topmark:header:start
#
#   project      : SharpShape
#   file         : version.py
#   file_relpath : src/sharpshape/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SharpShape `version` command.

Prints the current SharpShape version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from sharpshape.constants import SHARPSHAPE_VERSION

if TYPE_CHECKING:
    from sharpshape.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of SharpShape.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print the version as a JSON object.",
)
@click.pass_context
def version_command(ctx: click.Context, *, as_json: bool = False) -> None:
    """Show the current version of SharpShape.

    Args:
        ctx (click.Context): Click context carrying the console.
        as_json (bool): Print ``{"version": ...}`` instead of plain text.
    """
    console: ClickConsole = ctx.obj["console"]
    if as_json:
        console.print(json.dumps({"version": SHARPSHAPE_VERSION}))
    else:
        console.print(console.styled(SHARPSHAPE_VERSION, bold=True))
