# topmark:header:start
#
#   project      : SharpShape
#   file         : main.py
#   file_relpath : src/sharpshape/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SharpShape Click CLI.

Group-level options (verbosity) are initialized once and placed into
``ctx.obj``; subcommands read the console and log level from there.
"""

from __future__ import annotations

import sys

import click

from sharpshape.cli.commands.config import config_command
from sharpshape.cli.commands.render import render_command
from sharpshape.cli.commands.version import version_command
from sharpshape.cli.console import ClickConsole
from sharpshape.cli.options import common_verbose_options, resolve_verbosity
from sharpshape.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, verbose: int, quiet: int) -> None:
    """Initialize shared state (log level and console) on the Click context.

    The environment variable ``SHARPSHAPE_LOG_LEVEL`` wins over ``-v``/``-q``.
    """
    ctx.obj = ctx.obj or {}
    level = resolve_env_log_level()
    if level is None:
        level = resolve_verbosity(verbose, quiet)
    ctx.obj["log_level"] = level
    setup_logging(level=level)
    enable_color = ctx.color if ctx.color is not None else sys.stdout.isatty()
    ctx.obj.setdefault("console", ClickConsole(enable_color=enable_color))


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="SharpShape CLI: render C# types and JSON converters from IR documents.",
)
@common_verbose_options
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int) -> None:
    """Entry point for the SharpShape CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet)
    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print("Hint: use 'sharpshape render IR_FILE' to generate C# code.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(render_command)

cli.add_command(config_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
