# topmark:header:start
#
#   project      : SharpShape
#   file         : config.py
#   file_relpath : src/sharpshape/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SharpShape `config` command.

Prints the effective configuration (defaults merged with config files) as TOML.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from sharpshape.cli.config_resolver import resolve_config
from sharpshape.cli.options import config_file_option
from sharpshape.config.io import to_toml

if TYPE_CHECKING:
    from pathlib import Path

    from sharpshape.cli.console import ClickConsole


@click.command(
    name="config",
    help="Show the effective configuration as TOML.",
)
@config_file_option
@click.pass_context
def config_command(ctx: click.Context, *, config_path: Path | None) -> None:
    """Show the effective configuration as TOML.

    Args:
        ctx (click.Context): Click context carrying the console.
        config_path (Path | None): Extra TOML config file.
    """
    console: ClickConsole = ctx.obj["console"]
    config = resolve_config(config_path=config_path)
    for source in config.config_files:
        console.print(f"# source: {source}")
    console.print(to_toml(config.to_toml_dict()), nl=False)
