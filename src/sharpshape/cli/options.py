# topmark:header:start
#
#   project      : SharpShape
#   file         : options.py
#   file_relpath : src/sharpshape/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared Click options and their resolution helpers."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

import click

from sharpshape.cli.errors import SharpShapeUsageError
from sharpshape.config.logging import TRACE_LEVEL

if TYPE_CHECKING:
    from collections.abc import Callable

F = TypeVar("F", bound="Callable[..., object]")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level from the ``-v``/``-q`` counts.

    Args:
        verbose_count (int): Number of times ``-v`` is passed.
        quiet_count (int): Number of times ``-q`` is passed.

    Returns:
        int: The logging level.

    Raises:
        SharpShapeUsageError: If both flags are used simultaneously.

    Behavior:
        One ``-v`` sets INFO, two set DEBUG, three or more set TRACE.
        One or more ``-q`` set ERROR. Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise SharpShapeUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count > 0:
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: F) -> F:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress diagnostics except errors.",
    )(f)
    return f


def config_file_option(f: F) -> F:
    """Add the ``--config`` option pointing to an extra TOML config file."""
    return click.option(
        "--config",
        "config_path",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Extra TOML config file, applied over pyproject.toml / sharpshape.toml.",
    )(f)
