# topmark:header:start
#
#   project      : SharpShape
#   file         : errors.py
#   file_relpath : src/sharpshape/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the SharpShape CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Core errors are translated with `from_core_error`.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from sharpshape.cli.exit_codes import ExitCode
from sharpshape.core.errors import (
    ConfigError,
    IRFormatError,
    RegistryFrozenError,
    SharpShapeError,
    UnknownClassError,
    UnregisteredNameError,
)


class SharpShapeCliError(click.ClickException):
    """Base class for all SharpShape CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class SharpShapeUsageError(SharpShapeCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class SharpShapeInputError(SharpShapeCliError):
    """Error for malformed IR documents."""

    exit_code = ExitCode.INPUT_ERROR


class SharpShapeFileNotFoundError(SharpShapeCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class SharpShapeIOError(SharpShapeCliError):
    """Error for I/O errors reading input or writing output."""

    exit_code = ExitCode.IO_ERROR


class SharpShapeConfigError(SharpShapeCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class SharpShapeInternalError(SharpShapeCliError):
    """Error for emitter invariant violations (a bug in SharpShape)."""

    exit_code = ExitCode.INTERNAL_ERROR


def from_core_error(exc: SharpShapeError) -> SharpShapeCliError:
    """Translate a core error into the matching CLI error."""
    if isinstance(exc, ConfigError):
        return SharpShapeConfigError(str(exc))
    if isinstance(exc, (IRFormatError, UnknownClassError)):
        return SharpShapeInputError(str(exc))
    if isinstance(exc, (UnregisteredNameError, RegistryFrozenError)):
        return SharpShapeInternalError(f"Internal error: {exc}")
    return SharpShapeCliError(str(exc))
