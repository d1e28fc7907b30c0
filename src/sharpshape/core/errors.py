# topmark:header:start
#
#   project      : SharpShape
#   file         : errors.py
#   file_relpath : src/sharpshape/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the SharpShape core.

Usage:
    The emitter never recovers from these: name legalization normalizes bad input
    silently, everything else is either a malformed input document or a programmer
    error inside the emitter. The CLI maps them to exit codes in
    `sharpshape.cli.errors`.
"""

from __future__ import annotations


class SharpShapeError(Exception):
    """Base class for all SharpShape core errors."""


class IRFormatError(SharpShapeError, ValueError):
    """Error for malformed IR documents.

    Attributes:
        location (str): JSON-pointer-like path to the offending node (``""`` for the root).
    """

    def __init__(self, message: str, *, location: str = "") -> None:
        self.location = location
        where = location or "/"
        super().__init__(f"{where}: {message}")


class UnknownClassError(SharpShapeError, KeyError):
    """Error when a class reference does not resolve to a class definition."""

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0]) if self.args else ""


class UnregisteredNameError(SharpShapeError, LookupError):
    """Error when a name is looked up that was never allocated.

    This signals a broken planning phase and aborts emission.
    """


class RegistryFrozenError(SharpShapeError):
    """Error when a name is allocated after the registry has been frozen."""


class UnionDecodeError(SharpShapeError):
    """Error when a JSON value cannot be converted to any union alternative.

    Attributes:
        union_name (str): Emitted name of the union that rejected the value.
    """

    def __init__(self, union_name: str) -> None:
        self.union_name = union_name
        super().__init__(f"Cannot convert {union_name}")


class ConfigError(SharpShapeError, ValueError):
    """Error for invalid configuration values."""
