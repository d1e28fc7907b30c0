# topmark:header:start
#
#   project      : SharpShape
#   file         : __init__.py
#   file_relpath : src/sharpshape/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration loading (TOML), logging setup and the frozen `Config` snapshot."""

from __future__ import annotations

from sharpshape.config.model import Config, MutableConfig, Newline

__all__ = ["Config", "MutableConfig", "Newline"]
