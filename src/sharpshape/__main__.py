# topmark:header:start
#
#   project      : SharpShape
#   file         : __main__.py
#   file_relpath : src/sharpshape/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running SharpShape via ``python -m sharpshape``.

It delegates directly to :func:`sharpshape.cli.main.cli`, the same entry point
as the ``sharpshape`` console script.

Examples:
    Render C# for an IR document::

        python -m sharpshape render shapes.json
"""

from __future__ import annotations

from sharpshape.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
