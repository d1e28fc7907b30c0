# topmark:header:start
#
#   project      : SharpShape
#   file         : __init__.py
#   file_relpath : src/sharpshape/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SharpShape CLI subcommands."""
