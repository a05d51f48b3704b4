# topmark:header:start
#
#   project      : BoxLog
#   file         : __init__.py
#   file_relpath : src/boxlog/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the ``boxlog`` CLI."""
