# topmark:header:start
#
#   project      : BoxLog
#   file         : __init__.py
#   file_relpath : tests/log/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Test package."""
