# topmark:header:start
#
#   project      : BoxLog
#   file         : __init__.py
#   file_relpath : src/boxlog/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command-line interface of BoxLog."""
