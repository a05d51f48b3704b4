# topmark:header:start
#
#   project      : BoxLog
#   file         : __init__.py
#   file_relpath : src/boxlog/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BoxLog package.

BoxLog renders nested Python data as box-drawn trees and bordered tables, and
writes labeled, optionally colored log lines that embed them. It exposes a
small typed API and a ``boxlog`` CLI for JSON/TOML documents.
"""

from __future__ import annotations

from boxlog.constants import BOXLOG_VERSION
from boxlog.core.errors import BoxlogError, ErrorCode, TableValidationError
from boxlog.log import Log
from boxlog.rendering import render_table, render_tree

__version__ = BOXLOG_VERSION

__all__ = [
    "BoxlogError",
    "ErrorCode",
    "Log",
    "TableValidationError",
    "__version__",
    "render_table",
    "render_tree",
]
