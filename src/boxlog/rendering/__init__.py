# topmark:header:start
#
#   project      : BoxLog
#   file         : __init__.py
#   file_relpath : src/boxlog/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Text rendering: box-drawn trees, bordered tables, border sets and ANSI styles."""

from __future__ import annotations

from boxlog.rendering.api import render_table, render_tree
from boxlog.rendering.borders import BORDERS, BorderGlyphSet, border_names, resolve_border

__all__ = [
    "BORDERS",
    "BorderGlyphSet",
    "border_names",
    "render_table",
    "render_tree",
    "resolve_border",
]
