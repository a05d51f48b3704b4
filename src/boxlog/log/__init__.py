# topmark:header:start
#
#   project      : BoxLog
#   file         : __init__.py
#   file_relpath : src/boxlog/log/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Labeled log lines (`Log`) with string filters and tree/table values."""

from __future__ import annotations

from boxlog.log.filters import FILTERS, apply_filters, resolve_filter
from boxlog.log.logger import Level, Log

__all__ = [
    "FILTERS",
    "Level",
    "Log",
    "apply_filters",
    "resolve_filter",
]
