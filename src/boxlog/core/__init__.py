# topmark:header:start
#
#   project      : BoxLog
#   file         : __init__.py
#   file_relpath : src/boxlog/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across BoxLog.

The ``boxlog.core`` package provides small building blocks that are safe to
import from anywhere in the codebase (rendering, log facade, CLI, tests)
without pulling in terminal or color concerns.

Included modules:

- ``errors``
  Error codes and exception types raised by the renderers and the log facade.

- ``shapes``
  The closed set of value shapes (scalar, sequence, mapping) the renderers
  dispatch on.
"""

from __future__ import annotations
