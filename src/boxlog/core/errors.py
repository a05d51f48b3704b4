# topmark:header:start
#
#   project      : BoxLog
#   file         : errors.py
#   file_relpath : src/boxlog/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Error codes and exception types for BoxLog.

Every error raised by the library carries a stable `ErrorCode` so callers can
pattern-match on ``exc.code`` instead of parsing messages. The exception classes
also derive from the closest builtin (``ValueError``, ``LookupError``) so plain
``except ValueError`` handlers keep working.

Unknown identifiers follow a per-feature policy: an unknown border name falls
back to the default border set (no error), while an unknown filter name is an
error (`UnknownFilterError`).
"""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Stable identifiers attached to BoxLog exceptions.

    Attributes:
        TABLE_EMPTY: A table was requested without any column.
        TABLE_ROW_LENGTH_MISMATCH: Table columns do not share the same row count.
        INVALID_HEX_COLOR: A style spec contains a malformed hex color.
        FILTER_UNKNOWN: A string filter was requested by a name that is not registered.
    """

    TABLE_EMPTY = "E_TABLE_EMPTY"
    TABLE_ROW_LENGTH_MISMATCH = "E_TABLE_ROW_LENGTH_MISMATCH"
    INVALID_HEX_COLOR = "E_LOG_INVALID_HEX_COLOR"
    FILTER_UNKNOWN = "E_LOG_FILTER_UNKNOWN"


class BoxlogError(Exception):
    """Base class for all BoxLog errors.

    Args:
        message (str): Human-readable error message.
        code (ErrorCode): Stable error identifier.

    Attributes:
        code (ErrorCode): Stable error identifier.
    """

    code: ErrorCode

    def __init__(self, message: str, code: ErrorCode) -> None:
        super().__init__(message)
        self.code = code


class TableValidationError(BoxlogError, ValueError):
    """Table input rejected before rendering (no columns, or unequal column lengths)."""


class InvalidHexColorError(BoxlogError, ValueError):
    """A hex color is not made of 3 or 6 hexadecimal digits."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorCode.INVALID_HEX_COLOR)


class UnknownFilterError(BoxlogError, LookupError):
    """A string filter name is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown filter: {name!r}", ErrorCode.FILTER_UNKNOWN)
        self.name = name
