# topmark:header:start
#
#   project      : BoxLog
#   file         : color.py
#   file_relpath : src/boxlog/rendering/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-independent color decision helpers for BoxLog.

Both the `boxlog.log.Log` facade (when ``ansi`` is left unset) and the CLI
``--color`` option end up here to decide whether ANSI styles are emitted.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import TYPE_CHECKING, TextIO

from boxlog.config.logging import get_logger

if TYPE_CHECKING:
    from boxlog.config.logging import BoxlogLogger


logger: BoxlogLogger = get_logger(__name__)


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when appropriate (typically when the stream is a TTY).
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def stream_isatty(stream: TextIO | None) -> bool:
    """Return whether ``stream`` is an interactive terminal (``False`` on error)."""
    if stream is None:
        return False
    try:
        return bool(stream.isatty())
    except (AttributeError, OSError, ValueError):
        return False


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **Override**: ``ALWAYS`` → True; ``NEVER`` → False.
        2. **Environment**:
            - ``FORCE_COLOR`` (set and not equal to ``"0"``) → True
            - ``NO_COLOR`` (set to any value) → False
        3. **Auto**: the TTY status of stdout.

    Args:
        color_mode_override: Parsed `ColorMode`; ``None`` means "not provided".
        stdout_isatty: Optional override for TTY detection. When ``None``, the
            function checks ``sys.stdout``.

    Returns:
        True if ANSI color should be enabled; False otherwise.
    """
    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stdout_isatty is None:
        stdout_isatty = stream_isatty(sys.stdout)
    logger.trace("Color auto-detection: isatty=%s", stdout_isatty)
    return bool(stdout_isatty)
