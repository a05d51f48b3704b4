# topmark:header:start
#
#   project      : BoxLog
#   file         : inspector.py
#   file_relpath : src/boxlog/rendering/inspector.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render a single opaque value into display text.

The inspector is the terminal fallback of both renderers: whatever the tree or
table code does not break down further ends up here. Strings are returned
as-is, numbers and booleans use their ``str`` form, and everything else is
pretty-printed with `pprint`.
"""

from __future__ import annotations

import math
import pprint
import re
from numbers import Number
from typing import Final

from boxlog.rendering.ansi import wrap

# Type -> style, loosely following the palette of interactive inspectors
INSPECT_STYLES: Final[dict[str, str]] = {
    "number": "yellow",
    "bool": "yellow",
    "none": "bold",
    "str": "green",
    "object": "cyan",
}

PPRINT_WIDTH: Final[int] = 80

# Plain number literals only: no "_" separators and no "inf" or "nan" spellings
NUMBER_STRING_RE: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
    r"|0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+",
    re.ASCII,
)


def is_numeric(value: object) -> bool:
    """Return True if ``value`` reads as a number.

    Booleans and ``None`` never count. Real numbers count unless they are NaN.
    Strings count when, once stripped, they are a plain number literal, so
    ``"42"``, ``" 1e10 "`` and ``"Infinity"`` are numeric while ``""``, ``"true"``,
    ``"12abc"``, ``"1_000"`` and ``"inf"`` are not.

    Args:
        value (object): The raw value.

    Returns:
        bool: Whether the value is numeric.
    """
    if value is None or isinstance(value, bool):
        return False
    if isinstance(value, Number):
        try:
            return not math.isnan(value)  # type: ignore[arg-type]
        except TypeError:
            # complex and other non-real numbers
            return False
    if isinstance(value, str):
        return NUMBER_STRING_RE.fullmatch(value.strip()) is not None
    return False


def _kind(value: object) -> str:
    if value is None:
        return "none"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, Number):
        return "number"
    if isinstance(value, str):
        return "str"
    return "object"


def inspect_value(value: object, colorize: bool = False) -> str:
    """Return the display text of ``value``.

    Args:
        value (object): Any value.
        colorize (bool): Wrap the text in a type-dependent ANSI style.

    Returns:
        str: The display text.
    """
    kind = _kind(value)
    if kind == "str":
        text = str(value)
    elif kind == "object":
        text = pprint.pformat(value, width=PPRINT_WIDTH, sort_dicts=False)
    else:
        text = str(value)

    if not colorize:
        return text
    return "\n".join(wrap(line, INSPECT_STYLES[kind]) for line in text.split("\n"))
