# topmark:header:start
#
#   project      : BoxLog
#   file         : ansi.py
#   file_relpath : src/boxlog/rendering/ansi.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ANSI SGR (Select Graphic Rendition) style specs.

A *style spec* is a space-separated list of tokens, resolved left to right into
a single escape prefix:

- named styles: ``bold``, ``dim``, ``red``, ``bright-cyan``, ``bg-blue``, ``reset-bold``...
- truecolor foreground: ``#RGB``, ``#RRGGBB``, ``rgb:#RRGGBB``, ``rgb:R,G,B``, ``R,G,B``
- truecolor background: ``bg:#RRGGBB``, ``bg:R,G,B``, ``bg-rgb:R,G,B``, ``bg-rgb:#RRGGBB``
- 8-bit palette: ``rgb:N`` (foreground), ``bg-rgb:N`` (background), ``0 <= N <= 255``
- raw escape sequences (tokens starting with ``ESC``) pass through verbatim.

Example:
    ```python
    wrap("hello", "dim bright-yellow")  # '\\x1b[2m\\x1b[93mhello\\x1b[0m'
    wrap("hello", "bg:#00FF00")         # '\\x1b[48;2;0;255;0mhello\\x1b[0m'
    ```

The codes are resolved from a fixed table rather than from terminal capability
detection, so rendered output is byte-identical across environments. Whether to
emit color at all is decided by the caller (see `boxlog.rendering.color`).
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Final

from boxlog.config.logging import get_logger
from boxlog.constants import ANSI_RESET
from boxlog.core.errors import InvalidHexColorError

logger = get_logger(__name__)

ESC: Final[str] = "\x1b"

SGR_CODES: Final[dict[str, str]] = {
    "reset": "\x1b[0m",
    "bold": "\x1b[1m",
    "dim": "\x1b[2m",
    "italic": "\x1b[3m",
    "underline": "\x1b[4m",
    "blink": "\x1b[5m",
    "inverse": "\x1b[7m",
    "hidden": "\x1b[8m",
    "strikethrough": "\x1b[9m",
    "reset-bold": "\x1b[22m",
    "reset-dim": "\x1b[22m",
    "reset-weight": "\x1b[22m",
    "reset-italic": "\x1b[23m",
    "reset-underline": "\x1b[24m",
    "reset-blink": "\x1b[25m",
    "reset-inverse": "\x1b[27m",
    "reset-hidden": "\x1b[28m",
    "reset-strikethrough": "\x1b[29m",
    "black": "\x1b[30m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "magenta": "\x1b[35m",
    "cyan": "\x1b[36m",
    "white": "\x1b[37m",
    "bright-black": "\x1b[90m",
    "bright-red": "\x1b[91m",
    "bright-green": "\x1b[92m",
    "bright-yellow": "\x1b[93m",
    "bright-blue": "\x1b[94m",
    "bright-magenta": "\x1b[95m",
    "bright-cyan": "\x1b[96m",
    "bright-white": "\x1b[97m",
    "reset-color": "\x1b[39m",
    "bg-black": "\x1b[40m",
    "bg-red": "\x1b[41m",
    "bg-green": "\x1b[42m",
    "bg-yellow": "\x1b[43m",
    "bg-blue": "\x1b[44m",
    "bg-magenta": "\x1b[45m",
    "bg-cyan": "\x1b[46m",
    "bg-white": "\x1b[47m",
    "bg-bright-black": "\x1b[100m",
    "bg-bright-red": "\x1b[101m",
    "bg-bright-green": "\x1b[102m",
    "bg-bright-yellow": "\x1b[103m",
    "bg-bright-blue": "\x1b[104m",
    "bg-bright-magenta": "\x1b[105m",
    "bg-bright-cyan": "\x1b[106m",
    "bg-bright-white": "\x1b[107m",
    "bg-reset": "\x1b[49m",
    "reset-bg": "\x1b[49m",
}

# Prefix -> SGR selector (38 = foreground, 48 = background)
_COLOR_PREFIXES: Final[tuple[tuple[str, int], ...]] = (
    ("bg-rgb:", 48),
    ("bg:", 48),
    ("rgb:", 38),
)

_HEX6_RE: Final[re.Pattern[str]] = re.compile(r"^#?([0-9a-f]{6})$", re.IGNORECASE)
_HEX3_RE: Final[re.Pattern[str]] = re.compile(r"^#?([0-9a-f]{3})$", re.IGNORECASE)
_TRIPLE_RE: Final[re.Pattern[str]] = re.compile(r"^(\d{1,3}),(\d{1,3}),(\d{1,3})$")
_PALETTE_RE: Final[re.Pattern[str]] = re.compile(r"^\d{1,3}$")

ANSI_ESCAPE_RE: Final[re.Pattern[str]] = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    """Convert a hex color string to an RGB triple, case insensitive.

    Args:
        value (str): 3 or 6 hexadecimal digits, with or without a leading ``#``.

    Returns:
        tuple[int, int, int]: The ``(red, green, blue)`` components.

    Raises:
        InvalidHexColorError: If ``value`` is not a string of 3 or 6 hex digits.
    """
    if not isinstance(value, str):
        raise InvalidHexColorError(f"Hex color must be a string, got {type(value).__name__}")

    match = _HEX6_RE.match(value)
    if match:
        digits = match.group(1)
        return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)

    match = _HEX3_RE.match(value)
    if match:
        r, g, b = (int(ch * 2, 16) for ch in match.group(1))
        return r, g, b

    raise InvalidHexColorError(
        f'Invalid hex color: "{value}" (size must be 3 or 6 hex digits, 0-f case insensitive)'
    )


def _rgb_code(selector: int, r: int, g: int, b: int) -> str:
    return f"{ESC}[{selector};2;{r};{g};{b}m"


def _color_code(selector: int, body: str) -> str | None:
    """Resolve the color part of a prefixed token (after ``rgb:``/``bg:``)."""
    if body.startswith("#"):
        return _rgb_code(selector, *hex_to_rgb(body))

    triple = _TRIPLE_RE.match(body)
    if triple:
        r, g, b = (min(int(part), 255) for part in triple.groups())
        return _rgb_code(selector, r, g, b)

    if _PALETTE_RE.match(body) and int(body) <= 255:
        return f"{ESC}[{selector};5;{int(body)}m"

    if _HEX6_RE.match(body) or _HEX3_RE.match(body):
        return _rgb_code(selector, *hex_to_rgb(body))

    return None


def resolve_token(token: str) -> str:
    """Resolve a single style token into its escape sequence.

    Args:
        token (str): One token of a style spec.

    Returns:
        str: The escape sequence, or ``""`` if the token is not recognized.

    Raises:
        InvalidHexColorError: If the token carries a malformed ``#`` hex color.
    """
    if token.startswith(ESC):
        return token

    named = SGR_CODES.get(token.lower())
    if named is not None:
        return named

    for prefix, selector in _COLOR_PREFIXES:
        if token.startswith(prefix):
            code = _color_code(selector, token[len(prefix) :])
            if code is not None:
                return code
            break
    else:
        if token.startswith("#"):
            return _rgb_code(38, *hex_to_rgb(token))
        triple = _TRIPLE_RE.match(token)
        if triple:
            r, g, b = (min(int(part), 255) for part in triple.groups())
            return _rgb_code(38, r, g, b)

    logger.debug("Ignoring unknown ANSI style token: %r", token)
    return ""


@lru_cache(maxsize=256)
def resolve_style(spec: str | None) -> str:
    """Resolve a space-separated style spec into a concatenated escape prefix.

    Args:
        spec (str | None): The style spec; ``None`` or blank resolves to ``""``.

    Returns:
        str: The escape prefix (possibly empty).
    """
    if not spec:
        return ""
    return "".join(resolve_token(token) for token in spec.split())


def wrap(text: str, spec: str | None) -> str:
    """Wrap ``text`` with the start codes of ``spec`` and a trailing reset.

    Empty text and specs that resolve to nothing return ``text`` unchanged, so
    wrapping never changes the visible width of the output.

    Args:
        text (str): Text to decorate.
        spec (str | None): Style spec (see module docstring).

    Returns:
        str: The decorated text.
    """
    if not text:
        return text
    start = resolve_style(spec)
    if not start:
        return text
    return f"{start}{text}{ANSI_RESET}"


def strip_ansi(text: str) -> str:
    """Remove ANSI CSI escape sequences from ``text``."""
    return ANSI_ESCAPE_RE.sub("", text)


def visible_length(text: str) -> int:
    """Return the display width of ``text`` under the fixed-width glyph model."""
    return len(strip_ansi(text))
