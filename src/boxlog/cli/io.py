# topmark:header:start
#
#   project      : BoxLog
#   file         : io.py
#   file_relpath : src/boxlog/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input loading for the rendering commands.

A document is read from a path or, for ``-``, from STDIN. ``.toml`` files are
parsed with `tomlkit`; everything else (including STDIN) is parsed as JSON.
Failures are reported as CLI errors carrying the matching exit code.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from boxlog.cli.errors import BoxlogDataError, BoxlogFileNotFoundError, BoxlogIOError
from boxlog.config.logging import get_logger

logger = get_logger(__name__)

STDIN_SENTINEL = "-"


def read_text(source: str) -> str:
    """Return the text of ``source`` (a path, or ``-`` for STDIN).

    Raises:
        BoxlogFileNotFoundError: If the path does not exist.
        BoxlogIOError: If the file cannot be read.
        BoxlogDataError: If the file is not valid UTF-8.
    """
    if source == STDIN_SENTINEL:
        return sys.stdin.read()
    path = Path(source)
    if not path.exists():
        raise BoxlogFileNotFoundError(f"No such file: {source}")
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise BoxlogDataError(f"{source}: not valid UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        raise BoxlogIOError(f"{source}: {exc.strerror or exc}") from exc


def parse_document(text: str, *, toml: bool, origin: str = "<stdin>") -> Any:
    """Parse JSON or TOML text into plain Python values.

    Raises:
        BoxlogDataError: On parse errors.
    """
    if toml:
        try:
            return tomlkit.parse(text).unwrap()
        except TomlkitParseError as exc:
            raise BoxlogDataError(f"{origin}: invalid TOML: {exc}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise BoxlogDataError(f"{origin}: invalid JSON: {exc}") from exc


def load_document(source: str) -> Any:
    """Read and parse the document at ``source`` (a path, or ``-`` for STDIN)."""
    text = read_text(source)
    is_toml = source != STDIN_SENTINEL and Path(source).suffix.lower() == ".toml"
    origin = "<stdin>" if source == STDIN_SENTINEL else source
    logger.debug("Loading %s document from %s", "TOML" if is_toml else "JSON", origin)
    return parse_document(text, toml=is_toml, origin=origin)
