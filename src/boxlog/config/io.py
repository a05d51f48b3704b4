# topmark:header:start
#
#   project      : BoxLog
#   file         : io.py
#   file_relpath : src/boxlog/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load BoxLog configuration sources.

This module provides I/O helpers for reading BoxLog configuration from:
- the runtime defaults (defined in code, no I/O),
- on-disk TOML files (``boxlog.toml`` / ``[tool.boxlog]`` in ``pyproject.toml``).

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeGuard, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from boxlog.config.logging import get_logger
from boxlog.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_BORDER,
    DEFAULT_LINE_SEPARATOR,
    PYPROJECT_FILE_NAME,
    PYPROJECT_SECTION,
)

if TYPE_CHECKING:
    from pathlib import Path

    from boxlog.config.logging import BoxlogLogger

TomlTable = dict[str, Any]

logger: BoxlogLogger = get_logger(__name__)


def is_toml_table(obj: object) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[TomlTable]: ``True`` if ``obj`` is a ``dict[str, Any]``.
    """
    return isinstance(obj, dict)


def load_defaults_dict() -> TomlTable:
    """Return BoxLog's **runtime defaults** as a Python dict.

    This function performs **no I/O**. It is the base layer for config merging.

    Returns:
        A TOML-table-compatible dict containing the runtime defaults.

    Notes:
        The returned value is a new dict so callers can mutate it safely.
        ``ansi`` is absent on purpose: unset means "detect from the terminal".
    """
    return {
        "label": "[LOG]",
        "divider": " ⇢ ",
        "mute": False,
        "mute_info": False,
        "mute_warn": False,
        "mute_fail": False,
        "returns": False,
        "tree": False,
        "table": False,
        "filters": [],
        "border": DEFAULT_BORDER,
        "ansi_label": "dim bright-black",
        "ansi_text": "dim",
        "ansi_tree": "dim bright-black",
        "ansi_table": "dim bright-yellow",
        "ansi_header": "",
        "ansi_value": "",
        "line_separator": DEFAULT_LINE_SEPARATOR,
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (e.g., ``boxlog.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def get_section(data: Mapping[str, Any], dotted: str) -> TomlTable:
    """Return the nested table at ``dotted`` (e.g. ``"tool.boxlog"``), or ``{}``."""
    current: Any = data
    for part in dotted.split("."):
        if not is_toml_table(current):
            return {}
        current = current.get(part, {})
    return current if is_toml_table(current) else {}


def load_boxlog_table(path: Path) -> TomlTable:
    """Load the BoxLog table from a config file.

    ``pyproject.toml`` files contribute their ``[tool.boxlog]`` table; any
    other file is read as a whole.

    Args:
        path: Path of the TOML file.

    Returns:
        The BoxLog settings found in the file (possibly empty).
    """
    data = load_toml_dict(path)
    if path.name == PYPROJECT_FILE_NAME:
        return get_section(data, PYPROJECT_SECTION)
    return data


def discover_config_files(cwd: Path) -> list[Path]:
    """Return the config files found in ``cwd``, lowest precedence first.

    ``pyproject.toml`` (only when it has a ``[tool.boxlog]`` table) comes before
    ``boxlog.toml``, so the dedicated file wins when both exist.

    Args:
        cwd: Directory to look into.

    Returns:
        Existing config file paths.
    """
    found: list[Path] = []
    pyproject = cwd / PYPROJECT_FILE_NAME
    if pyproject.is_file() and load_boxlog_table(pyproject):
        found.append(pyproject)
    dedicated = cwd / CONFIG_FILE_NAME
    if dedicated.is_file():
        found.append(dedicated)
    logger.trace("Config files discovered in %s: %s", cwd, found)
    return found
