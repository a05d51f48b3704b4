# topmark:header:start
#
#   project      : BoxLog
#   file         : cmd_common.py
#   file_relpath : src/boxlog/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by the rendering commands (``tree``, ``table``)."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click
import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from boxlog.cli.errors import BoxlogConfigError
from boxlog.config.logging import get_logger
from boxlog.config.model import load_config
from boxlog.rendering.borders import BORDERS

if TYPE_CHECKING:
    from boxlog.cli.console import ClickConsole
    from boxlog.config.model import RenderOptions

logger = get_logger(__name__)


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console registered on the context by the group callback."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (0 = terse, -1 = quiet)."""
    return int(ctx.obj.get("verbosity_level", 0))


def check_config_file(config_path: Path) -> None:
    """Fail early when an explicit config file is missing or not valid TOML.

    Raises:
        BoxlogConfigError: If the file cannot be read or parsed.
    """
    try:
        tomlkit.parse(config_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise BoxlogConfigError(f"Cannot read config file {config_path}: {exc}") from exc
    except TomlkitParseError as exc:
        raise BoxlogConfigError(f"Invalid config file {config_path}: {exc}") from exc


def build_render_options(
    ctx: click.Context,
    *,
    config_path: Path | None,
    border: str | None,
) -> RenderOptions:
    """Resolve render options: config files, then CLI flags.

    Color follows the group-level ``--color`` / ``--no-color`` decision.
    """
    if config_path is not None:
        check_config_file(config_path)
    config = load_config(config_path, cwd=Path.cwd())
    if border is not None and border not in BORDERS:
        get_console(ctx).warn(f"Unknown border set '{border}', using the default.")
    options = config.render_options(ansi=bool(ctx.obj.get("color_enabled", False)))
    logger.debug("Render options: %s", options)
    return options.with_overrides(border=border)
