# topmark:header:start
#
#   project      : BoxLog
#   file         : options.py
#   file_relpath : src/boxlog/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI options for the BoxLog CLI.

This module centralizes reusable options (verbosity, color, rendering) and
their resolution logic, so commands and the group stay thin.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from boxlog.cli.errors import BoxlogUsageError
from boxlog.constants import DEFAULT_BORDER
from boxlog.rendering.color import ColorMode

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from ``-v`` / ``-q`` counts.

    Args:
        verbose_count: Number of times ``-v`` is passed.
        quiet_count: Number of times ``-q`` is passed.

    Returns:
        ``verbose_count`` (0 = terse), or ``-1`` when quiet.

    Raises:
        BoxlogUsageError: If both verbose and quiet flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise BoxlogUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return verbose_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` counting options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress non-essential output.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` (auto, always, never) and ``--no-color`` to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_render_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--border`` and ``--config`` to a rendering command."""
    f = click.option(
        "--border",
        "border",
        type=str,
        default=None,
        help=(
            f"Border set name (default: config value, else '{DEFAULT_BORDER}'). "
            "See 'boxlog borders'."
        ),
    )(f)
    f = click.option(
        "--config",
        "config_path",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Explicit BoxLog config file (TOML), merged over discovered ones.",
    )(f)
    return f
