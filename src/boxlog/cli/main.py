# topmark:header:start
#
#   project      : BoxLog
#   file         : main.py
#   file_relpath : src/boxlog/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point of the ``boxlog`` CLI.

Group-level options (verbosity, color) are resolved once and stored in
``ctx.obj`` together with the console; subcommands read them from there.
"""

from __future__ import annotations

import click

from boxlog.cli.commands.borders import borders_command
from boxlog.cli.commands.table import table_command
from boxlog.cli.commands.tree import tree_command
from boxlog.cli.commands.version import version_command
from boxlog.cli.console import ClickConsole
from boxlog.cli.options import (
    common_color_options,
    common_verbose_options,
    resolve_verbosity,
)
from boxlog.config.logging import get_logger, resolve_env_log_level, setup_logging
from boxlog.rendering.color import ColorMode, resolve_color_mode

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (str | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal diagnostics are configured from the environment only
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_mode = ColorMode.NEVER if no_color else ColorMode(color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(color_mode_override=effective_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="BoxLog CLI: render JSON/TOML documents as box-drawn trees and tables.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the BoxLog CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'boxlog tree PATH' or 'boxlog table PATH' to render a document.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(tree_command)

cli.add_command(table_command)

cli.add_command(borders_command)

if __name__ == "__main__":
    cli()
