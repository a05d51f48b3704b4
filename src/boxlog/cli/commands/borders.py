# topmark:header:start
#
#   project      : BoxLog
#   file         : borders.py
#   file_relpath : src/boxlog/cli/commands/borders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BoxLog `borders` command.

Lists the registered border sets, each with a small preview table.
"""

from __future__ import annotations

from typing import Final

import click

from boxlog.cli.cmd_common import get_console, get_effective_verbosity
from boxlog.config.model import RenderOptions
from boxlog.rendering.borders import border_names
from boxlog.rendering.table import build_table

PREVIEW_COLUMNS: Final[dict[str, list[str]]] = {"foo": ["bar"], "baz": ["qux"]}


@click.command(
    name="borders",
    help="List the available border sets with a preview.",
)
@click.option(
    "--names-only",
    is_flag=True,
    default=False,
    help="Print the set names only, one per line.",
)
def borders_command(*, names_only: bool = False) -> None:
    """List the border sets.

    Args:
        names_only (bool): Skip the previews.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    if names_only or get_effective_verbosity(ctx) < 0:
        for name in border_names():
            console.print(name)
        return

    ansi = bool(ctx.obj.get("color_enabled", False))
    for name in border_names():
        console.print(console.styled(name, bold=True))
        console.print(build_table(PREVIEW_COLUMNS, RenderOptions(border=name, ansi=ansi)))
        console.print()
