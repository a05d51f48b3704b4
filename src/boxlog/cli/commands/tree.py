# topmark:header:start
#
#   project      : BoxLog
#   file         : tree.py
#   file_relpath : src/boxlog/cli/commands/tree.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BoxLog `tree` command.

Renders a JSON or TOML document as a box-drawn tree.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from boxlog.cli.cmd_common import build_render_options, get_console
from boxlog.cli.io import STDIN_SENTINEL, load_document
from boxlog.cli.options import common_render_options
from boxlog.rendering.tree import build_tree

if TYPE_CHECKING:
    from pathlib import Path


@click.command(
    name="tree",
    help="Render a JSON or TOML document as a tree. Reads STDIN when PATH is '-' or omitted.",
)
@click.argument("source", metavar="[PATH|-]", required=False, default=STDIN_SENTINEL)
@common_render_options
def tree_command(
    *,
    source: str,
    border: str | None,
    config_path: Path | None,
) -> None:
    """Render a document as a tree.

    Args:
        source (str): Input path, or ``-`` for STDIN.
        border (str | None): Border set override.
        config_path (Path | None): Explicit config file.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    options = build_render_options(ctx, config_path=config_path, border=border)
    document = load_document(source)
    console.print(build_tree(document, options))
