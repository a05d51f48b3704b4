# topmark:header:start
#
#   project      : BoxLog
#   file         : table.py
#   file_relpath : src/boxlog/cli/commands/table.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BoxLog `table` command.

Renders a JSON or TOML mapping as a bordered table. The document is either
column-oriented (``{"name": ["a", "b"], "size": [1, 2]}``) or a flat mapping,
which renders as a single row.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from boxlog.cli.cmd_common import build_render_options, get_console
from boxlog.cli.errors import BoxlogDataError
from boxlog.cli.io import STDIN_SENTINEL, load_document
from boxlog.cli.options import common_render_options
from boxlog.core.errors import TableValidationError
from boxlog.core.shapes import is_mapping
from boxlog.rendering.table import build_table

if TYPE_CHECKING:
    from pathlib import Path


@click.command(
    name="table",
    help="Render a JSON or TOML mapping as a table. Reads STDIN when PATH is '-' or omitted.",
)
@click.argument("source", metavar="[PATH|-]", required=False, default=STDIN_SENTINEL)
@common_render_options
def table_command(
    *,
    source: str,
    border: str | None,
    config_path: Path | None,
) -> None:
    """Render a document as a table.

    Args:
        source (str): Input path, or ``-`` for STDIN.
        border (str | None): Border set override.
        config_path (Path | None): Explicit config file.

    Raises:
        BoxlogDataError: If the document is not a mapping or fails table validation.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    options = build_render_options(ctx, config_path=config_path, border=border)
    document = load_document(source)
    if not is_mapping(document):
        raise BoxlogDataError(
            f"A table needs a mapping of columns, got {type(document).__name__}"
        )
    try:
        rendered = build_table(document, options)
    except TableValidationError as exc:
        raise BoxlogDataError(f"{exc} [{exc.code.value}]") from exc
    console.print(rendered)
