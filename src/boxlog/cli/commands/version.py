# topmark:header:start
#
#   project      : BoxLog
#   file         : version.py
#   file_relpath : src/boxlog/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BoxLog `version` command.

Prints the current BoxLog version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from boxlog.cli.cmd_common import get_console, get_effective_verbosity
from boxlog.constants import BOXLOG_VERSION


@click.command(
    name="version",
    help="Show the current version of BoxLog.",
)
def version_command() -> None:
    """Show the current version of BoxLog."""
    ctx = click.get_current_context()
    console = get_console(ctx)

    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled("BoxLog version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(BOXLOG_VERSION, bold=True)}")
    else:
        console.print(console.styled(BOXLOG_VERSION, bold=True))
