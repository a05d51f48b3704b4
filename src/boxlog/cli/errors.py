# topmark:header:start
#
#   project      : BoxLog
#   file         : errors.py
#   file_relpath : src/boxlog/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the BoxLog CLI.

Each exception carries the `ExitCode` the process terminates with. Errors are
displayed through the project console when one is registered on the Click
context, and through Click's default error display otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from boxlog.cli.exit_codes import ExitCode


class BoxlogCliError(click.ClickException):
    """Base class for all BoxLog CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        console = ctx.obj.get("console") if ctx is not None and isinstance(ctx.obj, dict) else None
        if console is None:
            super().show(file)
            return
        console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))


class BoxlogUsageError(BoxlogCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class BoxlogDataError(BoxlogCliError):
    """Error for input that cannot be parsed or rendered."""

    exit_code = ExitCode.DATA_ERROR


class BoxlogFileNotFoundError(BoxlogCliError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class BoxlogIOError(BoxlogCliError):
    """Error for I/O failures while reading input."""

    exit_code = ExitCode.IO_ERROR


class BoxlogConfigError(BoxlogCliError):
    """Error for missing or invalid config files."""

    exit_code = ExitCode.CONFIG_ERROR
