# topmark:header:start
#
#   project      : BoxLog
#   file         : exit_codes.py
#   file_relpath : src/boxlog/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the BoxLog CLI.

BoxLog aligns with the BSD `sysexits` convention so that scripts can tell a bad
invocation from bad input or a broken config file.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the BoxLog CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        DATA_ERROR: Input that cannot be parsed or rendered (invalid JSON/TOML,
            table validation errors, undecodable text). Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading the input. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Missing or invalid config file. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
