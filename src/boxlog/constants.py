# topmark:header:start
#
#   project      : BoxLog
#   file         : constants.py
#   file_relpath : src/boxlog/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BoxLog Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    BOXLOG_VERSION: str = get_version("boxlog")
except PackageNotFoundError:  # running from a source checkout
    BOXLOG_VERSION = "0.0.0"

ENV_LOG_LEVEL: str = "BOXLOG_LOG_LEVEL"

# Config discovery: a dedicated file, or a [tool.boxlog] table in pyproject.toml
CONFIG_FILE_NAME: str = "boxlog.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_SECTION: str = "tool.boxlog"

DEFAULT_BORDER: str = "light"
DEFAULT_LINE_SEPARATOR: str = "\n"

ANSI_RESET: str = "\x1b[0m"
