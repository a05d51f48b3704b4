# topmark:header:start
#
#   project      : BoxLog
#   file         : __init__.py
#   file_relpath : src/boxlog/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for BoxLog.

Re-exports the configuration model (`LogConfig`, `MutableLogConfig`,
`RenderOptions`) so callers can write ``from boxlog.config import LogConfig``.
TOML loading lives in `boxlog.config.io`, internal diagnostics logging in
`boxlog.config.logging`.
"""

from __future__ import annotations

from boxlog.config.model import (
    LogConfig,
    MutableLogConfig,
    RenderOptions,
    default_log_config,
    load_config,
)

__all__ = [
    "LogConfig",
    "MutableLogConfig",
    "RenderOptions",
    "default_log_config",
    "load_config",
]
