# topmark:header:start
#
#   project      : BoxLog
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the BoxLog test suite.

Sets up global fixtures and the internal logging level for test runs.

Notes:
    Tests should respect the immutable/mutable configuration split:

    - Build configs with `boxlog.config.MutableLogConfig` (mutable), then
      `freeze()` them into a `boxlog.config.LogConfig`.
    - Do **not** mutate a frozen `LogConfig`; use `thaw()` → edit → `freeze()`.
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING, Any

import pytest

from boxlog.config import logging
from boxlog.log import Log

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the developer's shell cannot change log levels or color decisions.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture used to manipulate environment variables.
    """
    for name in ("BOXLOG_LOG_LEVEL", "FORCE_COLOR", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_global_observers() -> None:
    """Drop global `Log` observers registered by a previous test."""
    Log.remove_all_listeners()


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Configure TRACE-level internal logging for the test suite.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test from an empty working directory (no config file discovery).

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture to change the working directory.

    Returns:
        Path: The isolated working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


class Streams:
    """Pair of in-memory output streams for a `Log` under test."""

    def __init__(self) -> None:
        self.out = io.StringIO()
        self.err = io.StringIO()

    @property
    def out_lines(self) -> list[str]:
        return self.out.getvalue().splitlines()

    @property
    def err_lines(self) -> list[str]:
        return self.err.getvalue().splitlines()


@pytest.fixture
def streams() -> Streams:
    """Return fresh in-memory output streams."""
    return Streams()


def make_plain_log(streams: Streams, **overrides: Any) -> Log:
    """Return a `Log` writing to ``streams`` with label, divider and ANSI disabled.

    Args:
        streams (Streams): Output streams.
        **overrides (Any): Additional `LogConfig` overrides.

    Returns:
        Log: The logger under test.
    """
    options: dict[str, Any] = {"label": "", "divider": "", "ansi": False}
    options.update(overrides)
    return Log(out=streams.out, err=streams.err, **options)
