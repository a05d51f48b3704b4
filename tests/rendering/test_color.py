# topmark:header:start
#
#   project      : BoxLog
#   file         : test_color.py
#   file_relpath : tests/rendering/test_color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the color decision helpers (`boxlog.rendering.color`)."""

from __future__ import annotations

import io

import pytest

from boxlog.rendering.color import ColorMode, resolve_color_mode, stream_isatty


class FakeTty(io.StringIO):
    def isatty(self) -> bool:
        return True


class BrokenStream(io.StringIO):
    def isatty(self) -> bool:
        raise ValueError("I/O operation on closed file")


def test_override_wins_over_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "1")
    assert resolve_color_mode(color_mode_override=ColorMode.ALWAYS, stdout_isatty=False) is True
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert resolve_color_mode(color_mode_override=ColorMode.NEVER, stdout_isatty=True) is False


def test_force_color_beats_no_color(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORCE_COLOR", "1")
    monkeypatch.setenv("NO_COLOR", "1")
    assert resolve_color_mode(color_mode_override=None, stdout_isatty=False) is True


def test_force_color_zero_is_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORCE_COLOR", "0")
    assert resolve_color_mode(color_mode_override=None, stdout_isatty=False) is False


def test_no_color_disables_on_tty(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "")
    assert resolve_color_mode(color_mode_override=ColorMode.AUTO, stdout_isatty=True) is False


@pytest.mark.parametrize("isatty", [True, False])
def test_auto_follows_tty(isatty: bool) -> None:
    assert resolve_color_mode(color_mode_override=None, stdout_isatty=isatty) is isatty


def test_stream_isatty() -> None:
    assert stream_isatty(FakeTty()) is True
    assert stream_isatty(io.StringIO()) is False
    assert stream_isatty(BrokenStream()) is False
    assert stream_isatty(None) is False
