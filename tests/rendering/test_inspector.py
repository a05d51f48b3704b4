# topmark:header:start
#
#   project      : BoxLog
#   file         : test_inspector.py
#   file_relpath : tests/rendering/test_inspector.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the scalar inspector (`boxlog.rendering.inspector`)."""

from __future__ import annotations

import pytest

from boxlog.rendering.inspector import inspect_value, is_numeric


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (1, True),
        (-2.5, True),
        (float("inf"), True),
        ("42", True),
        (" 1e10 ", True),
        ("-Infinity", True),
        ("0x1F", True),
        (".5", True),
        (float("nan"), False),
        ("nan", False),
        ("", False),
        ("12abc", False),
        ("1_000", False),
        ("inf", False),
        ("-0x1F", False),
        ("\u0661", False),
        (True, False),
        (None, False),
        (1j, False),
        ([1], False),
    ],
)
def test_is_numeric(value: object, expected: bool) -> None:
    assert is_numeric(value) is expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("text", "text"),
        (3, "3"),
        (2.5, "2.5"),
        (False, "False"),
        (None, "None"),
        ({"a": 1}, "{'a': 1}"),
        ({1, 2}, "{1, 2}"),
    ],
)
def test_inspect_value(value: object, expected: str) -> None:
    assert inspect_value(value) == expected


def test_inspect_value_keeps_mapping_order() -> None:
    assert inspect_value({"b": 1, "a": 2}) == "{'b': 1, 'a': 2}"


def test_inspect_value_colorize() -> None:
    assert inspect_value(3, colorize=True) == "\x1b[33m3\x1b[0m"
    assert inspect_value("s", colorize=True) == "\x1b[32ms\x1b[0m"
    assert inspect_value(None, colorize=True) == "\x1b[1mNone\x1b[0m"
