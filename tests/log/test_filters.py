# topmark:header:start
#
#   project      : BoxLog
#   file         : test_filters.py
#   file_relpath : tests/log/test_filters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for message string filters (`boxlog.log.filters`)."""

from __future__ import annotations

import pytest

from boxlog.core.errors import ErrorCode, UnknownFilterError
from boxlog.log.filters import (
    FILTERS,
    apply_filters,
    canonical_filter_name,
    random_case,
    resolve_filter,
)


@pytest.mark.parametrize(
    ("name", "text", "expected"),
    [
        ("camel_case", "foo bar baz", "fooBarBaz"),
        ("camel_case", "Foo-bar_baz", "fooBarBaz"),
        ("capitalize", "hello WORLD. bye now", "Hello world. Bye now"),
        ("dash_case", "foo bar baz", "foo-bar-baz"),
        ("dash_case", "fooBar baz", "foo-bar-baz"),
        ("dot_case", "foo bar", "foo.bar"),
        ("path_case", "foo bar", "foo/bar"),
        ("pipe_case", "foo bar", "foo|bar"),
        ("snake_case", "Foo  Bar", "foo_bar"),
        ("space_case", "fooBar", "foo bar"),
        ("tilde_case", "foo bar", "foo~bar"),
        ("leet", "leet speak", "l33t 5p34k"),
        ("lower_case", "FoO", "foo"),
        ("upper_case", "FoO", "FOO"),
        ("reverse", "abc", "cba"),
        ("reverse_sentences", "One. Two. Three", "Three. Two. One"),
        ("reverse_words", "a b c", "c b a"),
        ("title_case", "hello wORLD", "Hello World"),
    ],
)
def test_filters(name: str, text: str, expected: str) -> None:
    assert FILTERS[name](text) == expected


def test_random_case_only_changes_case() -> None:
    text = "The quick brown fox"
    assert random_case(text).lower() == text.lower()


@pytest.mark.parametrize("name", ["dash_case", "dash-case", "dashCase", " Dash-Case "])
def test_filter_name_spellings(name: str) -> None:
    assert canonical_filter_name(name) == "dash_case"
    assert resolve_filter(name) is FILTERS["dash_case"]


def test_unknown_filter() -> None:
    with pytest.raises(UnknownFilterError) as excinfo:
        resolve_filter("shout")
    assert excinfo.value.code is ErrorCode.FILTER_UNKNOWN
    assert excinfo.value.name == "shout"
    assert isinstance(excinfo.value, LookupError)


def test_apply_filters_in_order() -> None:
    assert apply_filters("foo bar baz", ["dash-case", "upper_case"]) == "FOO-BAR-BAZ"
    assert apply_filters("foo bar baz", ["upper_case", "dash-case"]) == "foo-bar-baz"
    assert apply_filters("unchanged", []) == "unchanged"
