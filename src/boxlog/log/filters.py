# topmark:header:start
#
#   project      : BoxLog
#   file         : filters.py
#   file_relpath : src/boxlog/log/filters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""String filters applied to log message text.

A filter is a ``str -> str`` function registered under a snake_case name.
Lookups accept the same name in ``snake_case``, ``dash-case`` or ``camelCase``
spelling, so ``"dash-case"``, ``"dashCase"`` and ``"dash_case"`` all resolve to
`dash_case`.

Example:
    ```python
    apply_filters("foo bar baz", ["dash-case", "upper_case"])  # 'FOO-BAR-BAZ'
    ```
"""

from __future__ import annotations

import random
import re
from typing import TYPE_CHECKING, Final

from boxlog.core.errors import UnknownFilterError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

_CAMEL_BOUNDARY_RE: Final[re.Pattern[str]] = re.compile(r"([a-z])([A-Z])")
_WHITESPACE_RE: Final[re.Pattern[str]] = re.compile(r"\s+")

LEET_MAP: Final[dict[int, str]] = str.maketrans(
    {
        "A": "4",
        "B": "8",
        "E": "3",
        "G": "6",
        "I": "1",
        "O": "0",
        "S": "5",
        "T": "7",
        "Z": "2",
        "a": "4",
        "e": "3",
        "i": "1",
        "o": "0",
        "s": "5",
    }
)


def _delimited(text: str, separator: str) -> str:
    """Split camelCase humps and whitespace runs with ``separator``, lower-cased."""
    text = _CAMEL_BOUNDARY_RE.sub(lambda m: m.group(1) + separator + m.group(2), text)
    return _WHITESPACE_RE.sub(lambda _m: separator, text).lower()


def camel_case(text: str) -> str:
    text = re.sub(r"[-_\s]+(.)?", lambda m: m.group(1).upper() if m.group(1) else "", text)
    return text[:1].lower() + text[1:] if text[:1].isupper() else text


def capitalize(text: str) -> str:
    """Upper-case the first letter of every sentence, lower-case the rest."""
    return re.sub(
        r"(^|[.!?]\s+)([a-z])",
        lambda m: m.group(1) + m.group(2).upper(),
        text.lower(),
    )


def dash_case(text: str) -> str:
    return _delimited(text, "-")


def dot_case(text: str) -> str:
    return _delimited(text, ".")


def leet(text: str) -> str:
    return text.translate(LEET_MAP)


def lower_case(text: str) -> str:
    return text.lower()


def path_case(text: str) -> str:
    return _delimited(text, "/")


def pipe_case(text: str) -> str:
    return _delimited(text, "|")


def random_case(text: str) -> str:
    return "".join(c.upper() if random.random() < 0.5 else c.lower() for c in text)


def reverse(text: str) -> str:
    return text[::-1]


def reverse_sentences(text: str) -> str:
    return ". ".join(reversed(text.split(". ")))


def reverse_words(text: str) -> str:
    return " ".join(reversed(text.split(" ")))


def snake_case(text: str) -> str:
    return _delimited(text, "_")


def space_case(text: str) -> str:
    return _delimited(text, " ")


def tilde_case(text: str) -> str:
    return _delimited(text, "~")


def title_case(text: str) -> str:
    """Upper-case the first character of every word, lower-case the rest."""
    return re.sub(r"\w\S*", lambda m: m.group(0)[:1].upper() + m.group(0)[1:].lower(), text)


def upper_case(text: str) -> str:
    return text.upper()


FILTERS: Final[dict[str, Callable[[str], str]]] = {
    "camel_case": camel_case,
    "capitalize": capitalize,
    "dash_case": dash_case,
    "dot_case": dot_case,
    "leet": leet,
    "lower_case": lower_case,
    "path_case": path_case,
    "pipe_case": pipe_case,
    "random_case": random_case,
    "reverse": reverse,
    "reverse_sentences": reverse_sentences,
    "reverse_words": reverse_words,
    "snake_case": snake_case,
    "space_case": space_case,
    "tilde_case": tilde_case,
    "title_case": title_case,
    "upper_case": upper_case,
}


def canonical_filter_name(name: str) -> str:
    """Return the snake_case spelling of a filter name.

    Args:
        name (str): ``"dashCase"``, ``"dash-case"`` or ``"dash_case"``.

    Returns:
        str: ``"dash_case"``.
    """
    snake = _CAMEL_BOUNDARY_RE.sub(r"\1_\2", name.strip())
    return snake.replace("-", "_").lower()


def resolve_filter(name: str) -> Callable[[str], str]:
    """Return the filter registered under ``name`` (any supported spelling).

    Raises:
        UnknownFilterError: If no filter is registered under that name.
    """
    found = FILTERS.get(canonical_filter_name(name))
    if found is None:
        raise UnknownFilterError(name)
    return found


def apply_filters(text: str, names: Iterable[str]) -> str:
    """Apply the named filters to ``text``, in order.

    Raises:
        UnknownFilterError: If one of the names is not registered.
    """
    for name in names:
        text = resolve_filter(name)(text)
    return text
