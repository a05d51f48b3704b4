# topmark:header:start
#
#   project      : BoxLog
#   file         : template.py
#   file_relpath : src/boxlog/log/template.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Split `str.format` templates into literal text and resolved fields.

Log messages are written as ordinary format templates:

```python
log.info("loaded {} rows from {path!r}", 12, path="data.json")
```

`iter_template` walks such a template and yields, in order, each literal chunk
and each replacement field resolved against the call arguments. The caller
decides how each field value is displayed (plain text, tree, table...), which
is why ``str.format`` itself is not used directly.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping, Sequence


@dataclass(frozen=True, slots=True)
class Field:
    """A replacement field resolved against the call arguments.

    Attributes:
        value (Any): The argument value (after ``!r``/``!s``/``!a`` conversion).
        format_spec (str): The field's format spec (possibly empty).
        converted (bool): Whether a conversion flag was applied.
    """

    value: Any
    format_spec: str
    converted: bool


_FORMATTER = string.Formatter()


class _Numbering:
    """Field numbering state shared by a template and its nested format specs."""

    def __init__(self) -> None:
        self.auto_index = 0
        self.style: str | None = None

    def resolve(self, field_name: str) -> str:
        """Return ``field_name`` with automatic numbering applied."""
        if field_name == "" or field_name[0] in ".[":
            if self.style == "manual":
                raise ValueError(
                    "cannot switch from manual field specification to automatic field numbering"
                )
            self.style = "auto"
            field_name = f"{self.auto_index}{field_name}"
            self.auto_index += 1
        elif field_name[0].isdigit():
            if self.style == "auto":
                raise ValueError(
                    "cannot switch from automatic field numbering to manual field specification"
                )
            self.style = "manual"
        return field_name


def _lookup(
    field_name: str,
    conversion: str | None,
    args: Sequence[Any],
    kwargs: Mapping[str, Any],
    numbering: _Numbering,
) -> Any:
    value, _key = _FORMATTER.get_field(numbering.resolve(field_name), args, kwargs)
    if conversion:
        value = _FORMATTER.convert_field(value, conversion)
    return value


def _expand_spec(
    format_spec: str,
    args: Sequence[Any],
    kwargs: Mapping[str, Any],
    numbering: _Numbering,
) -> str:
    """Substitute nested fields such as ``{width}`` in ``{:>{width}}``."""
    if "{" not in format_spec:
        return format_spec
    pieces: list[str] = []
    for literal, field_name, nested_spec, conversion in _FORMATTER.parse(format_spec):
        pieces.append(literal)
        if field_name is not None:
            value = _lookup(field_name, conversion, args, kwargs, numbering)
            pieces.append(format(value, nested_spec or ""))
    return "".join(pieces)


def iter_template(
    template: str,
    args: Sequence[Any],
    kwargs: Mapping[str, Any],
) -> Iterator[tuple[str, Field | None]]:
    """Yield ``(literal, field)`` pairs for ``template``.

    ``field`` is ``None`` for a trailing literal without replacement field.
    Automatic (``{}``) and explicit (``{0}``, ``{name}``, ``{0.attr}``) numbering
    follow `str.format`, including the rule that both styles cannot be mixed.
    Nested fields inside a format spec (``{:>{}}``) are substituted first, and
    take their automatic numbers after the field that holds them.

    Args:
        template (str): A `str.format` template.
        args (Sequence[Any]): Positional arguments.
        kwargs (Mapping[str, Any]): Keyword arguments.

    Raises:
        ValueError: On malformed templates or mixed field numbering.
        IndexError: If a positional field has no matching argument.
        KeyError: If a named field has no matching argument.
    """
    numbering = _Numbering()
    for literal, field_name, format_spec, conversion in _FORMATTER.parse(template):
        if field_name is None:
            yield literal, None
            continue

        value = _lookup(field_name, conversion, args, kwargs, numbering)
        spec = _expand_spec(format_spec or "", args, kwargs, numbering)
        yield literal, Field(value, spec, bool(conversion))
