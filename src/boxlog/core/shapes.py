# topmark:header:start
#
#   project      : BoxLog
#   file         : shapes.py
#   file_relpath : src/boxlog/core/shapes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value shapes understood by the tree and table renderers.

A value is classified once, at recursion entry, into one of three shapes.
The renderers then ``match`` on the shape instead of scattering ``isinstance``
checks through the layout code.

Strings and bytes are scalars even though they are technically sequences.
Sets are not ordered and are left to the inspector as opaque scalars.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, TypeGuard


class Shape(str, Enum):
    """Closed set of value shapes.

    Attributes:
        SCALAR: Anything rendered as a single piece of text by the inspector.
        SEQUENCE: An ordered ``list`` or ``tuple``.
        MAPPING: Any ``collections.abc.Mapping`` (insertion order preserved).
    """

    SCALAR = "scalar"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


def shape_of(value: object) -> Shape:
    """Return the shape of ``value``."""
    if isinstance(value, Mapping):
        return Shape.MAPPING
    if isinstance(value, (list, tuple)):
        return Shape.SEQUENCE
    return Shape.SCALAR


def is_sequence(value: object) -> TypeGuard[list[Any] | tuple[Any, ...]]:
    """Type guard for the ``SEQUENCE`` shape."""
    return shape_of(value) is Shape.SEQUENCE


def is_mapping(value: object) -> TypeGuard[Mapping[Any, Any]]:
    """Type guard for the ``MAPPING`` shape."""
    return shape_of(value) is Shape.MAPPING


def is_container(value: object) -> bool:
    """Return True if ``value`` is a sequence or a mapping."""
    return shape_of(value) is not Shape.SCALAR
