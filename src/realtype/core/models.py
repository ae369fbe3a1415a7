"""Domain models for realtype.

Labels are plain strings at heart: :class:`TypeLabel` is a ``str`` enum
so every member compares equal to (and sorts like) its spelling.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeAlias


class TypeLabel(str, Enum):
    """Closed set of labels produced by the classifiers."""

    # Shallow tags
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    BIGINT = "bigint"
    SYMBOL = "symbol"
    UNDEFINED = "undefined"
    OBJECT = "object"
    FUNCTION = "function"

    # Refinements only ``get_real_type`` produces
    NAN = "NaN"
    NULL = "null"
    INFINITY = "Infinity"
    DATE = "date"
    REGEXP = "regexp"
    SET = "set"
    MAP = "map"

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return repr(self.value)


TypeCount: TypeAlias = tuple[TypeLabel, int]
"""One ``(label, occurrences)`` pair of a real-type tally."""


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Outcome of one harness check."""

    block: str | None
    """Name of the enclosing block, or ``None`` before the first block."""

    label: str
    """What the check verifies."""

    passed: bool

    expected: Any

    actual: Any
