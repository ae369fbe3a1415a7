"""Pure run-time type classification.

Every function in this module is a **pure** transformation — no I/O,
no side effects, and no exceptions for any input value.

Two granularities are offered:

1. **Shallow** (:func:`get_type`) — one of eight coarse tags.  ``None``,
   arrays, records, dates and sets are all just ``object``.
2. **Real** (:func:`get_real_type`) — the shallow tag refined to tell
   NaN, null, Infinity, dates, regexps, sets and maps apart from the
   generic ``object`` bucket.
"""

from __future__ import annotations

import datetime
import decimal
import math
import numbers
import re
from collections import Counter
from collections.abc import Sequence

from realtype.core.models import TypeCount, TypeLabel
from realtype.core.values import BigInt, Map, Symbol, Undefined


# ---------------------------------------------------------------------------
# Scalar predicates
# ---------------------------------------------------------------------------

def _is_real_number(value: object) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _is_nan(value: object) -> bool:
    """Return ``True`` for a NaN real number (float, ``Decimal``...).

    Nothing is coerced: ``"abc"``, ``None`` or a list are simply not NaN,
    even though converting them to a number would produce one.
    """
    if isinstance(value, decimal.Decimal):
        return value.is_nan()
    if not _is_real_number(value):
        return False
    try:
        return math.isnan(value)
    except (TypeError, ValueError, OverflowError):
        return False


def _is_infinite(value: object) -> bool:
    """Return ``True`` for a positive or negative infinite real number."""
    if isinstance(value, decimal.Decimal):
        return value.is_infinite()
    if not _is_real_number(value):
        return False
    try:
        return math.isinf(value)
    except (TypeError, ValueError, OverflowError):
        return False


# ---------------------------------------------------------------------------
# Single values
# ---------------------------------------------------------------------------

def get_type(value: object) -> TypeLabel:
    """Return the shallow type tag of *value*.

    ``None`` and every composite (list, dict, set, date...) map to
    ``object``; anything callable maps to ``function``.
    """
    if isinstance(value, Undefined):
        return TypeLabel.UNDEFINED
    if isinstance(value, bool):
        return TypeLabel.BOOLEAN
    if isinstance(value, BigInt):
        return TypeLabel.BIGINT
    if isinstance(value, numbers.Number):
        return TypeLabel.NUMBER
    if isinstance(value, str):
        return TypeLabel.STRING
    if isinstance(value, Symbol):
        return TypeLabel.SYMBOL
    if value is not None and callable(value):
        return TypeLabel.FUNCTION
    return TypeLabel.OBJECT


def get_real_type(value: object) -> TypeLabel:
    """Return the refined type tag of *value*.

    First match wins: NaN, null, ±Infinity, then any non-object shallow
    tag as-is, then date / regexp / set / map, else ``object``.
    """
    if _is_nan(value):
        return TypeLabel.NAN
    if value is None:
        return TypeLabel.NULL
    if _is_infinite(value):
        return TypeLabel.INFINITY

    shallow = get_type(value)
    if shallow is not TypeLabel.OBJECT:
        return shallow

    if isinstance(value, datetime.date):
        return TypeLabel.DATE
    if isinstance(value, re.Pattern):
        return TypeLabel.REGEXP
    if isinstance(value, (set, frozenset)):
        return TypeLabel.SET
    if isinstance(value, Map):
        return TypeLabel.MAP
    return shallow


# ---------------------------------------------------------------------------
# Sequences
# ---------------------------------------------------------------------------

def get_types_of_items(items: Sequence[object]) -> list[TypeLabel]:
    """Return the shallow tag of every item, in input order."""
    return [get_type(item) for item in items]


def get_real_types_of_items(items: Sequence[object]) -> list[TypeLabel]:
    """Return the real tag of every item, in input order."""
    return [get_real_type(item) for item in items]


def all_items_have_the_same_type(items: Sequence[object]) -> bool:
    """Return ``True`` iff exactly one shallow tag occurs in *items*.

    An empty sequence has zero distinct tags, so the answer is ``False``.
    """
    return len(set(get_types_of_items(items))) == 1


def every_item_has_a_unique_real_type(items: Sequence[object]) -> bool:
    """Return ``True`` iff no two items share a real tag.

    An empty sequence is vacuously unique.
    """
    return len(set(get_real_types_of_items(items))) == len(items)


def count_real_types(items: Sequence[object]) -> list[TypeCount]:
    """Tally real tags and return ``(label, count)`` pairs sorted by label.

    Sorting is plain string comparison, so capitalised labels such as
    ``"Infinity"`` and ``"NaN"`` come before the lowercase ones.
    """
    counts = Counter(get_real_types_of_items(items))
    return sorted(counts.items(), key=lambda pair: pair[0].value)
