"""Core layer — pure classification, equality and decoding.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli``.
* Classifiers and comparators never raise.
"""

from realtype.core.classifier import (
    all_items_have_the_same_type,
    count_real_types,
    every_item_has_a_unique_real_type,
    get_real_type,
    get_real_types_of_items,
    get_type,
    get_types_of_items,
)
from realtype.core.decoding import decode_items
from realtype.core.equality import are_equal
from realtype.core.models import CheckResult, TypeCount, TypeLabel
from realtype.core.values import UNDEFINED, BigInt, Boxed, Map, Symbol

__all__: list[str] = [
    "UNDEFINED",
    "BigInt",
    "CheckResult",
    "Boxed",
    "Map",
    "Symbol",
    "TypeCount",
    "TypeLabel",
    "all_items_have_the_same_type",
    "are_equal",
    "count_real_types",
    "decode_items",
    "every_item_has_a_unique_real_type",
    "get_real_type",
    "get_real_types_of_items",
    "get_type",
    "get_types_of_items",
]
