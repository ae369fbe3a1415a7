"""Decode untyped JSON text into classifiable values.

This is the boundary where raw input enters the program.  Plain JSON
covers null, booleans, numbers, strings, arrays and records; Python's
JSON parser additionally accepts the ``NaN``, ``Infinity`` and
``-Infinity`` literals.  Every other value kind is spelled as a tagged
object::

    {"$type": "date", "value": "2024-05-01T12:00:00"}
    {"$type": "regexp", "value": "\\\\w+"}
    {"$type": "set", "value": [1, 2]}
    {"$type": "map", "value": [["a", 1], ["b", 2]]}
    {"$type": "bigint", "value": "987654321987654321"}
    {"$type": "symbol", "value": "id"}
    {"$type": "boxed", "value": "12"}
    {"$type": "function"}
    {"$type": "undefined"}
"""

from __future__ import annotations

import datetime
import json
import re
from collections.abc import Callable
from typing import Any

from realtype.core.values import UNDEFINED, BigInt, Boxed, Map, Symbol
from realtype.exceptions import InvalidInputError

TYPE_KEY: str = "$type"
VALUE_KEY: str = "value"

_HINT: str = 'Pass a JSON array, e.g. \'[1, "a", null, {"$type": "date", "value": "2024-01-01"}]\''


# ---------------------------------------------------------------------------
# Tagged-object decoders
# ---------------------------------------------------------------------------

def _noop(*_args: object, **_kwargs: object) -> None:
    return None


def _decode_bigint(payload: Any) -> BigInt:
    if isinstance(payload, bool) or not isinstance(payload, (int, str)):
        raise InvalidInputError(f"bigint value must be an integer or digit string, got {payload!r}")
    try:
        return BigInt(payload)
    except ValueError as exc:
        raise InvalidInputError(f"Invalid bigint value: {payload!r}") from exc


def _decode_symbol(payload: Any) -> Symbol:
    if payload is not None and not isinstance(payload, str):
        raise InvalidInputError(f"symbol description must be a string, got {payload!r}")
    return Symbol(payload)


def _decode_date(payload: Any) -> datetime.datetime:
    if not isinstance(payload, str):
        raise InvalidInputError(f"date value must be an ISO-8601 string, got {payload!r}")
    try:
        return datetime.datetime.fromisoformat(payload)
    except ValueError as exc:
        raise InvalidInputError(f"Invalid ISO-8601 date: {payload!r}") from exc


def _decode_regexp(payload: Any) -> re.Pattern[str]:
    if not isinstance(payload, str):
        raise InvalidInputError(f"regexp value must be a pattern string, got {payload!r}")
    try:
        return re.compile(payload)
    except re.error as exc:
        raise InvalidInputError(f"Invalid regular expression {payload!r}: {exc}") from exc


def _decode_set(payload: Any) -> set[Any]:
    if not isinstance(payload, list):
        raise InvalidInputError(f"set value must be an array, got {payload!r}")
    try:
        return set(payload)
    except TypeError as exc:
        raise InvalidInputError(f"set members must be hashable: {exc}") from exc


def _decode_map(payload: Any) -> Map:
    if not isinstance(payload, list) or not all(
        isinstance(entry, list) and len(entry) == 2 for entry in payload
    ):
        raise InvalidInputError(f"map value must be an array of [key, value] pairs, got {payload!r}")
    try:
        return Map((key, value) for key, value in payload)
    except TypeError as exc:
        raise InvalidInputError(f"map keys must be hashable: {exc}") from exc


_DECODERS: dict[str, Callable[[Any], Any]] = {
    "undefined": lambda _payload: UNDEFINED,
    "bigint": _decode_bigint,
    "symbol": _decode_symbol,
    "date": _decode_date,
    "regexp": _decode_regexp,
    "set": _decode_set,
    "map": _decode_map,
    "function": lambda _payload: _noop,
    "boxed": Boxed,
}


def _object_hook(record: dict[str, Any]) -> Any:
    """Turn ``{"$type": ...}`` records into marker values; keep the rest."""
    if TYPE_KEY not in record:
        return record
    kind = record[TYPE_KEY]
    decoder = _DECODERS.get(kind) if isinstance(kind, str) else None
    if decoder is None:
        raise InvalidInputError(
            f"Unknown {TYPE_KEY} tag: {kind!r}",
            hint=f"Known tags: {', '.join(sorted(_DECODERS))}",
        )
    return decoder(record.get(VALUE_KEY))


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def decode_items(text: str) -> list[Any]:
    """Parse *text* as a JSON array and return its decoded items.

    Raises
    ------
    InvalidInputError
        When *text* is not valid JSON, is not an array, or contains a
        malformed tagged object.
    """
    try:
        document = json.loads(text, object_hook=_object_hook)
    except ValueError as exc:
        # JSONDecodeError, or an integer literal past the int digit limit.
        raise InvalidInputError(f"Input is not valid JSON: {exc}", hint=_HINT) from exc

    if not isinstance(document, list):
        raise InvalidInputError(
            f"Expected a JSON array, got {type(document).__name__}",
            hint=_HINT,
        )
    return document
