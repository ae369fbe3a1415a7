"""Value kinds that Python has no native spelling for.

Most run-time kinds map onto ordinary Python objects (``None`` is null,
``set`` is a set, ``datetime.date`` is a date...).  The few that do not
are modelled here as small marker types so the classifier can work over
a closed set of kinds:

* :data:`UNDEFINED` — the "no value at all" sentinel, distinct from ``None``.
* :class:`Symbol` — a unique, optionally described token.
* :class:`BigInt` — an integer explicitly tagged as arbitrary precision.
* :class:`Boxed` — a primitive wrapped in an object.
* :class:`Map` — a keyed collection, as opposed to a plain record ``dict``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final


class Undefined:
    """Type of the :data:`UNDEFINED` singleton."""

    _instance: Undefined | None = None

    def __new__(cls) -> Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False


UNDEFINED: Final[Undefined] = Undefined()


class Symbol:
    """A unique token.  Two symbols are never equal, even with the same description."""

    __slots__ = ("description",)

    def __init__(self, description: str | None = None) -> None:
        self.description = description

    def __repr__(self) -> str:
        if self.description is None:
            return "Symbol()"
        return f"Symbol({self.description})"


class BigInt(int):
    """An ``int`` tagged as a big integer."""

    def __repr__(self) -> str:
        return f"{int(self)}n"


@dataclass(frozen=True, slots=True)
class Boxed:
    """A primitive wrapped in an object.

    ``Boxed("12")`` is an object that holds a string, not a string.
    """

    value: Any


class Map(dict):
    """A keyed collection classified as ``map`` rather than ``object``."""

    def __repr__(self) -> str:
        return f"Map({dict.__repr__(self)})"
