"""Structural equality used by the test harness."""

from __future__ import annotations

_ARRAY_TYPES: tuple[type, ...] = (list, tuple)


def _are_equal(a: object, b: object, active: set[tuple[int, int]]) -> bool:
    if a is b:
        return True
    try:
        if bool(a == b):
            return True
    except Exception:  # noqa: BLE001
        pass

    if not isinstance(a, _ARRAY_TYPES) or not isinstance(b, _ARRAY_TYPES):
        return False
    if len(a) != len(b):
        return False

    # A pair already being compared further up closes a cycle.
    key = (id(a), id(b))
    if key in active:
        return True
    active.add(key)
    try:
        return all(_are_equal(left, right, active) for left, right in zip(a, b))
    finally:
        active.discard(key)


def are_equal(a: object, b: object) -> bool:
    """Compare two values, descending into arrays element by element.

    Identity or ``==`` equality wins first.  Otherwise both operands must
    be arrays (``list`` or ``tuple``, interchangeably) of the same length
    whose elements are pairwise equal under this same rule.  Strings are
    never treated as arrays.

    Never raises: an ``==`` implementation that blows up or returns
    something without a truth value counts as "not equal", and arrays
    that contain themselves compare by shape.
    """
    try:
        return _are_equal(a, b, set())
    except RecursionError:
        return False
