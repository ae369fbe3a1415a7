"""Tests for the pure classifiers (core/classifier.py).

Every test is a pure function call — no I/O, no mocking.  Covered:

* Shallow tags for every value kind
* Real-type refinements and their evaluation order
* Sequence helpers, including the empty-input boundaries
* Sorted real-type tallies
"""

from __future__ import annotations

import datetime
import decimal
import fractions
import math
import re

import pytest

from realtype.core.classifier import (
    all_items_have_the_same_type,
    count_real_types,
    every_item_has_a_unique_real_type,
    get_real_type,
    get_real_types_of_items,
    get_type,
    get_types_of_items,
)
from realtype.core.models import TypeLabel
from realtype.core.values import UNDEFINED, BigInt, Boxed, Map, Symbol

SHALLOW_LABELS: frozenset[TypeLabel] = frozenset(
    {
        TypeLabel.BOOLEAN,
        TypeLabel.NUMBER,
        TypeLabel.STRING,
        TypeLabel.BIGINT,
        TypeLabel.SYMBOL,
        TypeLabel.UNDEFINED,
        TypeLabel.OBJECT,
        TypeLabel.FUNCTION,
    }
)


def _function() -> None:
    return None


class _Record:
    pass


# ---------------------------------------------------------------------------
# get_type
# ---------------------------------------------------------------------------

class TestGetType:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (True, "boolean"),
            (False, "boolean"),
            (123, "number"),
            (13.1, "number"),
            (math.nan, "number"),
            (math.inf, "number"),
            (-math.inf, "number"),
            (decimal.Decimal("1.5"), "number"),
            (fractions.Fraction(1, 3), "number"),
            ("whoo", "string"),
            ("", "string"),
            (BigInt(987654321987654321), "bigint"),
            (Symbol(), "symbol"),
            (UNDEFINED, "undefined"),
            (None, "object"),
            ([], "object"),
            ((), "object"),
            ({}, "object"),
            (Boxed("12"), "object"),
            (set(), "object"),
            (Map(), "object"),
            (datetime.date(2024, 1, 1), "object"),
            (re.compile(r"\w+"), "object"),
            (_Record(), "object"),
            (_function, "function"),
            (lambda: None, "function"),
            (len, "function"),
            (_Record, "function"),
        ],
    )
    def test_shallow_tag(self, value: object, expected: str) -> None:
        assert get_type(value) == expected

    def test_null_is_object(self) -> None:
        assert get_type(None) == "object"

    def test_undefined_is_undefined(self) -> None:
        assert get_type(UNDEFINED) == "undefined"

    def test_returns_type_label(self) -> None:
        assert get_type(1) is TypeLabel.NUMBER

    @pytest.mark.parametrize(
        "value",
        [True, 1, "a", None, [], {}, math.nan, datetime.date.today(), Map(), _function],
    )
    def test_only_shallow_labels(self, value: object) -> None:
        assert get_type(value) in SHALLOW_LABELS


# ---------------------------------------------------------------------------
# get_real_type
# ---------------------------------------------------------------------------

class TestGetRealType:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (math.nan, "NaN"),
            (float("nan"), "NaN"),
            (None, "null"),
            (math.inf, "Infinity"),
            (-math.inf, "Infinity"),
            (datetime.date(2024, 1, 1), "date"),
            (datetime.datetime(2024, 1, 1, 12, 30), "date"),
            (re.compile(r"\w+"), "regexp"),
            (set(), "set"),
            (frozenset({1}), "set"),
            (Map(), "map"),
            (Map({"a": 1}), "map"),
            ({}, "object"),
            ([], "object"),
            (Boxed("12"), "object"),
            (_Record(), "object"),
        ],
    )
    def test_refined_tag(self, value: object, expected: str) -> None:
        assert get_real_type(value) == expected

    @pytest.mark.parametrize(
        "value",
        [True, 0, -7, 13.1, "", "asd", BigInt(5), Symbol("x"), UNDEFINED, _function],
    )
    def test_primitives_match_shallow_tag(self, value: object) -> None:
        assert get_real_type(value) == get_type(value)

    @pytest.mark.parametrize("value", ["abc", "NaN", [], {}, None, UNDEFINED, Boxed(math.nan)])
    def test_nan_check_does_not_coerce(self, value: object) -> None:
        assert get_real_type(value) != "NaN"

    def test_string_infinity_is_a_string(self) -> None:
        assert get_real_type("Infinity") == "string"

    def test_plain_dict_is_not_a_map(self) -> None:
        assert get_real_type({"a": 1}) == "object"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (decimal.Decimal("NaN"), "NaN"),
            (decimal.Decimal("sNaN"), "NaN"),
            (decimal.Decimal("Infinity"), "Infinity"),
            (decimal.Decimal("-Infinity"), "Infinity"),
            (decimal.Decimal("1.5"), "number"),
            (fractions.Fraction(1, 3), "number"),
            (10**400, "number"),
            (BigInt(10**400), "bigint"),
        ],
    )
    def test_other_real_numbers(self, value: object, expected: str) -> None:
        assert get_real_type(value) == expected


# ---------------------------------------------------------------------------
# Sequence helpers
# ---------------------------------------------------------------------------

class TestTypesOfItems:
    def test_preserves_order(self) -> None:
        assert get_types_of_items([1, "a", None]) == ["number", "string", "object"]

    def test_real_types_preserve_order(self) -> None:
        assert get_real_types_of_items([None, math.nan, set()]) == ["null", "NaN", "set"]

    @pytest.mark.parametrize("items", [[], [1], [1, "a", None, math.inf, Map()]])
    def test_same_length_as_input(self, items: list[object]) -> None:
        assert len(get_types_of_items(items)) == len(items)
        assert len(get_real_types_of_items(items)) == len(items)

    def test_accepts_tuples(self) -> None:
        assert get_types_of_items((True, False)) == ["boolean", "boolean"]


class TestAllItemsHaveTheSameType:
    def test_all_numbers(self) -> None:
        assert all_items_have_the_same_type([11, 12, 13]) is True

    def test_all_strings(self) -> None:
        assert all_items_have_the_same_type(["11", "12", "13"]) is True

    def test_boxed_string_breaks_it(self) -> None:
        assert all_items_have_the_same_type(["11", Boxed("12"), "13"]) is False

    def test_nan_and_infinity_are_numbers(self) -> None:
        assert all_items_have_the_same_type([123, math.nan, math.inf]) is True

    def test_single_item(self) -> None:
        assert all_items_have_the_same_type([{}]) is True

    def test_null_and_object_share_shallow_tag(self) -> None:
        assert all_items_have_the_same_type([None, {}, [], set()]) is True

    def test_empty_is_false(self) -> None:
        assert all_items_have_the_same_type([]) is False


class TestEveryItemHasAUniqueRealType:
    def test_distinct_types(self) -> None:
        assert every_item_has_a_unique_real_type([True, 123, "123"]) is True

    def test_two_booleans(self) -> None:
        assert every_item_has_a_unique_real_type([True, 123, False]) is False

    def test_null_and_object_are_distinct(self) -> None:
        assert every_item_has_a_unique_real_type([None, {}]) is True

    def test_empty_is_true(self) -> None:
        assert every_item_has_a_unique_real_type([]) is True

    def test_one_of_every_kind(self) -> None:
        items = [
            "asd",
            13.1,
            BigInt(1),
            True,
            Symbol(),
            UNDEFINED,
            {},
            _function,
            math.nan,
            None,
            math.inf,
            datetime.datetime(2024, 1, 1),
            re.compile("x"),
            set(),
            Map(),
        ]
        assert every_item_has_a_unique_real_type(items) is True
        assert len(set(get_real_types_of_items(items))) == len(TypeLabel)


class TestCountRealTypes:
    def test_counts_and_sorts(self) -> None:
        result = count_real_types([True, None, not None, not not None, {}])
        assert result == [("boolean", 3), ("null", 1), ("object", 1)]

    def test_input_order_does_not_matter(self) -> None:
        result = count_real_types([{}, None, True, not None, not not None])
        assert result == [("boolean", 3), ("null", 1), ("object", 1)]

    def test_empty(self) -> None:
        assert count_real_types([]) == []

    def test_capitalised_labels_sort_first(self) -> None:
        result = count_real_types(["a", math.nan, math.inf, None, 1])
        assert [label for label, _ in result] == ["Infinity", "NaN", "null", "number", "string"]

    def test_output_is_sorted(self) -> None:
        items = [Map(), set(), 1, "b", True, None, math.nan, [], lambda: None, UNDEFINED]
        labels = [label.value for label, _ in count_real_types(items)]
        assert labels == sorted(labels)

    def test_counts_sum_to_length(self) -> None:
        items = [1, 2, "a", None, None, None]
        assert sum(count for _, count in count_real_types(items)) == len(items)
