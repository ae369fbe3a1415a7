"""``realtype selfcheck`` — the built-in demonstration suite.

Runs a fixed set of classifier checks through the console harness.
Every check is expected to print ``[OK]``; a ``[FAIL]`` line means the
classifiers regressed.
"""

from __future__ import annotations

import datetime
import math
import re

from realtype.cli.harness import HarnessReport
from realtype.core.classifier import (
    all_items_have_the_same_type,
    count_real_types,
    every_item_has_a_unique_real_type,
    get_real_types_of_items,
    get_type,
    get_types_of_items,
)
from realtype.core.values import UNDEFINED, BigInt, Boxed, Map, Symbol


def known_values() -> list[object]:
    """One sample of every value kind, each with a distinct real type."""
    return [
        "asd",
        13.1,
        BigInt("987654321987654321"),
        True,
        Symbol(),
        UNDEFINED,
        {},
        lambda: None,
        math.nan,
        None,
        math.inf,
        datetime.datetime.now(),
        re.compile(r"\w+"),
        set(),
        Map(),
    ]


def _check_get_type(report: HarnessReport) -> None:
    report.test_block("get_type")

    report.test("Boolean", get_type(True), "boolean")
    report.test("Number", get_type(123), "number")
    report.test("String", get_type("whoo"), "string")
    report.test("Array", get_type([]), "object")
    report.test("Object", get_type({}), "object")
    report.test("Function", get_type(lambda: None), "function")
    report.test("Undefined", get_type(UNDEFINED), "undefined")
    report.test("Null", get_type(None), "object")


def _check_same_type(report: HarnessReport) -> None:
    report.test_block("all_items_have_the_same_type")

    report.test("All values are numbers", all_items_have_the_same_type([11, 12, 13]), True)
    report.test("All values are strings", all_items_have_the_same_type(["11", "12", "13"]), True)
    report.test(
        "All values are strings but wait",
        all_items_have_the_same_type(["11", Boxed("12"), "13"]),
        False,
    )
    report.test(
        "Values like a number",
        all_items_have_the_same_type([123, math.nan, math.inf]),
        True,
    )
    report.test("Values like an object", all_items_have_the_same_type([{}]), True)


def _check_types_of_items(report: HarnessReport) -> None:
    report.test_block("get_types_of_items VS get_real_types_of_items")

    values = known_values()
    report.test(
        "Check basic types",
        get_types_of_items(values),
        [
            "string",
            "number",
            "bigint",
            "boolean",
            "symbol",
            "undefined",
            "object",
            "function",
            "number",
            "object",
            "number",
            "object",
            "object",
            "object",
            "object",
        ],
    )
    report.test(
        "Check real types",
        get_real_types_of_items(values),
        [
            "string",
            "number",
            "bigint",
            "boolean",
            "symbol",
            "undefined",
            "object",
            "function",
            "NaN",
            "null",
            "Infinity",
            "date",
            "regexp",
            "set",
            "map",
        ],
    )


def _check_unique_real_type(report: HarnessReport) -> None:
    report.test_block("every_item_has_a_unique_real_type")

    report.test(
        "All value types in the array are unique",
        every_item_has_a_unique_real_type([True, 123, "123"]),
        True,
    )
    report.test(
        "Two values have the same type",
        every_item_has_a_unique_real_type([True, 123, "123" == 123]),
        False,
    )
    report.test(
        "There are no repeated types in known values",
        every_item_has_a_unique_real_type(known_values()),
        True,
    )


def _check_count_real_types(report: HarnessReport) -> None:
    report.test_block("count_real_types")

    expected = [["boolean", 3], ["null", 1], ["object", 1]]
    report.test(
        "Count unique types of array items",
        count_real_types([True, None, not None, not not None, {}]),
        expected,
    )
    report.test(
        "Counted unique types are sorted",
        count_real_types([{}, None, True, not None, not not None]),
        expected,
    )


def run_selfcheck(report: HarnessReport | None = None) -> HarnessReport:
    """Run every demonstration block and return the report that recorded it."""
    if report is None:
        report = HarnessReport()

    _check_get_type(report)
    _check_same_type(report)
    _check_types_of_items(report)
    _check_unique_real_type(report)
    _check_count_real_types(report)
    return report
