"""Inline assertion-style test harness that reports to the console.

Usage::

    from realtype.cli import harness

    harness.test_block("get_type")
    harness.test("Boolean", get_type(True), "boolean")

Checks are observational: a failing :func:`test` prints what was
expected and what came back, then returns normally.  Nothing here
raises, stops later checks, or touches the process exit code.
"""

from __future__ import annotations

from typing import Any

from realtype.cli.console import output
from realtype.core.equality import are_equal
from realtype.core.models import CheckResult

OK_MARKER: str = "[OK]"
FAIL_MARKER: str = "[FAIL]"

_INDENT: int = 2


class HarnessReport:
    """Console reporter behind :func:`test` and :func:`test_block`.

    Keeps the open grouping (cosmetic indentation under a ``# name``
    heading) and every :class:`CheckResult` recorded so far.
    """

    def __init__(self, sink: Any = None) -> None:
        self._sink: Any = sink if sink is not None else output
        self._depth: int = 0
        self.block: str | None = None
        self.results: list[CheckResult] = []

    # ------------------------------------------------------------------
    # Grouping
    # ------------------------------------------------------------------

    def _line(self, text: str, **options: Any) -> None:
        self._sink.print(
            " " * (self._depth * _INDENT) + text,
            markup=False,
            soft_wrap=True,
            **options,
        )

    def _group(self, name: str) -> None:
        self._line(f"# {name}", style="bold")
        self._line("")
        self._depth += 1

    def _group_end(self) -> None:
        if self._depth > 0:
            self._depth -= 1

    def test_block(self, name: str) -> None:
        """Close the current grouping and open one labelled *name*."""
        self._group_end()
        self._group(name)
        self.block = name

    # ------------------------------------------------------------------
    # Checks
    # ------------------------------------------------------------------

    def test(self, label: str, actual: Any, expected: Any) -> bool:
        """Compare *actual* against *expected* and print the outcome."""
        passed = are_equal(actual, expected)
        self.results.append(
            CheckResult(
                block=self.block,
                label=label,
                passed=passed,
                expected=expected,
                actual=actual,
            )
        )

        if passed:
            self._line(f"{OK_MARKER} {label}", style="green")
            self._line("")
            return True

        self._line(f"{FAIL_MARKER} {label}", style="bold red")
        indent = self._depth * _INDENT
        self._line("Expected:")
        self._sink.pretty(expected, indent=indent)
        self._line("Actual:")
        self._sink.pretty(actual, indent=indent)
        self._line("")
        return False

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def passed(self) -> int:
        return sum(1 for result in self.results if result.passed)

    @property
    def failed(self) -> int:
        return len(self.results) - self.passed


default_report = HarnessReport()


def test(label: str, actual: Any, expected: Any) -> bool:
    """Check *actual* against *expected* on the default report."""
    return default_report.test(label, actual, expected)


def test_block(name: str) -> None:
    """Start a new labelled block on the default report."""
    default_report.test_block(name)
