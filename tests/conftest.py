"""Shared pytest fixtures and configuration for the realtype test suite.

Guidelines
----------
* Core tests must be pure — no side effects, no console.
* Harness tests record output through :class:`RecordingSink` unless
  they exercise the real console via ``capsys``.
* Rich absence is simulated with ``monkeypatch.setitem(sys.modules, ...)``.
"""

from __future__ import annotations

import sys
from typing import Any

import pytest


class RecordingSink:
    """Stand-in for the console proxy that keeps what was printed."""

    def __init__(self) -> None:
        self.lines: list[str] = []
        self.dumps: list[tuple[Any, int]] = []
        self.options: list[dict[str, Any]] = []

    def print(self, *objects: object, **options: Any) -> None:
        self.lines.append(" ".join(str(obj) for obj in objects))
        self.options.append(options)

    def pretty(self, value: object, *, indent: int = 0) -> None:
        self.dumps.append((value, indent))


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


RICH_MODULES: tuple[str, ...] = (
    "rich",
    "rich.console",
    "rich.markup",
    "rich.padding",
    "rich.pretty",
    "rich.table",
)


@pytest.fixture
def without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make every ``rich`` import fail for the duration of a test."""
    for name in RICH_MODULES:
        monkeypatch.setitem(sys.modules, name, None)
