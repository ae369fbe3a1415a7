"""Table rendering for ``realtype classify`` and ``realtype count``.

Rows are collected by pure helpers and rendered as a Rich table, or as
a fixed-width plain-text table when Rich is not installed.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Any

from realtype.cli.console import output
from realtype.core.classifier import get_real_type, get_type
from realtype.core.models import TypeCount


# ---------------------------------------------------------------------------
# Row builders (pure)
# ---------------------------------------------------------------------------

def _describe(value: object) -> str:
    """Short ``repr`` for the value column."""
    text = repr(value)
    if len(text) > 40:
        return text[:37] + "..."
    return text


def classification_rows(items: Sequence[object]) -> list[tuple[str, str, str]]:
    """Return ``(value, type, real type)`` for every item."""
    return [
        (_describe(item), str(get_type(item)), str(get_real_type(item)))
        for item in items
    ]


def count_rows(counts: Sequence[TypeCount]) -> list[tuple[str, str]]:
    """Return ``(real type, count)`` rows preserving tally order."""
    return [(str(label), str(count)) for label, count in counts]


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _import_rich_table() -> type[Any] | None:
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        return None
    return Table


def _print_plain_table(
    title: str,
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
) -> None:
    """Render a table without Rich."""
    widths = [
        max([len(header), *(len(row[index]) for row in rows)])
        for index, header in enumerate(headers)
    ]
    total = sum(widths) + len(widths) - 1

    def _join(cells: Sequence[str]) -> str:
        return " ".join(f"{cell:<{width}}" for cell, width in zip(cells, widths)).rstrip()

    print(title, file=sys.stdout)
    print("=" * total, file=sys.stdout)
    print(_join(headers), file=sys.stdout)
    print("-" * total, file=sys.stdout)
    for row in rows:
        print(_join(row), file=sys.stdout)


def render_table(
    title: str,
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
) -> None:
    """Print *rows* under *headers*, with Rich when available."""
    table_class = _import_rich_table()
    if table_class is None:
        _print_plain_table(title, headers, rows)
        return

    from rich.markup import escape

    table = table_class(
        title=title,
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    for header in headers:
        table.add_column(header)
    for row in rows:
        table.add_row(*(escape(cell) for cell in row))
    output.print(table)


def render_classification(items: Sequence[object]) -> None:
    render_table("realtype classify", ("Value", "Type", "Real type"), classification_rows(items))


def render_counts(counts: Sequence[TypeCount]) -> None:
    render_table("realtype count", ("Real type", "Count"), count_rows(counts))
