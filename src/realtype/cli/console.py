"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) and the
test harness remain functional even when Rich is not installed.

Two proxies are exported: :data:`console` writes diagnostics to stderr,
:data:`output` writes command results and harness lines to stdout.
"""

from __future__ import annotations

import sys
from typing import Any

from realtype.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def _safe_repr(value: object) -> str:
	"""``repr`` that reports a failing ``__repr__`` instead of raising."""
	try:
		return repr(value)
	except Exception as exc:  # noqa: BLE001
		return f"<repr-error {str(exc)!r}>"


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console instance targeting stderr (or stdout)."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool = True) -> None:
		self._stderr = stderr

	def _plain_stream(self) -> Any:
		return sys.stderr if self._stderr else sys.stdout

	def print(self, *objects: object, **options: Any) -> None:
		"""Render with Rich when available, else plain print.

		*options* (``style``, ``markup``, ``soft_wrap``...) are forwarded
		to Rich and ignored by the plain fallback.
		"""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except EnvironmentError:
			print(*objects, file=self._plain_stream())
			return
		rich_console.print(*objects, **options)

	def pretty(self, value: object, *, indent: int = 0) -> None:
		"""Dump *value* for inspection, shifted right by *indent* columns."""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
			from rich.padding import Padding
			from rich.pretty import Pretty
		except (EnvironmentError, ModuleNotFoundError):
			print(" " * indent + _safe_repr(value), file=self._plain_stream())
			return
		rich_console.print(Padding(Pretty(value), (0, 0, 0, indent)))


console = _ConsoleProxy()
output = _ConsoleProxy(stderr=False)
