"""CLI application entry point and command routing for realtype.

This module is the **sole error boundary** for the entire application.
It catches :class:`~realtype.exceptions.RealTypeError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No classification logic lives here — all work is delegated to the
  core layer; rendering lives in :mod:`realtype.cli.render`.
* ``realtype selfcheck`` exits with :data:`exit_codes.SUCCESS` even when
  checks fail: the harness reports, it does not enforce.
"""

from __future__ import annotations

import argparse
import sys

from realtype.cli import exit_codes
from realtype.cli.console import console
from realtype.exceptions import RealTypeError
from realtype.version import __version__

STDIN_MARKER: str = "-"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``realtype classify <json>`` — type and real type of every item
    * ``realtype count <json>``    — sorted real-type tally
    * ``realtype selfcheck``       — run the built-in harness suite
    * ``realtype --version``
    """
    parser = argparse.ArgumentParser(
        prog="realtype",
        description="Classify values by run-time type.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    commands = parser.add_subparsers(dest="command", metavar="<command>")

    items_help = "JSON array of values, or '-' to read it from stdin."
    classify = commands.add_parser("classify", help="Show the type and real type of each item.")
    classify.add_argument("items", help=items_help)
    count = commands.add_parser("count", help="Count items per real type, sorted by type.")
    count.add_argument("items", help=items_help)
    commands.add_parser("selfcheck", help="Run the built-in demonstration checks.")
    return parser


def _read_items_text(argument: str) -> str:
    if argument == STDIN_MARKER:
        return sys.stdin.read()
    return argument


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_classify(text: str) -> int:
    from realtype.cli.render import render_classification
    from realtype.core.decoding import decode_items

    render_classification(decode_items(text))
    return exit_codes.SUCCESS


def _handle_count(text: str) -> int:
    from realtype.cli.render import render_counts
    from realtype.core.classifier import count_real_types
    from realtype.core.decoding import decode_items

    render_counts(count_real_types(decode_items(text)))
    return exit_codes.SUCCESS


def _handle_selfcheck() -> int:
    from realtype.cli.selfcheck import run_selfcheck

    run_selfcheck()
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the realtype CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    if args.command == "classify":
        return _handle_classify(_read_items_text(args.items))
    if args.command == "count":
        return _handle_count(_read_items_text(args.items))
    return _handle_selfcheck()


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except RealTypeError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
