"""Allow ``python -m realtype`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m realtype`` behaves identically to the ``realtype``
console script.
"""

from __future__ import annotations

from realtype.cli.app import cli

if __name__ == "__main__":
    cli()
