"""Custom exception hierarchy for realtype.

The classifiers and the test harness never raise; these exceptions
cover the edges of the program only (decoding user input, missing
optional UI packages).  Every user-visible error must inherit from
:class:`RealTypeError` so the CLI error boundary can render it.

Hierarchy
---------
RealTypeError
├── InvalidInputError
└── EnvironmentError
"""

from __future__ import annotations


class RealTypeError(Exception):
    """Base exception for all realtype errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Input -----------------------------------------------------------------

class InvalidInputError(RealTypeError):
    """Raised when text handed to the decoder is not a valid item array."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(RealTypeError):
    """Raised when a required runtime dependency is not available."""
