"""realtype — run-time type classification helpers.

Pure classifiers live in :mod:`realtype.core`; the console test harness
and command line live in :mod:`realtype.cli`.
"""

from realtype.version import __version__

__all__: list[str] = ["__version__"]
