"""Exception types raised by zstats."""

from __future__ import annotations


class InvalidArgument(ValueError):
    """Raised when an input lies outside the domain of a statistical routine.

    Subclasses :class:`ValueError` so callers that already guard numerical
    code with ``except ValueError`` keep working.
    """
