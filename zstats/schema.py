"""Define standardized column names for z-table DataFrames."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ZTableColumns:
    """Container for standardized column labels.

    These column names are used by the z-table DataFrame view and by every
    exporter, so CSV headers, JSON record keys and HTML header cells agree.

    Attributes:
        z: Column name for the standard normal deviate ``z`` (rounded to the
            table's key precision, two decimals by default).

        probability: Column name for the cumulative probability
            ``Phi(z) = P(Z <= z)`` (rounded to five decimals by default).
    """

    z: str = "Z"
    probability: str = "Cumulative Probability"


COLUMNS = ZTableColumns()
