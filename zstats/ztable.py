"""Generate and query the standard normal cumulative probability table.

The table is an ordered list of ``(z, probability)`` entries rather than a
dict keyed by float, so rounded keys never depend on binary float equality.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import numpy as np
import pandas as pd

from .errors import InvalidArgument
from .schema import COLUMNS
from .stats.normal import normal_cdf


@dataclass(frozen=True)
class ZTableConfig:
    """Generation settings for a z-table.

    Attributes:
        z_min: First z value in the table.
        z_max: Last z value in the table (inclusive).
        step: Spacing between consecutive z values.
        z_decimals: Decimal places kept for z keys.
        probability_decimals: Decimal places kept for probabilities.
    """

    z_min: float = -3.9
    z_max: float = 3.9
    step: float = 0.01
    z_decimals: int = 2
    probability_decimals: int = 5


DEFAULT_CONFIG = ZTableConfig()


@dataclass(frozen=True)
class ZTableEntry:
    z: float
    probability: float


ZTable = List[ZTableEntry]


def z_grid(z_min: float, z_max: float, step: float, decimals: int = 2) -> np.ndarray:
    """Return the rounded, ascending z grid ``z_min + i * step``.

    The grid is built from integer indices so repeated float addition cannot
    drift past ``z_max`` or drop the final point.

    Raises:
        InvalidArgument: If ``step <= 0``, ``step`` is finer than the key
            precision ``10**-decimals`` (rounded keys would repeat), or
            ``z_min > z_max``.
    """
    if not step > 0:
        raise InvalidArgument("Step must be positive.")
    if step < 10.0 ** (-decimals) - 1e-12:
        raise InvalidArgument(
            f"Step {step} is finer than the key precision of {decimals} decimals."
        )
    if not z_min <= z_max:
        raise InvalidArgument("z_min must not exceed z_max.")

    n_steps = int(np.floor((z_max - z_min) / step + 1e-9))
    grid = z_min + step * np.arange(n_steps + 1, dtype=float)
    # adding 0.0 turns -0.0 into 0.0
    return np.round(grid, decimals) + 0.0


def generate_z_table(
    z_min: Optional[float] = None,
    z_max: Optional[float] = None,
    step: Optional[float] = None,
    config: ZTableConfig = DEFAULT_CONFIG,
) -> ZTable:
    """Tabulate ``Phi(z)`` over a closed range.

    Args:
        z_min (float, optional): First z value. Defaults to ``config.z_min``.
        z_max (float, optional): Last z value. Defaults to ``config.z_max``.
        step (float, optional): Grid spacing. Defaults to ``config.step``.
        config (ZTableConfig, optional): Rounding and default range
            settings.

    Returns:
        list[ZTableEntry]: Entries in ascending z order, keys rounded to
        ``config.z_decimals`` and probabilities to
        ``config.probability_decimals``.

    Raises:
        InvalidArgument: If the step is non-positive or finer than
            ``config.z_decimals`` allows, or the range is empty.
    """
    z_min = config.z_min if z_min is None else float(z_min)
    z_max = config.z_max if z_max is None else float(z_max)
    step = config.step if step is None else float(step)

    table: ZTable = []
    for z in z_grid(z_min, z_max, step, config.z_decimals):
        z = float(z)
        prob = round(normal_cdf(z), config.probability_decimals)
        table.append(ZTableEntry(z=z, probability=prob))
    return table


def lookup_probability(
    table: ZTable, z: float, tolerance: Optional[float] = None, z_decimals: int = 2
) -> float:
    """Return the probability stored for the entry nearest ``z``.

    Args:
        table (list[ZTableEntry]): Table from :func:`generate_z_table`.
        z (float): Query value.
        tolerance (float, optional): Maximum accepted distance between ``z``
            and the nearest key. Defaults to half a unit in the last kept
            decimal of the keys.
        z_decimals (int, optional): Key precision used for the default
            tolerance.

    Raises:
        KeyError: If the table is empty or no key lies within tolerance.
    """
    if not table:
        raise KeyError(z)
    if tolerance is None:
        tolerance = 0.5 * 10.0 ** (-z_decimals)

    nearest = min(table, key=lambda entry: abs(entry.z - z))
    if abs(nearest.z - z) > tolerance + 1e-12:
        raise KeyError(z)
    return nearest.probability


def z_table_to_frame(table: ZTable) -> pd.DataFrame:
    """Return the table as a two-column DataFrame in table order."""
    return pd.DataFrame(
        {
            COLUMNS.z: [entry.z for entry in table],
            COLUMNS.probability: [entry.probability for entry in table],
        },
        columns=[COLUMNS.z, COLUMNS.probability],
    )
