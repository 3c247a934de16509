"""Format inference results for console output and summary tables.

Used by the command-line entry point after numerical work is done; values
are only rounded for display, never for further computation.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np
import pandas as pd

from .stats.inference import ConfidenceIntervalResult, confidence_interval

INTERVAL_COLUMNS = ["Confidence Level", "Lower", "Upper", "Margin of Error", "z"]


def _fmt(x: float, decimals: int) -> str:
    if not np.isfinite(x):
        return f"{x}"
    return f"{round(float(x), decimals):.{decimals}f}"


def format_interval(result: ConfidenceIntervalResult, decimals: int = 4) -> str:
    """Format an interval as ``center ± margin [lower, upper] (z = ...)``.

    Args:
        result (ConfidenceIntervalResult): Output of ``confidence_interval``.
        decimals (int, optional): Decimal places for every number.

    Returns:
        str: Human-readable interval summary.
    """
    center = 0.5 * (result.lower + result.upper)
    return (
        f"{_fmt(center, decimals)} ± {_fmt(result.margin_of_error, decimals)} "
        f"[{_fmt(result.lower, decimals)}, {_fmt(result.upper, decimals)}] "
        f"(z = {_fmt(result.z_score, decimals)})"
    )


def confidence_interval_table(
    mean: float, std_dev: float, n: int, levels: Iterable[float]
) -> pd.DataFrame:
    """Tabulate confidence intervals for several confidence levels.

    Args:
        mean (float): Sample mean.
        std_dev (float): Population standard deviation.
        n (int): Sample size.
        levels (Iterable[float]): Confidence levels in ``(0, 1)``.

    Returns:
        pandas.DataFrame: One row per level, in input order, with columns
        ``Confidence Level``, ``Lower``, ``Upper``, ``Margin of Error`` and
        ``z``.

    Raises:
        InvalidArgument: If any level or the sample size is invalid.
    """
    rows = []
    for level in levels:
        ci = confidence_interval(mean, std_dev, n, level)
        rows.append([float(level), ci.lower, ci.upper, ci.margin_of_error, ci.z_score])
    return pd.DataFrame(rows, columns=INTERVAL_COLUMNS)
