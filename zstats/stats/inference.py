"""Inference helpers built on the normal quantile function."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Dict

from ..errors import InvalidArgument
from .normal import inverse_normal_cdf


@dataclass(frozen=True)
class ConfidenceIntervalResult:
    """Two-sided confidence interval for a population mean.

    Attributes:
        lower: Lower bound, ``mean - margin_of_error``.
        upper: Upper bound, ``mean + margin_of_error``.
        margin_of_error: Half-width of the interval, ``z * sigma / sqrt(n)``.
        z_score: Critical value ``z_{1 - alpha/2}`` used for the interval.
    """

    lower: float
    upper: float
    margin_of_error: float
    z_score: float

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


def z_score(x: float, mean: float, std_dev: float) -> float:
    """Standardize ``x`` as ``(x - mean) / std_dev``.

    Raises:
        InvalidArgument: If ``std_dev <= 0``.
    """
    if not std_dev > 0:
        raise InvalidArgument("Standard deviation must be positive.")
    return (float(x) - float(mean)) / float(std_dev)


def margin_of_error(std_dev: float, n: int, z: float) -> float:
    """Margin of error ``z * std_dev / sqrt(n)``.

    Raises:
        InvalidArgument: If ``n <= 0``.
    """
    if not n > 0:
        raise InvalidArgument("Sample size must be positive.")
    return float(z) * (float(std_dev) / math.sqrt(n))


def confidence_interval(
    mean: float, std_dev: float, n: int, confidence_level: float
) -> ConfidenceIntervalResult:
    """Normal-theory confidence interval for a population mean.

    Args:
        mean (float): Sample mean.
        std_dev (float): Population standard deviation (same unit as
            ``mean``).
        n (int): Sample size (> 0).
        confidence_level (float): Coverage probability in ``(0, 1)``, for
            example ``0.95``.

    Returns:
        ConfidenceIntervalResult: Bounds, margin of error and the critical z
        value.

    Raises:
        InvalidArgument: If ``confidence_level`` is not strictly between 0
            and 1, or ``n <= 0``.
    """
    if not (0.0 < confidence_level < 1.0):
        raise InvalidArgument("Confidence level must be between 0 and 1.")

    alpha = 1.0 - float(confidence_level)
    z = inverse_normal_cdf(1.0 - alpha / 2.0)
    error = margin_of_error(std_dev, n, z)

    return ConfidenceIntervalResult(
        lower=float(mean) - error,
        upper=float(mean) + error,
        margin_of_error=error,
        z_score=z,
    )
