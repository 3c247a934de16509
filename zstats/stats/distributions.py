"""Student's t and chi-square cumulative distribution functions."""

from __future__ import annotations

import math

from ..errors import InvalidArgument
from .special import regularized_incomplete_beta, regularized_lower_gamma

CHI_SQUARE_METHODS = ("series", "gamma")


def t_distribution_cdf(t: float, df: int) -> float:
    """CDF of Student's t distribution.

    Args:
        t (float): Value of the t statistic.
        df (int): Degrees of freedom (> 0).

    Returns:
        float: ``P(T <= t)``.

    Raises:
        InvalidArgument: If ``df <= 0``.

    Note:
        ``I_x(df/2, 1/2)`` with ``x = df / (df + t^2)`` is the two-sided tail
        mass ``P(|T| > |t|)``; symmetry about zero splits it between the
        tails.
    """
    if not df > 0:
        raise InvalidArgument("Degrees of freedom must be positive.")

    t = float(t)
    df = float(df)
    x = df / (df + t * t)
    tail = regularized_incomplete_beta(x, df / 2.0, 0.5)

    return 0.5 * tail if t < 0 else 1.0 - 0.5 * tail


def chi_square_cdf(x: float, df: int, method: str = "series") -> float:
    """CDF of the chi-square distribution.

    Args:
        x (float): Value (>= 0).
        df (int): Degrees of freedom (> 0).
        method (str, optional): ``"series"`` evaluates
            ``1 - exp(-x/2) * sum_{k < floor(df/2)} (x/2)^k / k!``, which is
            exact for even ``df`` only. ``"gamma"`` evaluates the regularized
            lower incomplete gamma ``P(df/2, x/2)`` and is exact for every
            ``df``. Defaults to ``"series"``.

    Returns:
        float: ``P(X <= x)``.

    Raises:
        InvalidArgument: If ``x < 0``, ``df <= 0`` or ``method`` is unknown.
    """
    if not (x >= 0 and df > 0):
        raise InvalidArgument("Invalid input for chi-square distribution.")
    if method not in CHI_SQUARE_METHODS:
        raise InvalidArgument(
            f"method must be one of {CHI_SQUARE_METHODS}, got {method!r}"
        )

    x = float(x)
    if x == 0.0:
        return 0.0

    if method == "gamma":
        return regularized_lower_gamma(0.5 * float(df), 0.5 * x)

    # term_k = exp(-x/2) (x/2)^k / k!
    half = x / 2.0
    term = math.exp(-half)
    total = 0.0
    for k in range(int(df) // 2):
        if k > 0:
            term *= half / k
        total += term
    return min(max(1.0 - total, 0.0), 1.0)
