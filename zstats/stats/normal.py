"""Normal-distribution primitives: error function, CDF and probit.

All functions here are pure and work on Python floats; they use only
:mod:`math` so they can be called from any layer without importing numpy.
"""

from __future__ import annotations

import math

from ..errors import InvalidArgument

# Chebyshev-fitted coefficients for erfc(x) ~ t * exp(-x^2 + P(t)), highest
# order last. Absolute error of the resulting erf is below 1.2e-7.
_ERF_COEFFS = (
    -1.26551223,
    1.00002368,
    0.37409196,
    0.09678418,
    -0.18628806,
    0.27886807,
    -1.13520398,
    1.48851587,
    -0.82215223,
    0.17087277,
)

# Acklam's rational approximation for the standard normal quantile.
_ACKLAM_A = (
    -3.969683028665376e01,
    2.209460984245205e02,
    -2.759285104469687e02,
    1.383577518672690e02,
    -3.066479806614716e01,
    2.506628277459239e00,
)
_ACKLAM_B = (
    -5.447609879822406e01,
    1.615858368580409e02,
    -1.556989798598866e02,
    6.680131188771972e01,
    -1.328068155288572e01,
)
_ACKLAM_C = (
    -7.784894002430293e-03,
    -3.223964580411365e-01,
    -2.400758277161838e00,
    -2.549732539343734e00,
    4.374664141464968e00,
    2.938163982698783e00,
)
_ACKLAM_D = (
    7.784695709041462e-03,
    3.224671290700398e-01,
    2.445134137142996e00,
    3.754408661907416e00,
)

P_LOW = 0.02425
P_HIGH = 1.0 - P_LOW


def _horner(coeffs, x: float) -> float:
    """Evaluate a polynomial given highest-order coefficient first."""
    acc = 0.0
    for c in coeffs:
        acc = acc * x + c
    return acc


def erf(x: float) -> float:
    """Gauss error function.

    Args:
        x (float): Any finite real number.

    Returns:
        float: Approximation of ``erf(x)`` with absolute error below 1.2e-7.

    Note:
        The sign is applied after evaluating ``erfc(|x|)`` so ``erf(-x)`` is
        exactly ``-erf(x)``.

    References:
        Abramowitz & Stegun style rational approximation in
        ``t = 1 / (1 + 0.5 |x|)`` (Numerical Recipes ``erfcc``).
    """
    sign = -1.0 if x < 0 else 1.0
    ax = abs(float(x))
    t = 1.0 / (1.0 + 0.5 * ax)
    poly = _horner(reversed(_ERF_COEFFS), t)
    tau = t * math.exp(-ax * ax + poly)
    return sign * (1.0 - tau)


def normal_cdf(z: float) -> float:
    """Standard normal cumulative distribution function ``P(Z <= z)``."""
    return 0.5 * (1.0 + erf(float(z) / math.sqrt(2.0)))


def inverse_normal_cdf(p: float, mu: float = 0.0, sigma: float = 1.0) -> float:
    """Normal quantile (probit) function.

    Args:
        p (float): Cumulative probability in the open interval ``(0, 1)``.
        mu (float, optional): Mean of the target distribution. Defaults to
            ``0``.
        sigma (float, optional): Standard deviation of the target
            distribution. Defaults to ``1``.

    Returns:
        float: ``mu + sigma * z`` where ``z`` is the standard normal quantile
        of ``p``.

    Raises:
        InvalidArgument: If ``p`` is not strictly between 0 and 1.

    Note:
        Piecewise over the lower tail (``p < 0.02425``), the central region
        and the upper tail. Relative error is below 1.15e-9.

    References:
        P. J. Acklam, "An algorithm for computing the inverse normal
        cumulative distribution function" (2003).
    """
    p = float(p)
    if not (0.0 < p < 1.0):
        raise InvalidArgument("Probability must be strictly between 0 and 1.")

    if p < P_LOW:
        q = math.sqrt(-2.0 * math.log(p))
        z = _horner(_ACKLAM_C, q) / (_horner(_ACKLAM_D, q) * q + 1.0)
    elif p > P_HIGH:
        q = math.sqrt(-2.0 * math.log(1.0 - p))
        z = -_horner(_ACKLAM_C, q) / (_horner(_ACKLAM_D, q) * q + 1.0)
    else:
        q = p - 0.5
        r = q * q
        z = _horner(_ACKLAM_A, r) * q / (_horner(_ACKLAM_B, r) * r + 1.0)

    return float(mu) + float(sigma) * z


def critical_z_value(alpha: float) -> float:
    """Two-sided critical value ``z_{1 - alpha/2}`` for significance ``alpha``."""
    alpha = float(alpha)
    if not (0.0 < alpha < 1.0):
        raise InvalidArgument("Significance level alpha must be in (0, 1).")
    return inverse_normal_cdf(1.0 - alpha / 2.0)


def p_value_from_z_score(z: float, tails: int = 2) -> float:
    """P-value of a standard normal test statistic.

    Args:
        z (float): Observed z statistic.
        tails (int, optional): ``2`` for a two-tailed test (``2 * (1 - Phi(|z|))``)
            or ``1`` for an upper one-tailed test (``1 - Phi(z)``).

    Returns:
        float: P-value clipped to ``[0, 1]``.

    Raises:
        InvalidArgument: If ``tails`` is not 1 or 2.
    """
    if tails == 2:
        p = 2.0 * (1.0 - normal_cdf(abs(float(z))))
    elif tails == 1:
        p = 1.0 - normal_cdf(float(z))
    else:
        raise InvalidArgument("tails must be 1 or 2.")
    return min(max(p, 0.0), 1.0)
