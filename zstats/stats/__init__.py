"""
Numerical core for zstats.

This subpackage provides pure-function approximations of the standard
probability distributions and the inference helpers built on them. All
functions operate on Python floats; no I/O, logging or shared state.

Modules:
    normal:
        Error function, standard normal CDF, Acklam inverse CDF, critical
        z values and p-values.

    special:
        Lanczos log-gamma, regularized incomplete beta (continued fraction)
        and regularized lower incomplete gamma.

    distributions:
        Student's t and chi-square CDFs.

    inference:
        z-scores, margins of error and confidence intervals.

Design Principle:
    This subpackage has no dependencies on the table, export or plotting
    modules. Invalid inputs raise ``zstats.errors.InvalidArgument``.
"""

from .distributions import chi_square_cdf, t_distribution_cdf
from .inference import (
    ConfidenceIntervalResult,
    confidence_interval,
    margin_of_error,
    z_score,
)
from .normal import (
    critical_z_value,
    erf,
    inverse_normal_cdf,
    normal_cdf,
    p_value_from_z_score,
)
from .special import (
    ContinuedFraction,
    beta_continued_fraction,
    lgamma,
    ln_beta,
    regularized_incomplete_beta,
    regularized_lower_gamma,
)

__all__ = [
    "erf",
    "normal_cdf",
    "inverse_normal_cdf",
    "critical_z_value",
    "p_value_from_z_score",
    "lgamma",
    "ln_beta",
    "ContinuedFraction",
    "beta_continued_fraction",
    "regularized_incomplete_beta",
    "regularized_lower_gamma",
    "t_distribution_cdf",
    "chi_square_cdf",
    "ConfidenceIntervalResult",
    "z_score",
    "margin_of_error",
    "confidence_interval",
]
