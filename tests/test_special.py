import math

import pytest

from zstats.errors import InvalidArgument
from zstats.stats.special import (
    beta_continued_fraction,
    lgamma,
    ln_beta,
    regularized_incomplete_beta,
    regularized_lower_gamma,
)


@pytest.mark.parametrize("x", [0.01, 0.3, 0.5, 1.0, 1.5, 2.0, 3.7, 10.0, 57.25, 171.0])
def test_lgamma_matches_stdlib(x):
    assert lgamma(x) == pytest.approx(math.lgamma(x), rel=1e-10, abs=1e-12)


def test_lgamma_factorial_values():
    # Gamma(n) = (n - 1)!
    assert lgamma(1.0) == pytest.approx(0.0, abs=1e-12)
    assert lgamma(2.0) == pytest.approx(0.0, abs=1e-12)
    assert lgamma(5.0) == pytest.approx(math.log(24.0), abs=1e-12)
    assert lgamma(0.5) == pytest.approx(0.5 * math.log(math.pi), abs=1e-12)


def test_lgamma_is_accurate_across_range():
    for x in (1.25, 2.5, 4.75, 8.0, 20.5, 100.0):
        assert lgamma(x) == pytest.approx(math.lgamma(x), rel=1e-13, abs=1e-13)


@pytest.mark.parametrize("x", [0.0, -1.0, -0.5, float("nan")])
def test_lgamma_rejects_non_positive(x):
    with pytest.raises(InvalidArgument, match="positive"):
        lgamma(x)


def test_ln_beta_symmetric_and_known():
    assert ln_beta(2.0, 3.0) == pytest.approx(math.log(1.0 / 12.0), abs=1e-12)
    assert ln_beta(2.5, 0.5) == pytest.approx(ln_beta(0.5, 2.5), abs=1e-14)


def test_incomplete_beta_short_circuits():
    assert regularized_incomplete_beta(-0.1, 2.0, 3.0) == 0.0
    assert regularized_incomplete_beta(1.1, 2.0, 3.0) == 0.0
    assert regularized_incomplete_beta(0.5, 0.0, 3.0) == 0.0
    assert regularized_incomplete_beta(0.5, 2.0, -1.0) == 0.0
    assert regularized_incomplete_beta(0.0, 2.0, 3.0) == 0.0
    assert regularized_incomplete_beta(1.0, 2.0, 3.0) == 1.0


def test_incomplete_beta_closed_forms():
    # I_x(1, 1) = x and I_x(a, 1) = x^a
    assert regularized_incomplete_beta(0.3, 1.0, 1.0) == pytest.approx(0.3, abs=1e-10)
    assert regularized_incomplete_beta(0.6, 3.0, 1.0) == pytest.approx(0.6**3, abs=1e-10)
    # I_x(1, b) = 1 - (1 - x)^b
    assert regularized_incomplete_beta(0.2, 1.0, 4.0) == pytest.approx(1.0 - 0.8**4, abs=1e-10)


def test_incomplete_beta_symmetry():
    x, a, b = 0.35, 4.5, 2.0
    lhs = regularized_incomplete_beta(x, a, b)
    rhs = 1.0 - regularized_incomplete_beta(1.0 - x, b, a)
    assert lhs == pytest.approx(rhs, abs=1e-10)


@pytest.mark.parametrize(
    "x, a, b",
    [(0.1, 0.5, 0.5), (0.4, 2.0, 3.0), (0.9, 5.0, 0.5), (0.5, 15.0, 0.5), (0.75, 30.0, 12.0)],
)
def test_incomplete_beta_matches_scipy(x, a, b):
    special = pytest.importorskip("scipy.special")
    assert regularized_incomplete_beta(x, a, b) == pytest.approx(
        float(special.betainc(a, b, x)), abs=1e-9
    )


def test_continued_fraction_reports_convergence():
    res = beta_continued_fraction(0.2, 2.0, 3.0)
    assert res.converged is True
    assert 1 <= res.iterations < 1000


def test_continued_fraction_iteration_cap_is_silent():
    res = beta_continued_fraction(0.2, 2.0, 3.0, max_iter=1, tol=0.0)
    assert res.converged is False
    assert res.iterations == 1
    assert math.isfinite(res.value)


def test_lower_gamma_closed_form_and_limits():
    # P(1, x) = 1 - exp(-x)
    for x in (0.1, 1.0, 2.5, 7.0):
        assert regularized_lower_gamma(1.0, x) == pytest.approx(1.0 - math.exp(-x), abs=1e-12)
    assert regularized_lower_gamma(2.0, 0.0) == 0.0
    assert regularized_lower_gamma(3.0, 200.0) == pytest.approx(1.0, abs=1e-12)


def test_lower_gamma_rejects_invalid():
    with pytest.raises(InvalidArgument):
        regularized_lower_gamma(0.0, 1.0)
    with pytest.raises(InvalidArgument):
        regularized_lower_gamma(1.0, -1.0)
    with pytest.raises(InvalidArgument):
        regularized_lower_gamma(float("nan"), 1.0)
    with pytest.raises(InvalidArgument):
        regularized_lower_gamma(1.0, float("nan"))
