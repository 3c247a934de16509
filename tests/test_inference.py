import math

import pytest

from zstats.errors import InvalidArgument
from zstats.stats.inference import (
    ConfidenceIntervalResult,
    confidence_interval,
    margin_of_error,
    z_score,
)


def test_z_score():
    assert math.isclose(z_score(110, 100, 10), 1.0, abs_tol=0.001)
    assert math.isclose(z_score(85, 80, 5), 1.0)
    assert math.isclose(z_score(70, 80, 4), -2.5)


@pytest.mark.parametrize("std_dev", [0.0, -1.0, float("nan")])
def test_z_score_rejects_non_positive_std_dev(std_dev):
    with pytest.raises(InvalidArgument, match="Standard deviation must be positive"):
        z_score(1.0, 0.0, std_dev)


def test_margin_of_error():
    assert math.isclose(margin_of_error(10, 100, 1.96), 1.96, abs_tol=0.001)
    assert math.isclose(margin_of_error(6, 36, 2.0), 2.0)


@pytest.mark.parametrize("n", [0, -5, float("nan")])
def test_margin_of_error_rejects_non_positive_n(n):
    with pytest.raises(InvalidArgument, match="Sample size must be positive"):
        margin_of_error(1.0, n, 1.96)


def test_confidence_interval_bounds():
    ci = confidence_interval(50, 10, 100, 0.95)
    assert isinstance(ci, ConfidenceIntervalResult)
    assert 48 < ci.lower < 50
    assert 50 < ci.upper < 52
    assert ci.z_score == pytest.approx(1.959963984540054, abs=1e-8)
    assert ci.margin_of_error == pytest.approx(1.959963984540054, abs=1e-8)
    assert ci.upper - ci.lower == pytest.approx(2.0 * ci.margin_of_error)


def test_confidence_interval_widens_with_level():
    widths = [
        confidence_interval(78, 6, 100, level).margin_of_error
        for level in (0.80, 0.90, 0.95, 0.99)
    ]
    assert widths == sorted(widths)


def test_confidence_interval_as_dict():
    d = confidence_interval(0.0, 1.0, 1, 0.95).as_dict()
    assert set(d) == {"lower", "upper", "margin_of_error", "z_score"}
    assert d["lower"] == pytest.approx(-d["upper"])


@pytest.mark.parametrize("level", [0.0, 1.0, -0.5, 1.2, float("nan")])
def test_confidence_interval_rejects_invalid_level(level):
    with pytest.raises(InvalidArgument, match="Confidence level"):
        confidence_interval(50, 10, 100, level)


def test_confidence_interval_rejects_invalid_sample_size():
    with pytest.raises(InvalidArgument):
        confidence_interval(50, 10, 0, 0.95)


def test_confidence_interval_result_is_immutable():
    ci = confidence_interval(50, 10, 100, 0.95)
    with pytest.raises(AttributeError):
        ci.lower = 0.0
