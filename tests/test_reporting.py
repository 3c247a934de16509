"""Tests for console formatting and interval summary tables."""

import pytest

from zstats.errors import InvalidArgument
from zstats.reporting import INTERVAL_COLUMNS, confidence_interval_table, format_interval
from zstats.stats.inference import ConfidenceIntervalResult


def test_format_interval():
    ci = ConfidenceIntervalResult(lower=48.04, upper=51.96, margin_of_error=1.96, z_score=1.96)
    assert format_interval(ci, decimals=2) == "50.00 ± 1.96 [48.04, 51.96] (z = 1.96)"


def test_confidence_interval_table_rows_follow_levels():
    df = confidence_interval_table(78, 6, 100, [0.90, 0.95, 0.99])
    assert list(df.columns) == INTERVAL_COLUMNS
    assert df["Confidence Level"].tolist() == [0.90, 0.95, 0.99]
    assert df["Margin of Error"].is_monotonic_increasing
    assert (df["Lower"] < 78).all()
    assert (df["Upper"] > 78).all()
    assert df.loc[1, "z"] == pytest.approx(1.959963984540054, abs=1e-8)


def test_confidence_interval_table_rejects_invalid_level():
    with pytest.raises(InvalidArgument):
        confidence_interval_table(78, 6, 100, [0.95, 1.0])
