"""Pytest configuration for repository-relative imports and shared tables."""

import os
import sys

import matplotlib
import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

matplotlib.use("Agg")

from zstats.ztable import generate_z_table  # noqa: E402


@pytest.fixture(scope="session")
def default_z_table():
    """Full [-3.9, 3.9] table at 0.01 spacing, shared read-only across tests."""
    return generate_z_table()
