import os

import pytest

from zstats.plotting import plot_z_table
from zstats.ztable import generate_z_table


def test_plot_z_table(tmp_path):
    table = generate_z_table(-3.0, 3.0, 0.1)
    out = plot_z_table(table, output_dir=str(tmp_path))
    assert out.endswith("z_table_cdf.png")
    assert os.path.exists(out)


def test_plot_z_table_rejects_empty(tmp_path):
    with pytest.raises(ValueError, match="empty"):
        plot_z_table([], output_dir=str(tmp_path))
