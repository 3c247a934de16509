"""Render the standard normal CDF from a precomputed z-table.

Plotting functions receive tables produced elsewhere and only draw them;
no probabilities are recomputed here.
"""

from __future__ import annotations

import os

import matplotlib.pyplot as plt
import numpy as np

from .ztable import ZTable

FIGURE_NAME = "z_table_cdf.png"


def setup_plot_style():
    """High-legibility style for black-and-white report figures."""
    plt.style.use("default")
    plt.rcParams.update(
        {
            "font.family": "serif",
            "font.serif": ["Times New Roman", "Times", "Nimbus Roman", "DejaVu Serif"],
            "mathtext.fontset": "stix",
            "font.size": 12,
            "axes.titlesize": 14,
            "axes.labelsize": 12,
            "legend.fontsize": 11,
            "figure.dpi": 120,
            "savefig.dpi": 300,
            "savefig.bbox": "tight",
            "axes.spines.top": False,
            "axes.spines.right": False,
            "grid.alpha": 0.25,
            "grid.linestyle": "--",
            "legend.frameon": False,
        }
    )


def plot_z_table(table: ZTable, output_dir: str = "output") -> str:
    """Plot cumulative probability against z and save it as PNG.

    Args:
        table (list[ZTableEntry]): Output from ``generate_z_table``.
        output_dir (str): Directory where the figure is written.

    Returns:
        str: Path of the saved ``z_table_cdf.png``.

    Raises:
        ValueError: If ``table`` is empty.
    """
    if not table:
        raise ValueError("Cannot plot an empty z-table.")

    setup_plot_style()
    os.makedirs(output_dir, exist_ok=True)

    z = np.array([entry.z for entry in table], dtype=float)
    prob = np.array([entry.probability for entry in table], dtype=float)

    fig, ax = plt.subplots(figsize=(7.0, 4.2))
    ax.plot(z, prob, color="black", linewidth=2.0, label=r"$\Phi(z)$")
    ax.axhline(0.5, color="0.5", linewidth=1.0, linestyle=":")
    ax.axvline(0.0, color="0.5", linewidth=1.0, linestyle=":")
    ax.set_xlabel(r"$z$")
    ax.set_ylabel("Cumulative probability")
    ax.set_xlim(z.min(), z.max())
    ax.set_ylim(0.0, 1.0)
    ax.grid(True)
    ax.legend(loc="upper left")

    out_path = os.path.join(output_dir, FIGURE_NAME)
    fig.savefig(out_path)
    plt.close(fig)
    return out_path
