"""
A Python package for normal, Student's t and chi-square distribution values.

Computes z-scores, margins of error and confidence intervals, and builds a
standard normal cumulative probability table (z-table) for export.

Modules:
    - stats: Numerical core (error function, probit, log-gamma, incomplete
      beta/gamma, t and chi-square CDFs, inference helpers).
    - ztable: Generates and queries the z-table.
    - output: Exports z-tables to CSV, JSON and HTML.
    - reporting: Formats intervals and interval summary tables.
    - plotting: Renders the z-table CDF figure.
"""

__version__ = "1.0.0"

from .errors import InvalidArgument
from .output import (
    export_z_table_to_csv,
    export_z_table_to_html,
    export_z_table_to_json,
    format_z_table_as_html,
    save_z_table,
)
from .stats import (
    ConfidenceIntervalResult,
    chi_square_cdf,
    confidence_interval,
    critical_z_value,
    erf,
    inverse_normal_cdf,
    lgamma,
    margin_of_error,
    normal_cdf,
    p_value_from_z_score,
    regularized_incomplete_beta,
    t_distribution_cdf,
    z_score,
)
from .ztable import (
    ZTableConfig,
    ZTableEntry,
    generate_z_table,
    lookup_probability,
    z_table_to_frame,
)

__all__ = [
    # Errors
    "InvalidArgument",
    # Numerical core
    "erf",
    "normal_cdf",
    "inverse_normal_cdf",
    "critical_z_value",
    "p_value_from_z_score",
    "lgamma",
    "regularized_incomplete_beta",
    "t_distribution_cdf",
    "chi_square_cdf",
    "z_score",
    "margin_of_error",
    "confidence_interval",
    "ConfidenceIntervalResult",
    # Z-table
    "ZTableConfig",
    "ZTableEntry",
    "generate_z_table",
    "lookup_probability",
    "z_table_to_frame",
    # Export
    "export_z_table_to_csv",
    "export_z_table_to_json",
    "export_z_table_to_html",
    "format_z_table_as_html",
    "save_z_table",
]
